"""Exception hierarchy shared by the catalog, extractor and session layers."""
from __future__ import annotations


class AutoXisoError(Exception):
    """Base class for recoverable errors reported back to the menu."""


class PathMissingError(AutoXisoError):
    """An input or output directory is absent and could not be created."""


class ExecutableMissingError(AutoXisoError):
    """The extract-xiso executable was not found at its configured path."""


class ProcessLaunchError(AutoXisoError):
    """The extractor process could not be started."""


class RenameConflictError(AutoXisoError):
    """An output folder could not be renamed to its stripped name."""


class InvalidUserInputError(AutoXisoError, ValueError):
    """A prompt answer could not be understood."""
