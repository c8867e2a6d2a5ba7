"""Helpers that strip extensions from extracted output folders."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from autoxiso.errors import PathMissingError, RenameConflictError
from autoxiso.utils.logging import get_logger
from autoxiso.utils.paths import ensure_directory


LOGGER = get_logger(__name__)


def list_output_folders(output_dir: Path) -> List[Path]:
    """Return the immediate subdirectories of ``output_dir``, creating it if absent."""

    ensure_directory(output_dir)
    try:
        return sorted(path for path in output_dir.iterdir() if path.is_dir())
    except OSError as exc:
        raise PathMissingError(f"Unable to list {output_dir}: {exc}") from exc


def stripped_name(folder_name: str) -> Optional[str]:
    """Return the text before the first ``.``, or ``None`` when there is no dot."""

    if "." not in folder_name:
        return None
    return folder_name[: folder_name.index(".")]


def strip_folder_extension(folder: Path) -> Optional[Path]:
    """Rename ``folder`` to its stripped name and return the new path.

    Returns ``None`` for folders without a dot. Raises
    :class:`RenameConflictError` when the target is taken or the rename fails.
    """

    new_name = stripped_name(folder.name)
    if new_name is None:
        return None
    if not new_name:
        raise RenameConflictError(f"Cannot rename '{folder}': nothing left before the first '.'")

    target = folder.with_name(new_name)
    if target.exists():
        raise RenameConflictError(f"Cannot rename '{folder}': '{target}' already exists")
    try:
        folder.rename(target)
    except OSError as exc:
        raise RenameConflictError(f"Cannot rename '{folder}' to '{target}': {exc}") from exc
    LOGGER.info("Renamed %s to %s", folder, target)
    return target
