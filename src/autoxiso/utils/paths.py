"""Path utility helpers."""
from __future__ import annotations

import os
from pathlib import Path

from autoxiso.errors import PathMissingError


def normalise_path(path: Path) -> Path:
    """Return an absolute path, folding ``\\`` to ``/`` on Windows only.

    On POSIX a backslash is an ordinary filename character and is kept.
    """

    if os.name == "nt":
        path = Path(str(path).replace("\\", "/"))
    return Path(path).expanduser().resolve()


def ensure_directory(path: Path) -> bool:
    """Create ``path`` if needed and return ``True`` when it was created.

    Raises :class:`PathMissingError` when the directory cannot be created.
    """

    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PathMissingError(f"Unable to create directory {path}: {exc}") from exc
    return True
