"""Filesystem scanning utilities for building the ROM catalog."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import List, Sequence, Union

from autoxiso.errors import PathMissingError
from autoxiso.utils.config import normalise_extension
from autoxiso.utils.logging import get_logger
from autoxiso.utils.paths import ensure_directory

from .schema import CatalogEntry


LOGGER = get_logger(__name__)
DEFAULT_EXTENSIONS = (".iso", ".xiso")


def display_name(filename: Union[str, PurePath]) -> str:
    """Strip every extension from the last component of ``filename``.

    ``"game.part1.iso"`` becomes ``"game"``. Names carrying a dot in their
    title lose everything after it as well.
    """

    name = PurePath(filename).name
    while "." in name:
        name = name[: name.rindex(".")]
    return name


@dataclass(slots=True)
class ScanConfig:
    """Configuration parameters controlling scan behaviour."""

    root: Path
    extensions: Sequence[str] = field(default=DEFAULT_EXTENSIONS)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.extensions = tuple(
            sorted({ext for ext in (normalise_extension(item) for item in self.extensions) if ext})
        )


class CatalogScanner:
    """List disc images sitting directly inside a directory."""

    def _matches(self, path: Path, extensions: Sequence[str]) -> bool:
        return path.suffix.lower() in extensions

    def scan(self, config: ScanConfig) -> List[CatalogEntry]:
        root = config.root
        if ensure_directory(root):
            LOGGER.info("Created missing input directory %s", root)
            return []

        try:
            candidates = [path for path in root.iterdir() if path.is_file()]
        except OSError as exc:
            raise PathMissingError(f"Unable to list {root}: {exc}") from exc

        entries = [
            CatalogEntry(display_name=display_name(path.name), source_path=path)
            for path in candidates
            if self._matches(path, config.extensions)
        ]
        entries.sort(key=lambda entry: (entry.display_name, entry.source_path.name))
        LOGGER.info("Scanned %s: %d of %d files matched", root, len(entries), len(candidates))
        return entries
