"""Mutable state carried between menu cycles."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from autoxiso.catalog.schema import CatalogEntry


@dataclass(slots=True)
class SessionState:
    """Catalog, readiness flag and the one-shot header message."""

    catalog: Tuple[CatalogEntry, ...] = ()
    catalog_ready: bool = False
    message: str = ""

    def replace_catalog(self, entries: Iterable[CatalogEntry]) -> None:
        self.catalog = tuple(entries)
        self.catalog_ready = bool(self.catalog)

    def clear_catalog(self) -> None:
        self.catalog = ()
        self.catalog_ready = False
