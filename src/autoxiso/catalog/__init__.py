"""Catalog package providing disc image discovery and naming."""

from .scanner import CatalogScanner, ScanConfig, display_name
from .schema import CatalogEntry

__all__ = [
    "CatalogEntry",
    "CatalogScanner",
    "ScanConfig",
    "display_name",
]
