"""Pydantic model describing a discovered disc image."""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class CatalogEntry(BaseModel):
    """A disc image found in the input directory.

    ``display_name`` is the filename with every extension removed and is what
    the menu shows; ``source_path`` is handed to extract-xiso.
    """

    model_config = ConfigDict(frozen=True)

    display_name: str
    source_path: Path
