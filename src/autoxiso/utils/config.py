"""Configuration helpers for auto-xiso-extractor."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("autoxiso.yml")


def normalise_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if not ext:
        return ext
    return ext if ext.startswith(".") else f".{ext}"


class AppConfig(BaseModel):
    """Application level configuration.

    Blank path values are kept as ``None`` rather than collapsing to the
    current directory, so the session can refuse to start with them.
    """

    input_dir: Optional[Path] = Field(default=Path("./input/"))
    output_dir: Optional[Path] = Field(default=Path("./output/"))
    extractor_path: Optional[Path] = Field(default=Path("./dependents/extract-xiso.exe"))
    extensions: List[str] = Field(default_factory=lambda: [".iso", ".xiso"])

    @field_validator("input_dir", "output_dir", "extractor_path", mode="before")
    @classmethod
    def blank_path_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("extensions")
    @classmethod
    def normalise_extensions(cls, value: List[str]) -> List[str]:
        return [ext for ext in (normalise_extension(item) for item in value) if ext]


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults."""

    data: Dict[str, Any] = {}
    if path.exists():
        LOGGER.debug("Loading configuration from %s", path)
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        LOGGER.debug("No configuration at %s, using defaults", path)
    return AppConfig(**data)
