"""Utility helpers shared across the auto-xiso-extractor codebase."""

from .config import AppConfig, load_config
from .logging import configure_logging, get_logger
from .paths import ensure_directory, normalise_path

__all__ = [
    "AppConfig",
    "load_config",
    "configure_logging",
    "get_logger",
    "ensure_directory",
    "normalise_path",
]
