"""Extraction helpers: the extract-xiso process and output folder cleanup."""

from .extractor import XisoExtractor
from .folders import list_output_folders, strip_folder_extension, stripped_name

__all__ = [
    "XisoExtractor",
    "list_output_folders",
    "strip_folder_extension",
    "stripped_name",
]
