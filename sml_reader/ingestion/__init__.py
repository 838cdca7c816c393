"""Ingestion layer - folder walking, YAML parsing and object classification."""

from sml_reader.ingestion.classifier import classify
from sml_reader.ingestion.filesystem import FolderListing, is_sml_file, list_folder
from sml_reader.ingestion.parser import parse_yaml
from sml_reader.ingestion.reader import (
    MAX_RECURSION_DEPTH,
    SMLFolderReader,
    read_sml_objects,
)

__all__ = [
    "MAX_RECURSION_DEPTH",
    "FolderListing",
    "SMLFolderReader",
    "classify",
    "is_sml_file",
    "list_folder",
    "parse_yaml",
    "read_sml_objects",
]
