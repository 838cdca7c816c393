"""
sml-reader: load a folder of SML (semantic modeling language) YAML files.

Architecture:
    folder → Ingestion (SMLFolderReader) → Domain (SMLReadResult)

Layers:
    - domain/: SML object kinds and the aggregated, immutable read result
    - ingestion/: folder walking, YAML parsing, object classification
    - cli/: Rich/Click command line front end

Key Concepts:
    - Objects are recognized by their header (object_type, label, unique_name)
    - Malformed YAML or unreadable folders fail the whole read
    - Files that are valid YAML but not SML objects are skipped silently
"""

from sml_reader.domain import SMLObjectType, SMLReadResult
from sml_reader.errors import MaxRecursionDepthError, SMLReaderError
from sml_reader.ingestion import SMLFolderReader, read_sml_objects

__version__ = "0.1.0"

__all__ = [
    "MaxRecursionDepthError",
    "SMLFolderReader",
    "SMLObjectType",
    "SMLReadResult",
    "SMLReaderError",
    "read_sml_objects",
]
