"""CLI utilities for sml-reader.

Rich rendering helpers shared by the commands in sml_reader.cli.commands.
"""

from __future__ import annotations

from sml_reader.cli.formatting import (
    READ_ERRORS,
    describe_read_error,
    format_counts,
    format_empty_result,
    format_read_error,
    format_read_success,
)

__all__ = [
    "READ_ERRORS",
    "describe_read_error",
    "format_counts",
    "format_empty_result",
    "format_read_error",
    "format_read_success",
]
