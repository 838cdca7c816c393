"""CLI commands for sml-reader.

Commands are registered on the group in sml_reader/__main__.py.
"""

from __future__ import annotations

from sml_reader.cli.commands.init_cmd import init
from sml_reader.cli.commands.read_cmd import read

__all__ = [
    "init",
    "read",
]
