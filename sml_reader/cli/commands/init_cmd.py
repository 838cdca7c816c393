"""Init command for sml-reader CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

console = Console()

CONFIG_TEMPLATE = """\
# sml-reader configuration

# Folder holding the SML .yml/.yaml object files
input: ./sml

# Folder nesting limit (guards against symlink cycles)
# max_depth: 100

# Logging (defaults shown)
logging:
  verbose: false
  json: false
"""


@click.command()
def init() -> None:
    """Create a sml-reader.yml config file.

    Generates a starter config file in the current directory.

    ## Examples

    Create a new config file:

        $ sml-reader init

    Then edit sml-reader.yml and run:

        $ sml-reader read
    """
    config_path = Path("sml-reader.yml")

    if config_path.exists():
        console.print(f"[yellow]{config_path} already exists[/yellow]")
        raise click.ClickException("Config file already exists")

    config_path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nEdit the file and run:")
    console.print("  sml-reader read")
