"""Command-line interface for sml-reader."""

from __future__ import annotations

import click

from sml_reader.cli.commands import init, read


@click.group()
@click.version_option(package_name="sml-reader")
def cli() -> None:
    """Load folders of SML semantic model files.

        $ sml-reader read ./sml

    Or with a config file:

        $ sml-reader read --config sml-reader.yml
    """
    pass


cli.add_command(read)
cli.add_command(init)


if __name__ == "__main__":
    cli()
