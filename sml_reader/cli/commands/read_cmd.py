"""Read command for sml-reader CLI."""

from __future__ import annotations

import traceback
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from sml_reader.cli import (
    READ_ERRORS,
    describe_read_error,
    format_counts,
    format_empty_result,
    format_read_error,
    format_read_success,
)
from sml_reader.cli.utils import build_result_tree
from sml_reader.config import SMLReaderConfig, load_config
from sml_reader.ingestion import MAX_RECURSION_DEPTH, read_sml_objects
from sml_reader.logging_config import configure_logging

console = Console()


def _load_config(config: Path | None, debug: bool) -> SMLReaderConfig:
    try:
        return load_config(config)
    except FileNotFoundError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]Config file not found:[/red] {e}")
        raise click.ClickException(str(e))
    except yaml.YAMLError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]YAML parsing error:[/red] {e}")
        raise click.ClickException(str(e))
    except ValidationError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]Config validation error:[/red] {e}")
        raise click.ClickException(str(e))


@click.command()
@click.argument("input_path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to sml-reader.yml config file (auto-detected if no INPUT_PATH)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show debug logging and every object's unique name",
)
@click.option(
    "--log-json",
    is_flag=True,
    help="Emit log lines as JSON on stderr",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show full exception stacktraces for troubleshooting",
)
def read(
    input_path: Path | None,
    config: Path | None,
    verbose: bool,
    log_json: bool,
    debug: bool,
) -> None:
    """Read a folder of SML files and summarize its objects.

    INPUT_PATH overrides the `input` setting of the config file. Without
    INPUT_PATH or --config, sml-reader.yml is searched for in the current
    directory and its parents.

    ## Examples

    Read a folder directly:

        $ sml-reader read ./sml

    Use the input folder from a config file:

        $ sml-reader read --config ./sml-reader.yml

    List every object found:

        $ sml-reader read ./sml --verbose
    """
    max_depth = MAX_RECURSION_DEPTH
    if input_path is not None and config is None:
        folder = input_path
    else:
        cfg = _load_config(config, debug)
        folder = input_path if input_path is not None else cfg.input_path
        max_depth = cfg.max_depth
        verbose = verbose or cfg.logging.verbose
        log_json = log_json or cfg.logging.json_output

    configure_logging(verbose=verbose, log_json=log_json)

    console.print()
    console.print(f"[dim]Input:[/dim] {folder}")

    try:
        result = read_sml_objects(folder, max_depth=max_depth)
    except READ_ERRORS as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(format_read_error(e))
        headline, _ = describe_read_error(e)
        raise click.ClickException(headline)

    console.print()
    console.print(format_counts(result))

    if result.is_empty:
        console.print(format_empty_result(folder))
        return

    console.print(format_read_success(result))

    if verbose:
        console.print()
        console.print(build_result_tree(result, str(folder)))
