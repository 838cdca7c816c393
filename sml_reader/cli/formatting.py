"""Rich rendering of read outcomes for CLI output.

Turns the errors a folder read can raise, and the finalized result,
into panels and tables.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sml_reader.domain import SMLReadResult
from sml_reader.errors import MaxRecursionDepthError

PANEL_WIDTH = 78

# Exceptions a read lets through; the CLI renders these instead of a traceback
READ_ERRORS = (MaxRecursionDepthError, OSError, UnicodeDecodeError, yaml.YAMLError)


def _panel(content: str, title: str, style: str) -> Panel:
    return Panel(
        content,
        title=f"[bold {style}]{title}[/bold {style}]",
        border_style=style,
        width=PANEL_WIDTH,
        expand=False,
    )


def describe_read_error(error: BaseException) -> tuple[str, str | None]:
    """Return a headline and an optional resolution hint for a read error."""
    if isinstance(error, MaxRecursionDepthError):
        return (
            "Max recursion depth reached",
            "Check the input folder for symlink cycles or deep nesting.",
        )
    if isinstance(error, UnicodeDecodeError):
        return "File is not valid UTF-8", "Save SML files with UTF-8 encoding."
    if isinstance(error, yaml.YAMLError):
        return "YAML parsing error", None
    if isinstance(error, OSError):
        return "Cannot read folder", None
    return type(error).__name__, None


def _error_location(error: BaseException) -> str | None:
    if isinstance(error, MaxRecursionDepthError):
        return f"{error.path} (depth {error.depth})"
    if isinstance(error, OSError) and error.filename:
        return str(error.filename)
    return None


def format_read_error(error: BaseException) -> Panel:
    """Create an error panel for an exception raised by a folder read.

    The panel shows the headline, the exception message, the offending
    path when the exception carries one, notes added while reading
    (e.g. which file failed to parse), and a hint when one applies.
    """
    headline, hint = describe_read_error(error)
    lines = [f"[bold red]{headline}[/bold red]", "", escape(str(error))]

    location = _error_location(error)
    if location:
        lines.append(f"[cyan]{escape(location)}[/cyan]")
    lines.extend(escape(note) for note in getattr(error, "__notes__", []))
    if hint:
        lines += ["", f"[dim]{hint}[/dim]"]

    return _panel("\n".join(lines), "Error", "red")


def format_empty_result(folder: Path) -> Panel:
    """Create a warning panel for a read that found no SML objects."""
    return _panel(
        "[bold yellow]No SML objects found in "
        f"{escape(str(folder))}[/bold yellow]\n\n"
        "[dim]Only .yml/.yaml files with object_type, label and unique_name "
        "are read.[/dim]",
        "Warning",
        "yellow",
    )


def format_read_success(result: SMLReadResult) -> Panel:
    """Create a success panel naming the object total and the catalog."""
    catalog = (
        escape(f"{result.catalog.label} ({result.catalog.unique_name})")
        if result.catalog
        else "none"
    )
    return _panel(
        f"[bold green]Read {result.total} SML objects[/bold green]\n\n"
        f"[dim]Catalog: {catalog}[/dim]",
        "Success",
        "green",
    )


def format_counts(result: SMLReadResult) -> Table:
    """Create a table with one row per collection of a read result.

    Args:
        result: Finalized read result

    Returns:
        Table of collection names and object counts
    """
    table = Table(title="SML objects", show_header=True, header_style="bold")
    table.add_column("Collection")
    table.add_column("Count", justify="right")

    for name, count in result.counts().items():
        style = "" if count else "dim"
        table.add_row(name.replace("_", " "), str(count), style=style)

    return table
