"""CLI utility functions for sml-reader."""

from __future__ import annotations

from rich.tree import Tree

from sml_reader.domain import COLLECTION_NAMES, SMLReadResult


def build_result_tree(result: SMLReadResult, root_label: str) -> Tree:
    """Build a Rich Tree listing unique names per collection.

    Args:
        result: Finalized read result
        root_label: Label of the tree root (usually the input folder)

    Returns:
        Rich Tree object for display
    """
    tree = Tree(f"[bold]{root_label}[/bold]")

    if result.catalog is not None:
        tree.add(
            f"[magenta]catalog[/magenta] {result.catalog.unique_name} "
            f"[dim]({result.catalog.label})[/dim]"
        )

    for name in COLLECTION_NAMES:
        objects = getattr(result, name)
        if not objects:
            continue
        branch = tree.add(f"[blue]{name}[/blue] [dim]({len(objects)})[/dim]")
        # Collection order is not stable across runs
        for sml_object in sorted(objects, key=lambda o: o.unique_name):
            branch.add(f"[green]{sml_object.unique_name}[/green]")

    return tree
