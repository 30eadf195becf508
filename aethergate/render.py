"""
Rendering functions for aethergate console output.

This module handles all pretty-printing and table formatting.
The builder returns data, this module makes it human-readable.
"""

from pathlib import Path
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .domain import Configuration

console = Console()


def render_build_summary(config: Configuration, written: Sequence[Path]) -> None:
    """
    Render the pages produced by a build.

    Args:
        config: Configuration the build ran with
        written: Output paths, one per record in the same order
    """
    if not config.repositories:
        console.print("[yellow]No repositories configured.[/yellow]")
        return

    table = Table(
        title=f"Vanity imports for {config.domain}",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Import path", style="cyan")
    table.add_column("VCS", style="green")
    table.add_column("Repository")
    table.add_column("Page", style="dim")

    for record, page in zip(config.repositories, written):
        table.add_row(config.import_prefix(record), record.vcs, record.repo, str(page))

    console.print(table)

    unique = len({r.path for r in config.repositories})
    console.print(f"\n[bold]Pages written:[/bold] {unique}")
