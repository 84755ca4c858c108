"""Shared Rich display functions for prune and backup results.

Provides the per-entry progress lines, summaries and tables used by the
prune and backup commands.
"""

import os
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from molt.archive.models import ArchiveOptions, ArchiveResult
from molt.prune.models import EntryOutcome, EntryResult, PruneReport
from molt.utils.formatting import console, format_size


def print_prune_header(parent: str, exclusions: list[str]) -> None:
    """Print the verbose preamble of a prune run."""
    excluded = ", ".join(exclusions) if exclusions else "none"
    console.print(f"[info]Starting selective cleanup in:[/] {escape(parent)}")
    console.print(f"[info]Excluding the following items:[/] {escape(excluded)}")


def print_entry_result(result: EntryResult) -> None:
    """Print one verbose progress line for a processed entry."""
    path = escape(result.path)
    if result.outcome == EntryOutcome.SKIPPED:
        console.print(f"[skipped]Skipping excluded:[/] {path}")
    elif result.outcome == EntryOutcome.REMOVED:
        console.print(f"[info]Removing:[/] {path} ... [removed]OK[/]")
    else:
        console.print(f"[info]Removing:[/] {path} ... [failed]FAILED[/]")


def print_prune_summary(report: PruneReport) -> None:
    """Print the final pass/fail line and the aggregate counts."""
    if report.failed:
        console.print(f"[error]Cleanup finished with {report.failed} failures.[/]")
    else:
        console.print("[success]Cleanup finished successfully with no failures.[/]")

    console.print(
        f"[dim]Processed {report.processed} entries: "
        f"{report.removed} removed, {report.skipped} skipped, {report.failed} failed[/dim]"
    )


def create_failures_table(report: PruneReport) -> Table:
    """Create a Rich table listing entries that could not be removed."""
    table = Table(
        title="Failed Removals",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="entry.path")
    table.add_column("Error", style="muted")

    for entry in report.failures:
        table.add_row(escape(entry.path), escape(entry.error or "Unknown error"))

    return table


def create_remaining_table(parent: str) -> Table:
    """Create a Rich table of what is left in parent after pruning.

    Args:
        parent: Directory to list.

    Returns:
        Table with name, type and size of each remaining entry.
    """
    table = Table(
        title=f"Remaining items in {escape(parent)}",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", no_wrap=True)
    table.add_column("Type", width=10)
    table.add_column("Size", justify="right", style="info")

    try:
        names = sorted(os.listdir(parent))
    except OSError:
        return table

    for name in names:
        path = Path(parent) / name
        if path.is_symlink():
            kind, size = "symlink", None
        elif path.is_dir():
            kind, size = "directory", None
        else:
            kind = "file"
            try:
                size = path.stat().st_size
            except OSError:
                size = None
        table.add_row(escape(name), kind, format_size(size) if size is not None else "-")

    return table


def print_backup_plan(options: ArchiveOptions, archive_path: str) -> None:
    """Announce what is about to be archived."""
    excludes = " ".join(options.excludes) if options.excludes else "none"
    console.print(f"[header]==> Backing up:[/] {escape(' '.join(options.targets))}")
    console.print(f"[header]==> Excluding:[/]  {escape(excludes)}")
    console.print(f"[header]==> Output Dir:[/] {escape(options.output_dir)}")
    console.print(f"[header]==> Archive:[/]    {escape(archive_path)}")


def print_backup_result(result: ArchiveResult) -> None:
    """Print the created archive with its size."""
    console.print(
        f"[success]==> Backup archive created:[/] {escape(result.archive_path)} "
        f"[info]({format_size(result.size_bytes)})[/]"
    )
