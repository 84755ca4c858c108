"""Prune command implementation.

Removes every direct child of a parent folder except the excluded names.
"""

import json
from typing import Annotated

import typer

from molt.cli.display import (
    create_failures_table,
    create_remaining_table,
    print_entry_result,
    print_prune_header,
    print_prune_summary,
)
from molt.cli.types import OutputFormat, get_config, split_csv
from molt.prune.models import PruneOptions
from molt.prune.pruner import InvalidParentError, prune
from molt.utils.formatting import console, print_banner, print_error

app = typer.Typer(
    help="Remove everything inside a folder except excluded items.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def prune_folder(
    parent: Annotated[
        str | None,
        typer.Option(
            "--parent",
            "-p",
            help="Parent folder to clean up. Default: [prune].parent from config (/root).",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-x",
            help="Comma-separated relative names to keep. May be repeated.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print every deletion step."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    no_banner: Annotated[
        bool,
        typer.Option("--no-banner", help="Skip the closing ASCII banner."),
    ] = False,
) -> None:
    """Remove all files and folders inside PARENT except the excluded ones.

    Hidden entries are removed too. Exclusions are names relative to the
    parent, e.g. -x "backup_manual,.parallel". Exits with code 1 if any
    entry could not be removed.
    """
    config = get_config()

    parent_dir = parent or config.prune.parent
    exclusions = split_csv(exclude) if exclude is not None else list(config.prune.exclude)
    as_json = output_format == OutputFormat.JSON
    show_steps = verbose and not as_json

    if show_steps:
        print_prune_header(parent_dir, exclusions)

    try:
        report = prune(
            PruneOptions.create(parent_dir, exclusions),
            on_result=print_entry_result if show_steps else None,
        )
    except InvalidParentError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        if not report.success:
            raise typer.Exit(code=1)
        return

    print_prune_summary(report)

    if report.failures and not show_steps:
        console.print(create_failures_table(report))

    if show_steps:
        console.print()
        console.print(create_remaining_table(parent_dir))

    if config.display.banner and not no_banner:
        print_banner("prune")

    if not report.success:
        raise typer.Exit(code=1)
