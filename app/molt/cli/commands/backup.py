"""Backup command implementation.

Packs files and directories into a .tar.gz archive using tar and pigz.
"""

from typing import Annotated

import typer

from molt.archive.archiver import ArchiveError, create_archive
from molt.archive.models import ArchiveOptions
from molt.cli.display import print_backup_plan, print_backup_result
from molt.cli.types import get_config, split_csv
from molt.utils.formatting import print_banner, print_error

app = typer.Typer(
    help="Create a compressed tar archive of files and directories.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def backup(
    targets: Annotated[
        list[str] | None,
        typer.Option(
            "--targets",
            "-t",
            help="Comma-separated files/directories to include. May be repeated.",
        ),
    ] = None,
    output_dir: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory (created if needed). Default: /tmp.",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-x",
            help="Comma-separated paths/patterns to exclude. May be repeated.",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Archive file name. Default: backup.tar.gz."),
    ] = None,
    level: Annotated[
        int | None,
        typer.Option("--level", "-l", min=1, max=9, help="Compression level (1-9)."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Display tar progress."),
    ] = False,
    verify: Annotated[
        bool,
        typer.Option("--verify", help="Test archive integrity after creation."),
    ] = False,
    no_banner: Annotated[
        bool,
        typer.Option("--no-banner", help="Skip the closing ASCII banner."),
    ] = False,
) -> None:
    """Compress TARGETS into OUTPUT/NAME with tar + pigz.

    Example: molt backup -o /root/backup -t "/etc,/var/www" -n config_www.tar.gz
    """
    config = get_config()
    settings = config.backup

    options = ArchiveOptions(
        targets=tuple(split_csv(targets)),
        output_dir=output_dir or settings.output_dir,
        excludes=tuple(split_csv(exclude) if exclude is not None else settings.exclude),
        archive_name=name or settings.archive_name,
        verbose=verbose,
        compression_level=level if level is not None else settings.compression_level,
        compressor=settings.compressor,
        verify=verify,
    )

    try:
        result = create_archive(options, on_start=print_backup_plan)
    except ArchiveError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_backup_result(result)

    if config.display.banner and not no_banner:
        print_banner("backup")
