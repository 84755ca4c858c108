"""Compressed tar archive creation.

Streams ``tar`` into a parallel gzip compressor (pigz by default) and
writes the result to ``output_dir/archive_name``. All archiving work is
delegated to the external programs; this module validates the request,
assembles the command lines and checks the result.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from molt.archive.models import ArchiveOptions, ArchiveResult
from molt.utils.shell import command_exists, run_command, run_pipeline

logger = logging.getLogger(__name__)

StartCallback = Callable[[ArchiveOptions, str], None]


class ArchiveError(Exception):
    """Base exception for archive errors."""


class ArchiveConfigurationError(ArchiveError):
    """Raised before any work when the request cannot be carried out."""


class ArchivePipelineError(ArchiveError):
    """Raised when tar or the compressor exits with a non-zero status."""


class ArchiveVerificationError(ArchiveError):
    """Raised when the archive is missing or fails its integrity test."""


def get_archive_path(options: ArchiveOptions) -> str:
    """Return the full archive path for the given options."""
    return f"{options.output_dir.removesuffix('/')}/{options.archive_name}"


def build_tar_command(options: ArchiveOptions) -> list[str]:
    """Build the tar command writing the archive stream to stdout."""
    flags = "-cvf" if options.verbose else "-cf"
    cmd = ["tar", flags, "-"]
    cmd.extend(f"--exclude={pattern}" for pattern in options.excludes)
    cmd.extend(options.targets)
    return cmd


def build_compress_command(options: ArchiveOptions) -> list[str]:
    """Build the compressor command reading the tar stream from stdin."""
    return [options.compressor, f"-{options.compression_level}"]


def _check_prerequisites(options: ArchiveOptions) -> None:
    if not options.targets:
        raise ArchiveConfigurationError("No targets specified")
    if not 1 <= options.compression_level <= 9:
        raise ArchiveConfigurationError(
            f"Compression level must be between 1 and 9, got {options.compression_level}"
        )
    if not command_exists(options.compressor):
        if options.compressor == "pigz":
            raise ArchiveConfigurationError(
                "pigz is not installed. Install pigz for parallel compression."
            )
        raise ArchiveConfigurationError(f"{options.compressor} is not installed.")
    if not command_exists("tar"):
        raise ArchiveConfigurationError("tar is not installed.")


def verify_archive(archive_path: str, compressor: str = "pigz") -> None:
    """Test the integrity of a compressed archive.

    Args:
        archive_path: Archive to test.
        compressor: Program used to test the compressed stream.

    Raises:
        ArchiveVerificationError: If the integrity test fails.
    """
    try:
        result = run_command([compressor, "-t", archive_path], timeout=None)
    except OSError as e:
        raise ArchiveVerificationError(f"Could not test {archive_path}: {e}") from e
    if not result.success:
        detail = result.stderr.strip() or f"exit code {result.returncode}"
        raise ArchiveVerificationError(f"Archive failed integrity test: {detail}")


def create_archive(
    options: ArchiveOptions, on_start: StartCallback | None = None
) -> ArchiveResult:
    """Create a compressed tar archive of options.targets.

    Args:
        options: Targets, excludes and output location.
        on_start: Called with the options and archive path once the
            prerequisites have passed, before the output directory is created.

    Returns:
        ArchiveResult describing the created file.

    Raises:
        ArchiveConfigurationError: If no targets are given or a required
            program is missing. Raised before anything is written.
        ArchiveError: If the output directory cannot be created.
        ArchivePipelineError: If tar or the compressor fails.
        ArchiveVerificationError: If the archive is absent afterwards, or
            fails the integrity test when options.verify is set.
    """
    _check_prerequisites(options)

    archive_path = get_archive_path(options)
    if on_start is not None:
        on_start(options, archive_path)

    try:
        Path(options.output_dir).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArchiveError(f"Cannot create output directory {options.output_dir}: {e}") from e

    tar_cmd = build_tar_command(options)
    compress_cmd = build_compress_command(options)
    logger.debug("Running %s | %s > %s", tar_cmd, compress_cmd, archive_path)

    try:
        result = run_pipeline(
            tar_cmd,
            compress_cmd,
            Path(archive_path),
            capture_stderr=not options.verbose,
        )
    except OSError as e:
        raise ArchivePipelineError(f"Failed to run archive pipeline: {e}") from e

    if not result.success:
        detail = result.stderr.strip()
        msg = (
            f"Archive pipeline failed (tar exit {result.producer_returncode}, "
            f"{options.compressor} exit {result.consumer_returncode})"
        )
        raise ArchivePipelineError(f"{msg}: {detail}" if detail else msg)

    if not os.path.isfile(archive_path):
        raise ArchiveVerificationError(f"Backup failed. Archive not found: {archive_path}")

    if options.verify:
        verify_archive(archive_path, options.compressor)

    size = os.path.getsize(archive_path)
    logger.info("Created %s (%d bytes)", archive_path, size)
    return ArchiveResult(
        archive_path=archive_path,
        size_bytes=size,
        targets=options.targets,
        excludes=options.excludes,
    )
