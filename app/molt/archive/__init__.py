"""Compressed tar backups.

This module builds .tar.gz archives by piping tar into pigz.
"""

from molt.archive.archiver import (
    ArchiveConfigurationError,
    ArchiveError,
    ArchivePipelineError,
    ArchiveVerificationError,
    StartCallback,
    build_compress_command,
    build_tar_command,
    create_archive,
    get_archive_path,
    verify_archive,
)
from molt.archive.models import ArchiveOptions, ArchiveResult

__all__ = [
    "ArchiveConfigurationError",
    "ArchiveError",
    "ArchiveOptions",
    "ArchivePipelineError",
    "ArchiveResult",
    "ArchiveVerificationError",
    "StartCallback",
    "build_compress_command",
    "build_tar_command",
    "create_archive",
    "get_archive_path",
    "verify_archive",
]
