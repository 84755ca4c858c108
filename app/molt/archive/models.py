"""Archive domain models."""

from dataclasses import dataclass, field

from molt.core.config import (
    DEFAULT_ARCHIVE_NAME,
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_OUTPUT_DIR,
    Compressor,
)


@dataclass(frozen=True, slots=True)
class ArchiveOptions:
    """Everything needed to build one compressed tar archive.

    Attributes:
        targets: Files and directories to include.
        output_dir: Directory the archive is written into (created if missing).
        excludes: Patterns passed to tar as --exclude.
        archive_name: Archive file name inside output_dir.
        verbose: Let tar list each file as it is archived.
        compression_level: Compressor level, 1 to 9.
        compressor: Program compressing the tar stream.
        verify: Run an integrity test on the finished archive.
    """

    targets: tuple[str, ...]
    output_dir: str = DEFAULT_OUTPUT_DIR
    excludes: tuple[str, ...] = field(default_factory=tuple)
    archive_name: str = DEFAULT_ARCHIVE_NAME
    verbose: bool = False
    compression_level: int = DEFAULT_COMPRESSION_LEVEL
    compressor: Compressor = "pigz"
    verify: bool = False


@dataclass(frozen=True, slots=True)
class ArchiveResult:
    """A successfully created archive.

    Attributes:
        archive_path: Full path of the archive file.
        size_bytes: Archive size on disk.
        targets: Targets that were archived.
        excludes: Exclude patterns that were applied.
    """

    archive_path: str
    size_bytes: int
    targets: tuple[str, ...]
    excludes: tuple[str, ...]
