"""User configuration for molt.

Configuration is stored in ~/.config/molt/config.toml and supplies the
defaults for the prune and backup commands. Every value can be overridden
on the command line. A missing file is not an error; defaults apply.

Example:
    [prune]
    parent = "/root"
    exclude = ["backup_manual", ".parallel"]

    [backup]
    output_dir = "/root/backup"
    archive_name = "backup.tar.gz"
    compression_level = 9
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from molt.core.paths import get_config_path

logger = logging.getLogger(__name__)

# Compressors that read a tar stream on stdin and accept -1..-9
Compressor = Literal["pigz", "gzip"]

DEFAULT_PARENT = "/root"
DEFAULT_OUTPUT_DIR = "/tmp"
DEFAULT_ARCHIVE_NAME = "backup.tar.gz"
DEFAULT_COMPRESSION_LEVEL = 9


class PruneSettings(BaseModel):
    """Defaults for ``molt prune``.

    Attributes:
        parent: Directory whose direct children are pruned.
        exclude: Names (relative to parent) that survive pruning.
    """

    model_config = ConfigDict(extra="forbid")

    parent: Annotated[str, Field(min_length=1, description="Parent folder to clean up")] = (
        DEFAULT_PARENT
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Relative names excluded from deletion",
    )


class BackupSettings(BaseModel):
    """Defaults for ``molt backup``.

    Attributes:
        output_dir: Directory the archive is written into.
        archive_name: File name of the archive inside output_dir.
        exclude: Patterns passed to tar as --exclude.
        compression_level: Compressor level, 1 (fastest) to 9 (smallest).
        compressor: Compression program fed by tar.
    """

    model_config = ConfigDict(extra="forbid")

    output_dir: Annotated[str, Field(min_length=1)] = DEFAULT_OUTPUT_DIR
    archive_name: Annotated[str, Field(min_length=1)] = DEFAULT_ARCHIVE_NAME
    exclude: list[str] = Field(default_factory=list)
    compression_level: Annotated[
        int,
        Field(ge=1, le=9, description="Compression level (1-9)"),
    ] = DEFAULT_COMPRESSION_LEVEL
    compressor: Compressor = "pigz"


class DisplaySettings(BaseModel):
    """Console output preferences."""

    model_config = ConfigDict(extra="forbid")

    banner: bool = True


class MoltConfig(BaseModel):
    """Top-level molt configuration."""

    model_config = ConfigDict(extra="forbid")

    prune: PruneSettings = Field(default_factory=PruneSettings)
    backup: BackupSettings = Field(default_factory=BackupSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> MoltConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated MoltConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return MoltConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return MoltConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: MoltConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The MoltConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path


def config_to_dict(config: MoltConfig) -> dict[str, object]:
    """Convert MoltConfig to a dictionary for TOML serialization."""
    return config.model_dump(mode="json")


def dump_config(config: MoltConfig) -> str:
    """Render configuration as TOML text."""
    return tomli_w.dumps(config_to_dict(config))
