"""Unit tests for molt configuration loading and saving.

Tests for the pydantic models and the TOML I/O functions.
"""

import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from molt.core.config import (
    BackupSettings,
    ConfigError,
    ConfigParseError,
    MoltConfig,
    PruneSettings,
    dump_config,
    load_config,
    save_config,
)
from pydantic import ValidationError


class TestMoltConfig:
    """Tests for MoltConfig pydantic models."""

    def test_default_values(self) -> None:
        """Defaults mirror the command-line defaults."""
        config = MoltConfig()

        assert config.prune.parent == "/root"
        assert config.prune.exclude == []
        assert config.backup.output_dir == "/tmp"
        assert config.backup.archive_name == "backup.tar.gz"
        assert config.backup.compression_level == 9
        assert config.backup.compressor == "pigz"
        assert config.display.banner is True

    def test_compression_level_bounds(self) -> None:
        """Compression level must be between 1 and 9."""
        with pytest.raises(ValidationError):
            BackupSettings(compression_level=0)
        with pytest.raises(ValidationError):
            BackupSettings(compression_level=10)

    def test_invalid_compressor(self) -> None:
        """Only pigz and gzip are accepted."""
        with pytest.raises(ValidationError):
            BackupSettings(compressor="zstd")  # type: ignore[arg-type]

    def test_empty_parent_rejected(self) -> None:
        """The prune parent cannot be empty."""
        with pytest.raises(ValidationError):
            PruneSettings(parent="")

    def test_unknown_keys_rejected(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            MoltConfig.model_validate({"prune": {"parnet": "/root"}})


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing config file yields defaults."""
        config = load_config(tmp_path / "config.toml")
        assert config == MoltConfig()

    def test_partial_file(self, tmp_path: Path) -> None:
        """Sections and keys not in the file keep their defaults."""
        path = tmp_path / "config.toml"
        path.write_text('[prune]\nparent = "/srv/work"\nexclude = [".git", "keep"]\n')

        config = load_config(path)

        assert config.prune.parent == "/srv/work"
        assert config.prune.exclude == [".git", "keep"]
        assert config.backup.archive_name == "backup.tar.gz"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("[prune\nparent = ")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text("[backup]\ncompression_level = 42\n")

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_parse_error_is_config_error(self) -> None:
        """ConfigParseError is a ConfigError."""
        assert issubclass(ConfigParseError, ConfigError)

    def test_default_path_uses_xdg(self, isolated_config_home: Path) -> None:
        """Without a path, the XDG config location is read."""
        config_dir = isolated_config_home / "molt"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[display]\nbanner = false\n")

        assert load_config().display.banner is False


class TestSaveConfig:
    """Tests for save_config."""

    def test_roundtrip(self, tmp_path: Path) -> None:
        """A saved config loads back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        config = MoltConfig(
            prune=PruneSettings(parent="/data", exclude=["keep"]),
            backup=BackupSettings(compression_level=5, compressor="gzip"),
        )

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """Only the config file remains after an atomic write."""
        path = tmp_path / "config.toml"
        save_config(MoltConfig(), path)
        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]

    def test_write_failure(self, tmp_path: Path) -> None:
        """OSError during write raises ConfigError and cleans up."""
        path = tmp_path / "config.toml"
        with (
            patch("molt.core.config.os.replace", side_effect=OSError("disk full")),
            pytest.raises(ConfigError, match="disk full"),
        ):
            save_config(MoltConfig(), path)

        assert list(tmp_path.iterdir()) == []


class TestDumpConfig:
    """Tests for dump_config."""

    def test_is_valid_toml(self) -> None:
        """Dumped text parses back into the same data."""
        text = dump_config(MoltConfig())
        data = tomllib.loads(text)

        assert data["prune"]["parent"] == "/root"
        assert data["backup"]["compression_level"] == 9
        assert data["display"]["banner"] is True
