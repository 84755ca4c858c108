"""Unit tests for console formatting helpers."""

import pytest
from molt.utils.formatting import console, format_size, print_banner, print_success


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (None, "0 B"),
            (0, "0 B"),
            (512, "512 B"),
            (2048, "2.0 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024**3, "3.0 GB"),
            (2 * 1024**4, "2.0 TB"),
        ],
    )
    def test_units(self, size: int | None, expected: str) -> None:
        """Sizes are rendered with the largest fitting unit."""
        assert format_size(size) == expected


class TestPrintHelpers:
    """Tests for printing helpers."""

    def test_print_success(self) -> None:
        """Success messages are printed to the shared console."""
        with console.capture() as capture:
            print_success("All good")
        assert "All good" in capture.get()

    def test_prune_banner(self) -> None:
        """The prune banner is the REMOLT art."""
        with console.capture() as capture:
            print_banner("prune")
        out = capture.get()
        assert "~~~~" in out
        assert "|_|_\\_\\___|" in out

    def test_backup_banner(self) -> None:
        """The backup banner ends with the happy-backups line."""
        with console.capture() as capture:
            print_banner("backup")
        out = capture.get()
        assert "|____/" in out
        assert "Happy backups!" in out
