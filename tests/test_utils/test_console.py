from __future__ import annotations

import sys
from typing import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

from versionkit.utils.console import (
    VERSIONKIT_THEME,
    _get_console,
    _should_use_color,
    colorize_update_type,
    get_raw_console,
    print_error,
    print_line,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)


# ==============================================================================
# Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def reset_console() -> Generator[None, None, None]:
    """Clear the console singleton before and after each test."""
    reconfigure_console()
    yield
    reconfigure_console()


@pytest.fixture
def plain_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force uncolored output so captured text is easy to compare."""
    monkeypatch.setenv("NO_COLOR", "1")


# ==============================================================================
# Color detection
# ==============================================================================


@pytest.mark.unit
class TestShouldUseColor:
    """Tests for _should_use_color."""

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert _should_use_color() is False

    def test_ci_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("CI", "true")

        assert _should_use_color() is False

    def test_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)

        with patch.object(sys.stdout, "isatty", return_value=True):
            assert _should_use_color() is True

    def test_non_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)

        with patch.object(sys.stdout, "isatty", return_value=False):
            assert _should_use_color() is False


# ==============================================================================
# Console lifecycle
# ==============================================================================


@pytest.mark.unit
class TestConsoleLifecycle:
    """Tests for the console singleton."""

    def test_singleton(self) -> None:
        assert _get_console() is _get_console()
        assert get_raw_console() is _get_console()
        assert isinstance(get_raw_console(), Console)

    def test_reconfigure_creates_new_instance(self) -> None:
        first = _get_console()
        reconfigure_console()

        assert _get_console() is not first

    def test_theme_has_styles(self) -> None:
        for name in ("success", "error", "warning", "info", "dim", "version"):
            assert name in VERSIONKIT_THEME.styles


# ==============================================================================
# Output helpers
# ==============================================================================


@pytest.mark.unit
class TestOutputHelpers:
    """Tests for print_* helpers."""

    @pytest.mark.parametrize(
        "func,prefix",
        [
            (print_success, "[OK]"),
            (print_error, "[ERROR]"),
            (print_warning, "[WARNING]"),
        ],
    )
    def test_prefixes(
        self, plain_env: None, capsys: pytest.CaptureFixture, func, prefix: str
    ) -> None:
        func("message [not markup]")

        assert capsys.readouterr().out.strip() == f"{prefix} message [not markup]"

    def test_print_line_renders_markup(
        self, plain_env: None, capsys: pytest.CaptureFixture
    ) -> None:
        print_line("[version]1.0.0[/version] < 2.0.0")

        assert capsys.readouterr().out.strip() == "1.0.0 < 2.0.0"

    def test_print_table(self, plain_env: None, capsys: pytest.CaptureFixture) -> None:
        print_table(
            [{"Version": "1.0.0", "Major": 1}, {"Version": "2.0.0-rc", "Major": 2}],
            title="Versions",
        )

        output = capsys.readouterr().out
        assert "Versions" in output
        assert "1.0.0" in output
        assert "2.0.0-rc" in output

    def test_print_table_empty(self, capsys: pytest.CaptureFixture) -> None:
        print_table([])

        assert capsys.readouterr().out == ""


@pytest.mark.unit
class TestColorizeUpdateType:
    """Tests for colorize_update_type."""

    @pytest.mark.parametrize(
        "update_type,color",
        [("major", "red"), ("minor", "yellow"), ("patch", "green"), ("downgrade", "red")],
    )
    def test_known_types(self, update_type: str, color: str) -> None:
        assert colorize_update_type(update_type) == f"[{color}]{update_type}[/{color}]"

    @pytest.mark.parametrize("update_type", ["same", "unknown"])
    def test_unknown_types_unchanged(self, update_type: str) -> None:
        assert colorize_update_type(update_type) == update_type
