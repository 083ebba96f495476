"""Tests for terminal palettes."""

import pytest

from podexplorer.ui.theme import (
    DARK_THEME,
    LIGHT_THEME,
    THEME_ENV,
    ThemeMode,
    detect_terminal_theme,
    get_theme,
    reset_theme,
    set_theme,
)


@pytest.fixture
def plain_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.delenv(THEME_ENV, raising=False)
    monkeypatch.delenv("COLORFGBG", raising=False)
    return monkeypatch


class TestSetTheme:
    """Tests for palette selection."""

    def test_explicit_modes(self) -> None:
        assert set_theme("light") is LIGHT_THEME
        assert set_theme(ThemeMode.DARK) is DARK_THEME
        assert get_theme() is DARK_THEME

    def test_mode_is_case_insensitive(self) -> None:
        assert set_theme("LIGHT") is LIGHT_THEME

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ValueError):
            set_theme("solarized")

    def test_auto_uses_environment(self, plain_env: pytest.MonkeyPatch) -> None:
        plain_env.setenv(THEME_ENV, "light")

        assert set_theme("auto") is LIGHT_THEME

    def test_get_theme_detects_once(self, plain_env: pytest.MonkeyPatch) -> None:
        reset_theme()

        assert get_theme() is DARK_THEME


class TestDetectTerminalTheme:
    """Tests for background detection."""

    def test_defaults_to_dark(self, plain_env: pytest.MonkeyPatch) -> None:
        assert detect_terminal_theme() == ThemeMode.DARK

    def test_light_background_from_colorfgbg(self, plain_env: pytest.MonkeyPatch) -> None:
        plain_env.setenv("COLORFGBG", "0;15")

        assert detect_terminal_theme() == ThemeMode.LIGHT

    def test_dark_background_from_colorfgbg(self, plain_env: pytest.MonkeyPatch) -> None:
        plain_env.setenv("COLORFGBG", "15;default;0")

        assert detect_terminal_theme() == ThemeMode.DARK

    def test_env_override_beats_colorfgbg(self, plain_env: pytest.MonkeyPatch) -> None:
        plain_env.setenv("COLORFGBG", "0;15")
        plain_env.setenv(THEME_ENV, "dark")

        assert detect_terminal_theme() == ThemeMode.DARK

    def test_garbage_colorfgbg_is_ignored(self, plain_env: pytest.MonkeyPatch) -> None:
        plain_env.setenv("COLORFGBG", "default")

        assert detect_terminal_theme() == ThemeMode.DARK


def test_markup_helpers() -> None:
    assert DARK_THEME.mark_error("Nope") == "[red]✗[/red] Nope"
    assert DARK_THEME.mark_success("Done") == "[green]✓[/green] Done"
    assert LIGHT_THEME.selected == "reverse bold dark_cyan"
