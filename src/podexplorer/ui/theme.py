"""Terminal color palettes.

Two palettes exist, one per background. ``auto`` picks one from the
environment: ``PODEXPLORER_THEME`` wins, then the ``COLORFGBG`` hint that
many terminals export, otherwise dark.
"""

import os
from dataclasses import dataclass
from enum import Enum

THEME_ENV = "PODEXPLORER_THEME"


class ThemeMode(str, Enum):
    """Values accepted by the ``theme`` config key."""

    AUTO = "auto"
    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class Theme:
    """Rich style strings for each kind of catalog data."""

    name: str
    accent: str  # podcast titles, the selected season
    header: str
    muted: str
    genre: str
    date: str
    ident: str
    count: str
    link: str
    success: str
    warning: str
    error: str

    @property
    def selected(self) -> str:
        return f"reverse {self.accent}"

    def mark_success(self, text: str) -> str:
        return f"[{self.success}]✓[/{self.success}] {text}"

    def mark_error(self, text: str) -> str:
        return f"[{self.error}]✗[/{self.error}] {text}"


DARK_THEME = Theme(
    name="dark",
    accent="bold cyan",
    header="bold cyan",
    muted="dim",
    genre="yellow",
    date="green",
    ident="magenta",
    count="white",
    link="steel_blue1",
    success="green",
    warning="yellow",
    error="red",
)

LIGHT_THEME = Theme(
    name="light",
    accent="bold dark_cyan",
    header="bold dark_cyan",
    muted="grey50",
    genre="dark_orange",
    date="dark_green",
    ident="dark_magenta",
    count="black",
    link="blue",
    success="green",
    warning="dark_orange",
    error="red",
)

_PALETTES = {ThemeMode.DARK: DARK_THEME, ThemeMode.LIGHT: LIGHT_THEME}


def detect_terminal_theme() -> ThemeMode:
    """Guess the terminal background for ``auto`` mode."""
    forced = os.environ.get(THEME_ENV, "").strip().lower()
    if forced in (ThemeMode.DARK.value, ThemeMode.LIGHT.value):
        return ThemeMode(forced)

    # "fg;bg" with ANSI color indexes; 7 and up are light backgrounds
    background = os.environ.get("COLORFGBG", "").rpartition(";")[2]
    if background.isdigit():
        return ThemeMode.LIGHT if int(background) >= 7 else ThemeMode.DARK

    return ThemeMode.DARK


_active: Theme | None = None


def set_theme(mode: ThemeMode | str) -> Theme:
    """Activate a palette and return it.

    Raises:
        ValueError: If ``mode`` is not auto, dark or light
    """
    global _active

    mode = ThemeMode(mode.lower()) if isinstance(mode, str) else mode
    if mode == ThemeMode.AUTO:
        mode = detect_terminal_theme()
    _active = _PALETTES[mode]
    return _active


def get_theme() -> Theme:
    return _active if _active is not None else set_theme(ThemeMode.AUTO)


def reset_theme() -> None:
    global _active
    _active = None
