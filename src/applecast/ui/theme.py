"""Theme system for Applecast CLI.

Provides the colors and status markers used for console output. The marker
glyphs are part of the output scripts match on, so only their color varies
between themes.

Usage:
    from applecast.ui import get_theme

    theme = get_theme()
    console.print(theme.success_text("Fetched HTML content."))
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Literal

RECEIVED_MARK = "📥"
SUCCESS_MARK = "✅"
WARNING_MARK = "⚠️"


class ThemeMode(str, Enum):
    """Available theme modes."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


@dataclass(frozen=True)
class Theme:
    """Color theme for terminal output.

    All colors are rich-compatible color names or hex codes.
    """

    mode: str

    success: str
    error: str
    warning: str
    info: str

    data_url: str  # URLs
    data_path: str  # Output file paths

    def received_text(self, url: str) -> str:
        """Format the line echoing the requested URL."""
        return f"[{self.info}]{RECEIVED_MARK}[/{self.info}] Received URL: [{self.data_url}]{url}[/{self.data_url}]"

    def success_text(self, text: str) -> str:
        """Format text with success color and check mark."""
        return f"[{self.success}]{SUCCESS_MARK}[/{self.success}] {text}"

    def warning_text(self, text: str) -> str:
        """Format text with warning color and warning symbol."""
        return f"[{self.warning}]{WARNING_MARK}[/{self.warning}] {text}"

    def error_text(self, text: str) -> str:
        """Format text as an error line."""
        return f"[{self.error}]Error:[/{self.error}] {text}"

    def path_text(self, path: str) -> str:
        """Format an output path."""
        return f"[{self.data_path}]{path}[/{self.data_path}]"


# Dark theme - optimized for dark terminal backgrounds
DARK_THEME = Theme(
    mode="dark",
    success="green",
    error="red",
    warning="yellow",
    info="cyan",
    data_url="steel_blue1",
    data_path="cyan",
)

# Light theme - optimized for light terminal backgrounds
LIGHT_THEME = Theme(
    mode="light",
    success="green",
    error="red",
    warning="dark_orange",
    info="dark_cyan",
    data_url="blue",
    data_path="dark_cyan",
)


def detect_terminal_theme() -> Literal["light", "dark"]:
    """Attempt to detect if terminal has light or dark background.

    Defaults to dark.
    """
    colorfgbg = os.environ.get("COLORFGBG", "")
    if colorfgbg:
        # Format is "foreground;background" where 15=white bg, 0=black bg
        parts = colorfgbg.split(";")
        if len(parts) >= 2:
            try:
                bg = int(parts[-1])
                if bg >= 7:
                    return "light"
                return "dark"
            except ValueError:
                pass

    # macOS Terminal defaults to light
    if os.environ.get("TERM_PROGRAM", "").lower() == "apple_terminal":
        return "light"

    return "dark"


_current_theme: Theme | None = None


def set_theme(mode: ThemeMode | str) -> Theme:
    """Set and cache the current theme.

    Args:
        mode: Theme mode ('light', 'dark', or 'auto')

    Returns:
        The active Theme instance
    """
    global _current_theme

    if isinstance(mode, str):
        mode = ThemeMode(mode.lower())

    if mode == ThemeMode.AUTO:
        detected = detect_terminal_theme()
        _current_theme = LIGHT_THEME if detected == "light" else DARK_THEME
    elif mode == ThemeMode.LIGHT:
        _current_theme = LIGHT_THEME
    else:
        _current_theme = DARK_THEME

    return _current_theme


def get_theme() -> Theme:
    """Get the current theme, auto-detecting on first use."""
    if _current_theme is None:
        return set_theme(ThemeMode.AUTO)

    return _current_theme


def reset_theme() -> None:
    """Reset the theme cache, forcing re-detection on next access."""
    global _current_theme
    _current_theme = None
