"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI - Bitcoin orange with blue hashes."""

    primary: str = "#F7931A"      # Bitcoin orange - amounts
    secondary: str = "#4D9DE0"    # Blue - hashes and addresses
    accent: str = "#00CED1"       # Cyan - timestamps

    # Status colors
    success: str = "#00E676"      # Bright green
    error: str = "#FF5252"        # Red
    warning: str = "#FFB347"      # Orange-yellow

    # Text colors
    text: str = "#E8E8E8"         # Light gray
    muted: str = "#888888"        # Muted gray
    highlight: str = "#FFFFFF"    # White

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            # Status styles
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),

            # Text styles
            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "highlight": Style(color=self.highlight, bold=True),

            # Semantic styles
            "hash": Style(color=self.secondary, bold=True),
            "address": Style(color=self.secondary),
            "amount": Style(color=self.primary),
            "number": Style(color=self.warning),
            "timestamp": Style(color=self.accent),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
