"""Rich console instances and print helpers."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.text import Text

from blockchain_cli.ui.theme import get_theme

# Results go to stdout; errors, logs and spinners go to stderr so that
# `--json` output stays pipeable.
console = Console(theme=get_theme().to_rich_theme(), highlight=True, soft_wrap=True)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True)


def print_error(message: str) -> None:
    """Print a one-line error with a failure marker to stderr."""
    text = Text()
    text.append("✖ ", style="error")
    text.append(message, style="#FF5252")
    err_console.print(text, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a one-line warning to stderr."""
    text = Text()
    text.append("⚠ ", style="warning")
    text.append(message, style="warning")
    err_console.print(text, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a one-line success marker followed by the message."""
    text = Text()
    text.append("✔ ", style="success")
    text.append(message, style="text")
    console.print(text)


def print_heading(label: str, value: Any = None) -> None:
    """Print a blank line and a bold heading, e.g. ``Block: <hash>``."""
    text = Text()
    text.append(label, style="highlight")
    if value is not None:
        text.append(": ", style="muted")
        text.append(str(value), style="hash")
    console.print()
    console.print(text)


def print_field(label: str, value: Any, style: str = "text") -> None:
    """Print an indented ``Label: value`` line."""
    text = Text()
    text.append(f"  {label}: ", style="muted")
    text.append(str(value), style=style)
    console.print(text)


def print_json(data: Any) -> None:
    """Pretty-print a JSON-compatible value with two-space indentation."""
    console.print_json(data=data, indent=2)
