"""UI components for the Blockchain CLI."""

from blockchain_cli.ui.console import (
    console,
    err_console,
    print_error,
    print_field,
    print_heading,
    print_json,
    print_success,
    print_warning,
)
from blockchain_cli.ui.formatting import (
    format_btc,
    format_number,
    format_timestamp,
    format_value,
    satoshis_to_btc,
)
from blockchain_cli.ui.spinners import create_spinner

__all__ = [
    # Console
    "console",
    "err_console",
    "print_error",
    "print_warning",
    "print_success",
    "print_heading",
    "print_field",
    "print_json",
    # Formatting
    "satoshis_to_btc",
    "format_btc",
    "format_timestamp",
    "format_number",
    "format_value",
    # Spinners
    "create_spinner",
]
