"""Main CLI entry point - one subcommand per process run."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.logging import RichHandler

from blockchain_cli import __app_name__, __version__
from blockchain_cli.commands import COMMANDS, BaseCommand
from blockchain_cli.core.api_client import APIClient
from blockchain_cli.core.config import CLIConfig, ConfigStore
from blockchain_cli.core.errors import ConfigError
from blockchain_cli.ui.console import err_console, print_error

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Full argument parser; building it needs no configuration."""
    parser = argparse.ArgumentParser(
        prog="blockchain",
        description=f"{__app_name__} - Bitcoin blockchain explorer",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{__app_name__} {__version__}",
    )

    # Global options go before the subcommand
    parser.add_argument(
        "--base-url",
        help="API base URL (default: stored baseUrl or https://blockchain.info)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log HTTP requests to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)
    for command_cls in COMMANDS:
        command_cls.register(subparsers)
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Route this package's log records through rich on stderr."""
    package_logger = logging.getLogger("blockchain_cli")
    package_logger.handlers = [RichHandler(console=err_console, show_path=False)]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


class BlockchainCLI:
    """Main CLI application."""

    def __init__(self, config: CLIConfig, api: Optional[APIClient] = None):
        self.config = config
        self.api = api or APIClient(config.base_url, timeout=config.timeout)

        # Command registry
        self.commands: dict[str, BaseCommand] = {}
        for command_cls in COMMANDS:
            command = command_cls(self.config, self.api)
            self.commands[command.name] = command

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Parse arguments, run the selected command, return the exit code."""
        return self.execute(build_parser().parse_args(argv))

    def execute(self, args: argparse.Namespace) -> int:
        """Run the command selected in already-parsed arguments."""
        logger.debug("Using API at %s", self.config.base_url)

        try:
            success = self.commands[args.command].run(args)
        except KeyboardInterrupt:
            err_console.print("\n[warning]Interrupted[/warning]")
            success = False
        finally:
            self.api.close()

        return 0 if success else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    # --help, --version and usage errors exit here, before any file is read
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = CLIConfig.load(
            ConfigStore(),
            base_url=args.base_url,
            timeout=args.timeout,
        )
    except ConfigError as e:
        print_error(str(e))
        return 1

    return BlockchainCLI(config).execute(args)


if __name__ == "__main__":
    sys.exit(main())
