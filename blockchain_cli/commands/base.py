"""Base command classes for CLI commands."""

from __future__ import annotations

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from blockchain_cli.core.api_client import APIClient
from blockchain_cli.core.config import CLIConfig
from blockchain_cli.core.errors import BlockchainCLIError
from blockchain_cli.ui.console import print_error, print_json
from blockchain_cli.ui.spinners import create_spinner

logger = logging.getLogger(__name__)

# Transactions printed in text mode; `--json` returns everything the API sent
MAX_LISTED_TRANSACTIONS = 10


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"

    def __init__(self, config: CLIConfig, api: Optional[APIClient] = None):
        self.config = config
        self.api = api or APIClient(config.base_url, timeout=config.timeout)

    @classmethod
    def register(cls, subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
        """Add this command's sub-parser; needs no config or API client."""
        parser = subparsers.add_parser(
            cls.name,
            help=cls.description,
            description=cls.description,
        )
        cls.add_arguments(parser)
        return parser

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Declare positional arguments and flags."""

    def run(self, args: argparse.Namespace) -> bool:
        """Execute the command, reporting any error instead of raising it."""
        try:
            return self.execute(args)
        except BlockchainCLIError as e:
            logger.debug("%s failed", self.name, exc_info=True)
            print_error(str(e))
            return False

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> bool:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            True if successful, False otherwise
        """
        pass


class QueryCommand(BaseCommand):
    """A command that issues one API request and prints the result.

    Subclasses implement ``fetch`` and ``render``; ``--json`` bypasses
    ``render`` and dumps the response as-is.
    """

    spinner_message: str = "Fetching..."

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--json", action="store_true", help="Output as JSON")

    def execute(self, args: argparse.Namespace) -> bool:
        with create_spinner(self.spinner_message):
            data = self.fetch(args)

        if args.json:
            print_json(data)
        else:
            self.render(data, args)
        return True

    @abstractmethod
    def fetch(self, args: argparse.Namespace) -> Any:
        """Call the API and return the decoded response."""

    @abstractmethod
    def render(self, data: Any, args: argparse.Namespace) -> None:
        """Print the response as a text summary."""


class PaginatedQueryCommand(QueryCommand):
    """Query command accepting ``--limit`` and ``--offset``."""

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("address", help="Bitcoin address")
        parser.add_argument(
            "--limit",
            type=non_negative_int,
            metavar="<number>",
            help="Limit number of transactions",
        )
        parser.add_argument(
            "--offset",
            type=non_negative_int,
            metavar="<number>",
            help="Offset for pagination",
        )
        super().add_arguments(parser)


def non_negative_int(value: str) -> int:
    """argparse type for counts and offsets."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def as_dict(data: Any) -> dict[str, Any]:
    """Treat non-object responses as empty so text rendering never crashes."""
    return data if isinstance(data, dict) else {}
