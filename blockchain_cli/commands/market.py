"""Market and network commands - rates, conversion, stats and mining pools."""

from __future__ import annotations

import argparse
from typing import Any

from blockchain_cli.commands.base import QueryCommand, as_dict
from blockchain_cli.core.api_client import DEFAULT_POOLS_TIMESPAN
from blockchain_cli.ui.console import print_field, print_success
from blockchain_cli.ui.formatting import format_btc, format_number, format_value, satoshis_to_btc


class RatesCommand(QueryCommand):
    """Show BTC exchange rates for every currency the API quotes."""

    name = "rates"
    description = "Get current Bitcoin exchange rates"
    spinner_message = "Fetching exchange rates..."

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_exchange_rates()

    def render(self, data: Any, args: argparse.Namespace) -> None:
        print_success("Exchange rates:")
        for currency, info in as_dict(data).items():
            info = as_dict(info)
            print_field(currency, f"{info.get('symbol', '')}{format_number(info.get('last'))}", "amount")


class ConvertCommand(QueryCommand):
    """Convert an amount of a fiat currency to BTC."""

    name = "convert"
    description = "Convert currency to BTC"
    spinner_message = "Converting..."

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("currency", help="Currency code, e.g. USD")
        parser.add_argument("value", type=amount, help="Amount in that currency")
        super().add_arguments(parser)

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.convert_to_btc(args.currency, args.value)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        print_success(f"{args.value} {args.currency.upper()} = {format_btc(data)} BTC")


class StatsCommand(QueryCommand):
    """Display network statistics."""

    name = "stats"
    description = "Get blockchain statistics"
    spinner_message = "Fetching stats..."

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_stats()

    def render(self, data: Any, args: argparse.Namespace) -> None:
        data = as_dict(data)

        print_success("Blockchain statistics:")
        print_field("Market Price (USD)", f"${format_number(data.get('market_price_usd'))}", "amount")
        print_field("Hash Rate", format_number(data.get("hash_rate")), "number")
        print_field(
            "Total BTC Sent",
            f"{satoshis_to_btc(data.get('total_btc_sent'), grouped=True)} BTC",
            "amount",
        )
        print_field("Blocks Count", format_number(data.get("n_blocks_total")), "number")
        # Reported by the API in BTC already
        print_field("Total Fees", f"{format_number(data.get('total_fees_btc'))} BTC", "amount")


class PoolsCommand(QueryCommand):
    """Show how many blocks each mining pool found over a timespan."""

    name = "pools"
    description = "Get mining pool information"
    spinner_message = "Fetching pool info..."

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--timespan",
            default=DEFAULT_POOLS_TIMESPAN,
            metavar="<period>",
            help=f"Timespan, e.g. 5days or 10days (default: {DEFAULT_POOLS_TIMESPAN})",
        )
        super().add_arguments(parser)

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_pools(args.timespan)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        print_success("Mining pools:")
        for pool, count in as_dict(data).items():
            print_field(pool, f"{format_value(count)} blocks", "number")


def amount(value: str) -> str:
    """argparse type: accept any number but keep the text as typed."""
    try:
        float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}")
    return value
