"""Address commands - balance, address details and address transactions."""

from __future__ import annotations

import argparse
from typing import Any

from blockchain_cli.commands.base import (
    MAX_LISTED_TRANSACTIONS,
    PaginatedQueryCommand,
    QueryCommand,
    as_dict,
)
from blockchain_cli.ui.console import print_field, print_heading, print_success, print_warning
from blockchain_cli.ui.formatting import format_timestamp, format_value, satoshis_to_btc


class BalanceCommand(QueryCommand):
    """Show the balance summary for an address."""

    name = "balance"
    description = "Get balance for a Bitcoin address"
    spinner_message = "Fetching balance..."

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("address", help="Bitcoin address")
        super().add_arguments(parser)

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_balance(args.address)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        balance = as_dict(data).get(args.address)
        if not isinstance(balance, dict):
            print_warning(f"No balance information returned for {args.address}")
            return

        print_success("Balance information:")
        print_field("Final Balance", f"{satoshis_to_btc(balance.get('final_balance'))} BTC", "amount")
        print_field("Total Received", f"{satoshis_to_btc(balance.get('total_received'))} BTC", "amount")
        print_field("Total Sent", f"{satoshis_to_btc(balance.get('total_sent'))} BTC", "amount")
        print_field("Transactions", format_value(balance.get("n_tx")), "number")


class AddressCommand(PaginatedQueryCommand):
    """Show address details."""

    name = "address"
    description = "Get detailed address information"
    spinner_message = "Fetching address info..."

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_address_info(args.address, limit=args.limit, offset=args.offset)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        data = as_dict(data)

        print_success("Address information:")
        print_field("Address", format_value(data.get("address")), "address")
        print_field("Hash160", format_value(data.get("hash160")))
        print_field("Total Received", f"{satoshis_to_btc(data.get('total_received'))} BTC", "amount")
        print_field("Total Sent", f"{satoshis_to_btc(data.get('total_sent'))} BTC", "amount")
        print_field("Final Balance", f"{satoshis_to_btc(data.get('final_balance'))} BTC", "amount")
        print_field("Transactions", format_value(data.get("n_tx")), "number")


class TransactionsCommand(PaginatedQueryCommand):
    """List the transactions of an address."""

    name = "transactions"
    description = "List transactions for an address"
    spinner_message = "Fetching transactions..."

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.list_transactions(args.address, limit=args.limit, offset=args.offset)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        data = as_dict(data)

        print_success(f"Found {format_value(data.get('n_tx'))} transactions")
        for tx in (data.get("txs") or [])[:MAX_LISTED_TRANSACTIONS]:
            tx = as_dict(tx)
            print_heading(format_value(tx.get("hash")))
            print_field("Time", format_timestamp(tx.get("time")), "timestamp")
            print_field("Size", f"{format_value(tx.get('size'))} bytes", "number")
            print_field("Block Height", tx.get("block_height") or "Unconfirmed", "number")
