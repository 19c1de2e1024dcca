"""Transaction commands - single transaction and the mempool."""

from __future__ import annotations

import argparse
from typing import Any

from rich.text import Text

from blockchain_cli.commands.base import MAX_LISTED_TRANSACTIONS, QueryCommand, as_dict
from blockchain_cli.ui.console import console, print_field, print_heading, print_success
from blockchain_cli.ui.formatting import format_timestamp, format_value


class TransactionCommand(QueryCommand):
    """Show a single transaction."""

    name = "transaction"
    description = "Get transaction details"
    spinner_message = "Fetching transaction..."

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("hash", help="Transaction hash")
        super().add_arguments(parser)

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_transaction(args.hash)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        data = as_dict(data)

        print_heading("Transaction", format_value(data.get("hash")))
        print_field("Time", format_timestamp(data.get("time")), "timestamp")
        print_field("Size", f"{format_value(data.get('size'))} bytes", "number")
        print_field("Block Height", data.get("block_height") or "Unconfirmed", "number")
        print_field("Inputs", len(data.get("inputs") or []), "number")
        print_field("Outputs", len(data.get("out") or []), "number")


class UnconfirmedCommand(QueryCommand):
    """List transactions waiting in the mempool."""

    name = "unconfirmed"
    description = "Get unconfirmed transactions"
    spinner_message = "Fetching unconfirmed transactions..."

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_unconfirmed_transactions()

    def render(self, data: Any, args: argparse.Namespace) -> None:
        txs = as_dict(data).get("txs") or []

        print_success(f"Found {len(txs)} unconfirmed transactions")
        for tx in txs[:MAX_LISTED_TRANSACTIONS]:
            tx = as_dict(tx)
            line = Text("  ")
            line.append(format_value(tx.get("hash")), style="hash")
            line.append(" - ", style="muted")
            line.append(f"{format_value(tx.get('size'))} bytes", style="number")
            console.print(line)
