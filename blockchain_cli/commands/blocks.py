"""Block commands - lookup by hash, by height, and the chain tip."""

from __future__ import annotations

import argparse
from typing import Any

from blockchain_cli.commands.base import QueryCommand, as_dict, non_negative_int
from blockchain_cli.ui.console import print_field, print_heading, print_success
from blockchain_cli.ui.formatting import format_timestamp, format_value


class BlockCommand(QueryCommand):
    """Show a block by hash."""

    name = "block"
    description = "Get block information by hash"
    spinner_message = "Fetching block..."

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("hash", help="Block hash")
        super().add_arguments(parser)

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_block(args.hash)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        data = as_dict(data)

        print_heading("Block", format_value(data.get("hash")))
        print_field("Height", format_value(data.get("height")), "number")
        print_field("Time", format_timestamp(data.get("time")), "timestamp")
        print_field("Transactions", format_value(data.get("n_tx")), "number")
        print_field("Size", f"{format_value(data.get('size'))} bytes", "number")
        print_field("Version", format_value(data.get("ver")))


class BlockHeightCommand(QueryCommand):
    """Show the block(s) at a height; forks can yield more than one."""

    name = "block-height"
    description = "Get block information by height"
    spinner_message = "Fetching block..."

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("height", type=non_negative_int, help="Block height")
        super().add_arguments(parser)

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_block_by_height(args.height)

    def render(self, data: Any, args: argparse.Namespace) -> None:
        blocks = as_dict(data).get("blocks") or []

        print_success(f"Found {len(blocks)} block(s) at height {args.height}")
        for block in blocks:
            block = as_dict(block)
            print_heading("Block Hash", format_value(block.get("hash")))
            print_field("Time", format_timestamp(block.get("time")), "timestamp")
            print_field("Transactions", format_value(block.get("n_tx")), "number")


class LatestBlockCommand(QueryCommand):
    """Show the most recent block."""

    name = "latest-block"
    description = "Get the latest block"
    spinner_message = "Fetching latest block..."

    def fetch(self, args: argparse.Namespace) -> Any:
        return self.api.get_latest_block()

    def render(self, data: Any, args: argparse.Namespace) -> None:
        data = as_dict(data)

        print_heading("Latest Block")
        print_field("Hash", format_value(data.get("hash")), "hash")
        print_field("Height", format_value(data.get("height")), "number")
        print_field("Time", format_timestamp(data.get("time")), "timestamp")
        print_field("Block Index", format_value(data.get("block_index")), "number")
