"""CLI Commands for the Blockchain CLI."""

from blockchain_cli.commands.address import AddressCommand, BalanceCommand, TransactionsCommand
from blockchain_cli.commands.base import BaseCommand, QueryCommand
from blockchain_cli.commands.blocks import BlockCommand, BlockHeightCommand, LatestBlockCommand
from blockchain_cli.commands.config import ConfigCommand
from blockchain_cli.commands.market import ConvertCommand, PoolsCommand, RatesCommand, StatsCommand
from blockchain_cli.commands.transactions import TransactionCommand, UnconfirmedCommand

# Registration order is the order shown in `--help`
COMMANDS: list[type[BaseCommand]] = [
    ConfigCommand,
    BalanceCommand,
    AddressCommand,
    TransactionsCommand,
    TransactionCommand,
    BlockCommand,
    BlockHeightCommand,
    LatestBlockCommand,
    UnconfirmedCommand,
    RatesCommand,
    ConvertCommand,
    StatsCommand,
    PoolsCommand,
]

__all__ = [
    "COMMANDS",
    "BaseCommand",
    "QueryCommand",
    "ConfigCommand",
    "BalanceCommand",
    "AddressCommand",
    "TransactionsCommand",
    "TransactionCommand",
    "BlockCommand",
    "BlockHeightCommand",
    "LatestBlockCommand",
    "UnconfirmedCommand",
    "RatesCommand",
    "ConvertCommand",
    "StatsCommand",
    "PoolsCommand",
]
