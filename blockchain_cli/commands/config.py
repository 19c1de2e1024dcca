"""Config command - store and show CLI settings."""

from __future__ import annotations

import argparse

from rich.text import Text

from blockchain_cli.commands.base import BaseCommand
from blockchain_cli.core.config import KEY_API_KEY, KEY_BASE_URL, ConfigStore
from blockchain_cli.ui.console import console, err_console, print_json, print_success, print_warning

MASK = "***"


class ConfigCommand(BaseCommand):
    """Manage the persisted configuration (`config set` / `config show`)."""

    name = "config"
    description = "Manage CLI configuration"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        actions = parser.add_subparsers(dest="config_action", metavar="<action>", required=True)

        set_parser = actions.add_parser("set", help="Set configuration values")
        set_parser.add_argument("--api-key", metavar="<key>", help="API key (optional)")
        set_parser.add_argument("--base-url", dest="new_base_url", metavar="<url>", help="API base URL")

        actions.add_parser("show", help="Show current configuration")

    @property
    def store(self) -> ConfigStore:
        return ConfigStore(self.config.config_path)

    def execute(self, args: argparse.Namespace) -> bool:
        if args.config_action == "set":
            return self._set(args)
        return self._show()

    def _set(self, args: argparse.Namespace) -> bool:
        store = self.store

        if args.api_key is None and args.new_base_url is None:
            print_warning("Nothing to set. Use --api-key or --base-url.")
            return True

        if args.api_key is not None:
            store.set(KEY_API_KEY, args.api_key)
            print_success("API key configured")

        if args.new_base_url is not None:
            store.set(KEY_BASE_URL, args.new_base_url.rstrip("/"))
            print_success(f"Base URL set to {args.new_base_url.rstrip('/')}")

        return True

    def _show(self) -> bool:
        store = self.store
        config = store.get_all()
        config[KEY_API_KEY] = MASK if config.get(KEY_API_KEY) else ""

        console.print(Text("Current configuration:", style="highlight"))
        print_json(config)

        if not store.is_configured():
            err_console.print(Text("No API key configured. Set one with: config set --api-key <key>", style="muted"))
        return True
