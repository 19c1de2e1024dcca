"""CLI configuration: the persisted key-value store and the runtime config."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from blockchain_cli.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://blockchain.info"
DEFAULT_TIMEOUT = 30.0
CONFIG_FILENAME = "config.json"

# Keys as they appear in the JSON file
KEY_BASE_URL = "baseUrl"
KEY_API_KEY = "apiKey"


def default_config_dir() -> Path:
    """Directory holding the config file (``BLOCKCHAIN_CLI_CONFIG_DIR`` overrides)."""
    return Path(os.getenv("BLOCKCHAIN_CLI_CONFIG_DIR", Path.home() / ".blockchain-cli"))


def default_config_path() -> Path:
    return default_config_dir() / CONFIG_FILENAME


class ConfigStore:
    """Flat string-to-string mapping persisted as a JSON object."""

    DEFAULTS: dict[str, str] = {KEY_BASE_URL: DEFAULT_BASE_URL}

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else default_config_path()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read config file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {self.path} must contain a JSON object")
        return data

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a stored value, falling back to the built-in default."""
        data = self._read()
        if key in data:
            return data[key]
        return self.DEFAULTS.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Store a value, creating the file on first write."""
        data = self._read()
        data[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot write config file {self.path}: {e}") from e

        logger.debug("Stored %s in %s", key, self.path)

    def get_all(self) -> dict[str, Any]:
        """All values, with defaults for anything not stored."""
        return {**self.DEFAULTS, **self._read()}

    def is_configured(self) -> bool:
        """True once an API key has been stored."""
        return bool(self._read().get(KEY_API_KEY))


@dataclass
class CLIConfig:
    """Runtime configuration, loaded once per process."""

    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None  # stored only, not sent with requests
    timeout: float = DEFAULT_TIMEOUT
    config_path: Path = field(default_factory=default_config_path)

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def load(
        cls,
        store: ConfigStore | None = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "CLIConfig":
        """Build the config from flags, environment and the config file.

        Flags win over ``BLOCKCHAIN_CLI_BASE_URL``/``BLOCKCHAIN_CLI_TIMEOUT``,
        which win over the stored file and the defaults.
        """
        store = store or ConfigStore()
        stored = store.get_all()

        if timeout is None:
            env_timeout = os.getenv("BLOCKCHAIN_CLI_TIMEOUT")
            try:
                timeout = float(env_timeout) if env_timeout else DEFAULT_TIMEOUT
            except ValueError as e:
                raise ConfigError(f"Invalid BLOCKCHAIN_CLI_TIMEOUT: {env_timeout}") from e

        return cls(
            base_url=(
                base_url
                or os.getenv("BLOCKCHAIN_CLI_BASE_URL")
                or stored.get(KEY_BASE_URL)
                or DEFAULT_BASE_URL
            ),
            api_key=stored.get(KEY_API_KEY) or None,
            timeout=timeout,
            config_path=store.path,
        )
