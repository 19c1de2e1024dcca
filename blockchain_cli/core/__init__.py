"""Core CLI components - configuration, API client, and errors."""

from blockchain_cli.core.api_client import APIClient
from blockchain_cli.core.config import CLIConfig, ConfigStore
from blockchain_cli.core.errors import (
    ApiError,
    BlockchainCLIError,
    ConfigError,
    RequestError,
)

__all__ = [
    "APIClient",
    "CLIConfig",
    "ConfigStore",
    "BlockchainCLIError",
    "ApiError",
    "RequestError",
    "ConfigError",
]
