"""Error types surfaced to the command layer."""

from __future__ import annotations

from typing import Optional


class BlockchainCLIError(Exception):
    """Base class for every error a command reports to the user."""


class ApiError(BlockchainCLIError):
    """The remote API answered with a structured error message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"API Error: {self.message}"


class RequestError(BlockchainCLIError):
    """Transport failure, timeout, or a response that could not be parsed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"Request failed: {self.message}"


class ConfigError(BlockchainCLIError):
    """The configuration file could not be read or written."""
