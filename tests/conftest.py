"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path

# Plain, uncolored rich output regardless of the terminal running pytest
os.environ["TERM"] = "dumb"
os.environ["NO_COLOR"] = "1"
os.environ.pop("FORCE_COLOR", None)

import httpx
import pytest

from blockchain_cli.core.api_client import APIClient
from blockchain_cli.core.config import CLIConfig
from blockchain_cli.main import BlockchainCLI

BASE_URL = "https://api.test"


class FakeAPI:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self):
        self.routes: dict[str, httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload=None, status_code: int = 200, text: str | None = None):
        if text is not None:
            self.routes[path] = httpx.Response(status_code, text=text)
        else:
            self.routes[path] = httpx.Response(status_code, json=payload)

    def fail(self, path: str, exc: Exception):
        self.routes[path] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.routes.get(request.url.path)
        if result is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def client(self) -> APIClient:
        return APIClient(BASE_URL, timeout=5.0, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_api():
    """Mocked blockchain API."""
    return FakeAPI()


@pytest.fixture
def config_path(tmp_path) -> Path:
    """Config file location inside a temporary directory."""
    return tmp_path / "config" / "config.json"


@pytest.fixture
def run_cli(fake_api, config_path):
    """Run the CLI against the mocked API and return its exit code."""

    def _run(*argv: str) -> int:
        config = CLIConfig(base_url=BASE_URL, timeout=5.0, config_path=config_path)
        cli = BlockchainCLI(config, api=fake_api.client())
        return cli.run(list(argv))

    return _run


@pytest.fixture
def address():
    return "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"


@pytest.fixture
def sample_balance(address):
    """`/balance` response for one address."""
    return {
        address: {
            "final_balance": 150000000,
            "n_tx": 3,
            "total_received": 250000000,
            "total_sent": 100000000,
        }
    }


@pytest.fixture
def sample_tx():
    """`/rawtx` response."""
    return {
        "hash": "b6f6991d03df0e2e04dafffcd6bc418aac66049e2cd74b80f14ac86db1e3f0da",
        "time": 1231006505,
        "size": 225,
        "block_height": 100000,
        "inputs": [{"prev_out": {"value": 5000000000}}],
        "out": [{"value": 1000000000}, {"value": 4000000000}],
    }


@pytest.fixture
def sample_address(address, sample_tx):
    """`/rawaddr` response."""
    return {
        "address": address,
        "hash160": "62e907b15cbf27d5425399ebf6f0fb50ebb88f18",
        "n_tx": 2,
        "total_received": 5000000000,
        "total_sent": 0,
        "final_balance": 5000000000,
        "txs": [sample_tx, {**sample_tx, "hash": "ab" * 32, "block_height": None}],
    }


@pytest.fixture
def sample_block():
    """`/rawblock` response."""
    return {
        "hash": "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f",
        "height": 0,
        "time": 0,
        "n_tx": 1,
        "size": 285,
        "ver": 1,
    }
