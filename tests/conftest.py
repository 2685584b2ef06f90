"""Shared pytest fixtures for hardhat-environments tests."""

import json
import shutil
from pathlib import Path

import pytest

from hardhat_environments.constants import (
    COINMARKETCAP_API_KEY_ENV,
    ETHERSCAN_API_KEY_ENV,
    FORK_ENV,
    INFURA_KEY_ENV,
    PRIVATE_KEY_ENV,
)
from hardhat_environments.secrets import ConfigInputs

ALL_INPUTS = [
    PRIVATE_KEY_ENV,
    ETHERSCAN_API_KEY_ENV,
    COINMARKETCAP_API_KEY_ENV,
    INFURA_KEY_ENV,
    FORK_ENV,
]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch) -> Path:
    """Unset every input and run from an empty directory (no .env)."""
    for name in ALL_INPUTS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def empty_inputs() -> ConfigInputs:
    """Inputs resolved with nothing set."""
    return ConfigInputs.from_environ(environ={})


@pytest.fixture
def hardhat_deploy_sample(fixtures_dir: Path) -> Path:
    """Return path to sample hardhat-deploy JSON file."""
    return fixtures_dir / "hardhat_deploy" / "Token.json"


@pytest.fixture
def local_market_address() -> str:
    """Address of the Market redeployed on the in-process network."""
    return "0x2222222222222222222222222222222222222222"


@pytest.fixture
def records_project(tmp_path: Path, fixtures_dir: Path, local_market_address: str) -> Path:
    """
    Create a project directory with published records.

    deployments/mainnet holds Token and Market, deployments/hardhat holds a
    local Market at a different address.
    """
    project_root = tmp_path / "project"
    mainnet_dir = project_root / "deployments" / "mainnet"
    hardhat_dir = project_root / "deployments" / "hardhat"
    mainnet_dir.mkdir(parents=True)
    hardhat_dir.mkdir(parents=True)

    for record in (fixtures_dir / "hardhat_deploy").glob("*.json"):
        shutil.copy(record, mainnet_dir / record.name)
    (mainnet_dir / ".chainId").write_text("56")

    local_market = {
        "address": local_market_address,
        "abi": [],
        "receipt": {"blockNumber": 3},
    }
    with open(hardhat_dir / "Market.json", "w") as f:
        json.dump(local_market, f, indent=2)

    return project_root
