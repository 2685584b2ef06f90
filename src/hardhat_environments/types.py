"""Data types and dataclasses for hardhat-environments library."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Secret:
    """A named external input with its fallback default."""

    name: str  # e.g., "ETHERSCAN_API_KEY"
    raw: Optional[str]  # Value as read, None when absent
    default: str  # Placeholder used when raw is absent or empty

    @property
    def value(self) -> str:
        return self.raw if self.raw else self.default

    @property
    def is_default(self) -> bool:
        return not self.raw

    def __repr__(self) -> str:
        state = "default" if self.is_default else "set"
        return f"Secret(name={self.name!r}, {state})"


@dataclass(frozen=True)
class NetworkDescriptor:
    """Connection descriptor for one logical network."""

    # Required fields
    name: str  # Logical name, e.g., "bsc"

    # Optional fields
    url: Optional[str] = None  # None for the in-process networks
    chain_id: Optional[int] = None
    accounts: Tuple[str, ...] = ()
    live: Optional[bool] = None
    save_deployments: Optional[bool] = None

    def __repr__(self) -> str:
        return (
            f"NetworkDescriptor(name={self.name!r}, url={self.url!r}, "
            f"chain_id={self.chain_id!r}, accounts=<{len(self.accounts)}>)"
        )


@dataclass(frozen=True)
class CompilerSettings:
    """Solidity compiler parameters."""

    version: str  # e.g., "0.7.6"
    optimizer_enabled: bool
    optimizer_runs: int  # Passed through as given


@dataclass(frozen=True)
class ProjectPaths:
    """Directory conventions for a project."""

    sources: Optional[str] = None
    tests: Optional[str] = None
    cache: Optional[str] = None
    artifacts: Optional[str] = None
    deployments: str = "deployments"
    typechain_out: Optional[str] = None


@dataclass
class DeploymentRecord:
    """A previously published contract read from a records directory."""

    # Required fields
    name: str  # Contract name from the record filename
    address: str
    abi: List[Dict[str, Any]]
    network: str  # Network the record was looked up for
    source_dir: Path  # Directory the record was found in

    # Optional fields (from hardhat-deploy)
    chain_id: Optional[int] = None  # From the directory's .chainId file
    block: Optional[int] = None
    transaction_hash: Optional[str] = None
    bytecode: Optional[str] = None
    deployed_bytecode: Optional[str] = None
    constructor_args: Optional[List[Any]] = None
    solc_input_hash: Optional[str] = None
    num_deployments: Optional[int] = None
