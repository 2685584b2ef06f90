"""Project profiles over the shared network table."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import (
    DEFAULT_COMPILER,
    DEFAULT_NETWORK,
    DEFAULT_RECORDS_ROOT,
    DEFAULT_TEST_TIMEOUT,
    PROJECT_PROFILES,
)
from .exceptions import UnknownProjectError
from .types import CompilerSettings, ProjectPaths


@dataclass
class ProjectProfile:
    """What a single project declares on top of the shared network table."""

    name: str
    compiler: CompilerSettings
    networks: List[str]
    overrides: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    paths: ProjectPaths = field(default_factory=ProjectPaths)
    named_accounts: Dict[str, int] = field(default_factory=lambda: {"deployer": 0})
    fork_support: bool = True
    default_network: str = DEFAULT_NETWORK
    test_timeout: int = DEFAULT_TEST_TIMEOUT
    gas_reporter: Optional[Dict[str, Any]] = None


def _profile_from_dict(name: str, data: Dict[str, Any]) -> ProjectProfile:
    compiler = {**DEFAULT_COMPILER, **data.get("compiler", {})}
    paths = data.get("paths") or {}

    return ProjectProfile(
        name=name,
        compiler=CompilerSettings(**compiler),
        networks=list(data["networks"]),
        overrides={net: dict(patch) for net, patch in data.get("overrides", {}).items()},
        paths=ProjectPaths(
            deployments=DEFAULT_RECORDS_ROOT,
            typechain_out=data.get("typechain_out"),
            **paths,
        ),
        named_accounts=dict(data.get("named_accounts", {"deployer": 0})),
        fork_support=data.get("fork_support", True),
        gas_reporter=dict(data["gas_reporter"]) if "gas_reporter" in data else None,
    )


def profile_names() -> List[str]:
    """Names of all registered projects, sorted."""
    return sorted(PROJECT_PROFILES)


def get_profile(name: str) -> ProjectProfile:
    """
    Look up a registered project profile.

    Args:
        name: Project name, e.g. "marketplace-v2"

    Returns:
        A fresh ProjectProfile (callers may modify it)

    Raises:
        UnknownProjectError: If no profile is registered under that name
    """
    if name not in PROJECT_PROFILES:
        raise UnknownProjectError(
            f"Project '{name}' not found. Known projects: {', '.join(profile_names())}"
        )
    return _profile_from_dict(name, PROJECT_PROFILES[name])
