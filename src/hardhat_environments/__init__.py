"""
hardhat-environments: Python library resolving networks, credentials and
fork forwarding for hardhat smart contract projects
"""

from importlib.metadata import PackageNotFoundError, version

from .config import ProjectConfiguration, assemble
from .exceptions import (
    ConfigurationError,
    DefectiveRecordError,
    UnknownForkNetworkError,
    UnknownNetworkError,
    UnknownProjectError,
)
from .forking import ForkDirective, ForwardFrom, NoForward, fork_directive
from .networks import NetworkRegistry, build_registry
from .projects import ProjectProfile, get_profile, profile_names
from .records import load_records
from .secrets import ConfigInputs, resolve_secret
from .types import CompilerSettings, DeploymentRecord, NetworkDescriptor, ProjectPaths, Secret

try:
    __version__ = version("hardhat-environments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "assemble",
    "ProjectConfiguration",
    "ConfigInputs",
    "resolve_secret",
    "NetworkRegistry",
    "build_registry",
    "ProjectProfile",
    "get_profile",
    "profile_names",
    "ForkDirective",
    "ForwardFrom",
    "NoForward",
    "fork_directive",
    "load_records",
    "CompilerSettings",
    "DeploymentRecord",
    "NetworkDescriptor",
    "ProjectPaths",
    "Secret",
    "ConfigurationError",
    "UnknownNetworkError",
    "UnknownProjectError",
    "UnknownForkNetworkError",
    "DefectiveRecordError",
]
