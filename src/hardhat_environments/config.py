"""Project configuration assembly for hardhat-environments library."""

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .constants import DEFAULT_NETWORK, DEFAULT_TEST_TIMEOUT
from .forking import (
    ForkDirective,
    NoForward,
    check_fork_source,
    external_deployments,
    fork_directive,
    search_paths,
)
from .networks import NetworkRegistry, build_registry
from .projects import ProjectProfile, get_profile
from .secrets import ConfigInputs
from .types import CompilerSettings, NetworkDescriptor, ProjectPaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectConfiguration:
    """Resolved configuration handed to the deployment tool."""

    project: str
    compiler: CompilerSettings
    paths: ProjectPaths
    networks: NetworkRegistry
    fork: ForkDirective = field(default_factory=NoForward)
    default_network: str = DEFAULT_NETWORK
    named_accounts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    etherscan_api_key: str = ""
    gas_reporter: Optional[Mapping[str, Any]] = None
    test_timeout: int = DEFAULT_TEST_TIMEOUT

    def network(self, name: str) -> NetworkDescriptor:
        """Descriptor of a declared network (raises UnknownNetworkError)."""
        return self.networks.get_network(name)

    @property
    def external(self) -> Optional[Dict[str, List[str]]]:
        """Extra record directories per network, None when not forking."""
        return external_deployments(self.fork, self.paths.deployments)

    def search_paths(self, network: str) -> Tuple[str, ...]:
        """Ordered record directories for a network, own directory first."""
        return search_paths(network, self.fork, self.paths.deployments)

    def to_dict(self) -> Dict[str, Any]:
        """
        Export in the shape of a hardhat user config.

        Returns:
            Dictionary with camelCase keys as hardhat expects them
        """
        result: Dict[str, Any] = {
            "defaultNetwork": self.default_network,
            "solidity": {
                "compilers": [
                    {
                        "version": self.compiler.version,
                        "settings": {
                            "optimizer": {
                                "enabled": self.compiler.optimizer_enabled,
                                "runs": self.compiler.optimizer_runs,
                            }
                        },
                    }
                ]
            },
            "networks": {name: _network_to_dict(net) for name, net in self.networks.items()},
            "mocha": {"timeout": self.test_timeout},
            "etherscan": {"apiKey": self.etherscan_api_key},
        }

        if self.named_accounts:
            result["namedAccounts"] = dict(self.named_accounts)

        paths = {
            key: value
            for key, value in [
                ("sources", self.paths.sources),
                ("tests", self.paths.tests),
                ("cache", self.paths.cache),
                ("artifacts", self.paths.artifacts),
            ]
            if value is not None
        }
        if paths:
            result["paths"] = paths

        if self.paths.typechain_out is not None:
            result["typechain"] = {"outDir": self.paths.typechain_out}

        if self.gas_reporter is not None:
            result["gasReporter"] = dict(self.gas_reporter)

        external = self.external
        if external is not None:
            result["external"] = {"deployments": external}

        return result

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def _network_to_dict(net: NetworkDescriptor) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if net.url is not None:
        data["url"] = net.url
    if net.chain_id is not None:
        data["chainId"] = net.chain_id
    if net.accounts:
        data["accounts"] = list(net.accounts)
    if net.live is not None:
        data["live"] = net.live
    if net.save_deployments is not None:
        data["saveDeployments"] = net.save_deployments
    return data


def _gas_reporter(profile: ProjectProfile, inputs: ConfigInputs) -> Optional[Mapping[str, Any]]:
    if profile.gas_reporter is None:
        return None

    settings: Dict[str, Any] = {
        "currency": profile.gas_reporter["currency"],
        "gasPrice": profile.gas_reporter["gas_price"],
    }
    if profile.gas_reporter.get("pricing_key"):
        settings["coinmarketcap"] = inputs.coinmarketcap_api_key.value
    return MappingProxyType(settings)


def assemble(
    project: Union[str, ProjectProfile],
    inputs: Optional[ConfigInputs] = None,
    strict_fork: bool = False,
) -> ProjectConfiguration:
    """
    Assemble the configuration of a project for one invocation.

    Absent inputs resolve to their defaults; nothing about the environment
    makes this fail. Endpoints and credentials are not checked here.

    Args:
        project: Registered project name or a ProjectProfile
        inputs: Resolved inputs (defaults to ConfigInputs.from_environ())
        strict_fork: Raise if the fork source is not a declared network

    Returns:
        ProjectConfiguration

    Raises:
        UnknownProjectError: If project names no registered profile
        UnknownForkNetworkError: Only with strict_fork, see check_fork_source
    """
    profile = get_profile(project) if isinstance(project, str) else project
    if inputs is None:
        inputs = ConfigInputs.from_environ()

    registry = build_registry(profile, inputs)

    directive = fork_directive(inputs.fork) if profile.fork_support else NoForward()
    if inputs.fork and not profile.fork_support:
        logger.debug(
            "Project '%s' does not forward records; ignoring fork source", profile.name
        )
    check_fork_source(directive, registry, strict=strict_fork)

    config = ProjectConfiguration(
        project=profile.name,
        compiler=profile.compiler,
        paths=profile.paths,
        networks=registry,
        fork=directive,
        default_network=profile.default_network,
        named_accounts=MappingProxyType(dict(profile.named_accounts)),
        etherscan_api_key=inputs.etherscan_api_key.value,
        gas_reporter=_gas_reporter(profile, inputs),
        test_timeout=profile.test_timeout,
    )

    logger.debug("Assembled configuration for project '%s' (fork: %s)", profile.name, directive)
    return config
