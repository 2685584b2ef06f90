"""Network registry for hardhat-environments library."""

import logging
from typing import Any, Dict, Iterator, List, Mapping

from .constants import FORKABLE_NETWORKS, NETWORK_TABLE, REGISTRY_VERSION
from .exceptions import UnknownNetworkError
from .projects import ProjectProfile
from .secrets import ConfigInputs
from .types import NetworkDescriptor

logger = logging.getLogger(__name__)


class NetworkRegistry(Mapping[str, NetworkDescriptor]):
    """Read-only mapping from logical network name to its descriptor."""

    def __init__(self, networks: Dict[str, NetworkDescriptor], version: str = REGISTRY_VERSION):
        self._networks = dict(networks)
        self.version = version

    def __getitem__(self, name: str) -> NetworkDescriptor:
        return self._networks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._networks)

    def __len__(self) -> int:
        return len(self._networks)

    def __repr__(self) -> str:
        return f"NetworkRegistry(version={self.version!r}, networks={list(self._networks)})"

    def get_network(self, name: str) -> NetworkDescriptor:
        """
        Get the descriptor for a declared network.

        Args:
            name: Logical network name

        Returns:
            NetworkDescriptor for that network

        Raises:
            UnknownNetworkError: If the network is not declared
        """
        if name not in self._networks:
            raise UnknownNetworkError(
                f"Network '{name}' not declared. Available: {', '.join(self._networks)}"
            )
        return self._networks[name]

    def live_networks(self) -> List[str]:
        """Names of networks flagged as live."""
        return [name for name, net in self._networks.items() if net.live]

    def in_process_networks(self) -> List[str]:
        """Names of declared networks that run in-process or on a local daemon."""
        return [name for name in FORKABLE_NETWORKS if name in self._networks]


def _resolve_entry(name: str, profile: ProjectProfile) -> Dict[str, Any]:
    if name not in NETWORK_TABLE and name not in profile.overrides:
        raise UnknownNetworkError(
            f"Network '{name}' of project '{profile.name}' is neither in the "
            f"shared table nor defined by the project"
        )

    entry = {**NETWORK_TABLE.get(name, {}), **profile.overrides.get(name, {})}
    # An override of None drops the shared value
    return {key: value for key, value in entry.items() if value is not None}


def build_descriptor(name: str, entry: Dict[str, Any], inputs: ConfigInputs) -> NetworkDescriptor:
    """
    Build one descriptor, filling credential fields from resolved inputs.

    Args:
        name: Logical network name
        entry: Merged table entry (url, chain_id, accounts, flags)
        inputs: Resolved configuration inputs

    Returns:
        NetworkDescriptor with no template placeholders left
    """
    url = entry.get("url")
    if url is not None:
        url = url.format(infura_key=inputs.infura_key.value)

    accounts = (inputs.private_key.value,) if entry.get("accounts") else ()

    return NetworkDescriptor(
        name=name,
        url=url,
        chain_id=entry.get("chain_id"),
        accounts=accounts,
        live=entry.get("live"),
        save_deployments=entry.get("save_deployments"),
    )


def build_registry(profile: ProjectProfile, inputs: ConfigInputs) -> NetworkRegistry:
    """
    Build the network registry for a project.

    Args:
        profile: Project profile selecting and patching networks
        inputs: Resolved configuration inputs

    Returns:
        NetworkRegistry with one descriptor per declared network

    Raises:
        UnknownNetworkError: If the profile declares a network it never defines
    """
    networks = {
        name: build_descriptor(name, _resolve_entry(name, profile), inputs)
        for name in profile.networks
    }

    logger.debug(
        "Built registry %s for project '%s' with %d networks",
        REGISTRY_VERSION,
        profile.name,
        len(networks),
    )
    return NetworkRegistry(networks)
