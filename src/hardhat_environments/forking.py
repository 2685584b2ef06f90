"""
Fork forwarding for hardhat-environments library.

When the current environment is a fork of another network, the in-process
and local-daemon networks should also see the records already published for
the forked-from network, so a rehearsal doesn't redeploy them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .constants import DEFAULT_RECORDS_ROOT, FORKABLE_NETWORKS
from .exceptions import UnknownForkNetworkError
from .paths import records_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoForward:
    """Forwarding disabled; each network looks only at its own records."""


@dataclass(frozen=True)
class ForwardFrom:
    """Forwarding active from the named network."""

    network: str


ForkDirective = Union[NoForward, ForwardFrom]


def fork_directive(fork_source: Optional[str]) -> ForkDirective:
    """
    Derive the fork directive from the fork-source input.

    Args:
        fork_source: Name of the network being forked, or None

    Returns:
        ForwardFrom if fork_source is non-empty, NoForward otherwise
    """
    if fork_source:
        return ForwardFrom(fork_source)
    return NoForward()


def external_deployments(
    directive: ForkDirective, records_root: str = DEFAULT_RECORDS_ROOT
) -> Optional[Dict[str, List[str]]]:
    """
    Compute the extra record directories per network.

    The forked-from name is used as a raw path segment and is not checked.

    Args:
        directive: Fork directive
        records_root: Root of the records directory tree

    Returns:
        None for NoForward, otherwise a mapping of the in-process and local
        networks to a single extra directory <records_root>/<forked-from>
    """
    if isinstance(directive, NoForward):
        return None

    fork_dir = records_path(records_root, directive.network)
    return {network: [fork_dir] for network in FORKABLE_NETWORKS}


def search_paths(
    network: str, directive: ForkDirective, records_root: str = DEFAULT_RECORDS_ROOT
) -> Tuple[str, ...]:
    """
    Get the ordered record directories searched for a network.

    Args:
        network: Logical network name
        directive: Fork directive
        records_root: Root of the records directory tree

    Returns:
        The network's own directory first, then any forwarded directory.
        Never contains duplicates.
    """
    paths = [records_path(records_root, network)]

    external = external_deployments(directive, records_root) or {}
    for extra in external.get(network, []):
        if extra not in paths:
            paths.append(extra)

    return tuple(paths)


def check_fork_source(
    directive: ForkDirective, known_networks: Mapping, strict: bool = False
) -> bool:
    """
    Check that the forked-from network is one the project declares.

    Args:
        directive: Fork directive
        known_networks: Declared networks (e.g. a NetworkRegistry)
        strict: Raise instead of logging a warning

    Returns:
        True if forwarding is disabled or the source is declared

    Raises:
        UnknownForkNetworkError: In strict mode, if the source is not declared
    """
    if isinstance(directive, NoForward) or directive.network in known_networks:
        return True

    message = (
        f"Fork source '{directive.network}' is not a declared network; "
        f"no forwarded records will be found"
    )
    if strict:
        raise UnknownForkNetworkError(message)

    logger.warning(message)
    return False
