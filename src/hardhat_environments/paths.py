"""Path management utilities for hardhat-environments library."""

import posixpath
from pathlib import Path
from typing import Optional, Union


def records_path(records_root: str, network: str) -> str:
    """
    Get the records directory of one network, as configured.

    Args:
        records_root: Root of the records tree, e.g. "deployments"
        network: Logical network name, used as a raw path segment

    Returns:
        Forward-slash path <records_root>/<network>; just <network> when
        the root is empty
    """
    return posixpath.join(records_root, network)


def resolve_search_dir(search_path: str, project_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve a configured search path against the project root.

    Args:
        search_path: Directory as configured, e.g. "deployments/mainnet"
        project_root: Directory relative paths are resolved from (defaults to cwd)

    Returns:
        Absolute directory path
    """
    path = Path(search_path)
    if path.is_absolute():
        return path

    root = Path.cwd() if project_root is None else Path(project_root).absolute()
    return root / path
