"""Deployment record lookup for hardhat-environments library."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .config import ProjectConfiguration
from .exceptions import DefectiveRecordError
from .paths import resolve_search_dir
from .types import DeploymentRecord

logger = logging.getLogger(__name__)


def parse_record(
    file_path: Path, network: str, chain_id: Optional[int] = None
) -> DeploymentRecord:
    """
    Parse a hardhat-deploy record JSON file.

    Args:
        file_path: Path to <Contract>.json
        network: Network the record is being looked up for
        chain_id: Chain id of the directory the record lives in, if known

    Returns:
        DeploymentRecord named after the file stem

    Raises:
        DefectiveRecordError: If the file isn't a JSON object or address or
                              abi is missing
    """
    with open(file_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise DefectiveRecordError(f"Deployment record is not a JSON object: {file_path}")

    if "address" not in data or "abi" not in data:
        raise DefectiveRecordError(f"Missing address or abi in deployment record: {file_path}")

    # Try to get block number from receipt first, fall back to top-level
    block_number = None
    receipt = data.get("receipt")
    if isinstance(receipt, dict) and "blockNumber" in receipt:
        block_number = receipt["blockNumber"]
    elif "blockNumber" in data:
        block_number = data["blockNumber"]

    return DeploymentRecord(
        name=file_path.stem,
        address=data["address"],
        abi=data["abi"],
        network=network,
        source_dir=file_path.parent,
        chain_id=chain_id,
        block=block_number,
        transaction_hash=data.get("transactionHash"),
        bytecode=data.get("bytecode"),
        deployed_bytecode=data.get("deployedBytecode"),
        constructor_args=data.get("args"),
        solc_input_hash=data.get("solcInputHash"),
        num_deployments=data.get("numDeployments"),
    )


def read_chain_id(directory: Path) -> Optional[int]:
    """
    Read the chain id hardhat-deploy stores next to the records.

    Args:
        directory: Records directory of one network

    Returns:
        Chain id from the .chainId file, None if absent or unreadable
    """
    chain_id_file = directory / ".chainId"
    try:
        return int(chain_id_file.read_text().strip())
    except (OSError, ValueError):
        return None


def load_records(
    config: ProjectConfiguration,
    network: str,
    project_root: Optional[Union[Path, str]] = None,
) -> Dict[str, DeploymentRecord]:
    """
    Load published records visible to a network.

    Directories are searched in configured order; a record found earlier
    hides one of the same name found later, so a network's own records win
    over forwarded ones. Missing directories contribute nothing.

    Args:
        config: Assembled project configuration
        network: Logical network name
        project_root: Directory relative search paths resolve from (defaults to cwd)

    Returns:
        Dictionary mapping contract name -> DeploymentRecord, each carrying
        the chain id of the directory it was found in
    """
    records: Dict[str, DeploymentRecord] = {}

    for search_path in config.search_paths(network):
        directory = resolve_search_dir(search_path, project_root)
        if not directory.is_dir():
            logger.debug("No records directory at %s", directory)
            continue

        chain_id = read_chain_id(directory)

        for record_file in sorted(directory.glob("*.json")):
            if record_file.stem in records:
                continue
            try:
                records[record_file.stem] = parse_record(record_file, network, chain_id)
            except (DefectiveRecordError, json.JSONDecodeError, UnicodeDecodeError) as e:
                # Skip defective records
                logger.warning("Skipping record %s: %s", record_file, e)

    return records
