"""Secret resolution and the centralized configuration inputs."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import (
    COINMARKETCAP_API_KEY_ENV,
    ETHERSCAN_API_KEY_ENV,
    FORK_ENV,
    INFURA_KEY_ENV,
    PLACEHOLDER_PRIVATE_KEY,
    PRIVATE_KEY_ENV,
)
from .types import Secret

logger = logging.getLogger(__name__)


def resolve_secret(
    name: str, default: str, environ: Optional[Mapping[str, str]] = None
) -> Secret:
    """
    Resolve a named external input, falling back to a default.

    Absence is a normal state (e.g. local development), so this never raises.

    Args:
        name: Input name, e.g. "ETHERSCAN_API_KEY"
        default: Value used when the input is absent or empty
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Secret whose value is the input's value if non-empty, else the default
    """
    if environ is None:
        environ = os.environ
    return Secret(name=name, raw=environ.get(name) or None, default=default)


def read_dotenv(dotenv_path: Union[Path, str]) -> Dict[str, str]:
    """
    Read KEY=VALUE pairs from a .env file.

    Args:
        dotenv_path: Path to the .env file

    Returns:
        Dictionary of defined values, empty if the file doesn't exist or
        can't be read. Keys declared without a value are dropped.
    """
    path = Path(dotenv_path)
    if not path.is_file():
        return {}

    try:
        values = dotenv_values(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable .env file %s: %s", path, e)
        return {}
    return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class ConfigInputs:
    """All external inputs of one invocation, resolved once."""

    private_key: Secret
    etherscan_api_key: Secret
    coinmarketcap_api_key: Secret
    infura_key: Secret
    fork: Optional[str] = None  # Network the current environment is forked from

    @classmethod
    def from_environ(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        dotenv_path: Optional[Union[Path, str]] = None,
    ) -> "ConfigInputs":
        """
        Resolve inputs from the environment, layered over a .env file.

        Values in the environment win over values in the .env file.

        Args:
            environ: Mapping to read from. If None, uses os.environ and
                     ./.env when dotenv_path is not given.
            dotenv_path: .env file to layer underneath the environment

        Returns:
            ConfigInputs with every absent input set to its default
        """
        if environ is None:
            environ = os.environ
            if dotenv_path is None:
                dotenv_path = Path.cwd() / ".env"

        merged: Dict[str, str] = {}
        if dotenv_path is not None:
            merged.update(read_dotenv(dotenv_path))
        merged.update(environ)

        inputs = cls(
            private_key=resolve_secret(PRIVATE_KEY_ENV, PLACEHOLDER_PRIVATE_KEY, merged),
            etherscan_api_key=resolve_secret(ETHERSCAN_API_KEY_ENV, "", merged),
            coinmarketcap_api_key=resolve_secret(COINMARKETCAP_API_KEY_ENV, "", merged),
            infura_key=resolve_secret(INFURA_KEY_ENV, "", merged),
            fork=merged.get(FORK_ENV) or None,
        )

        defaulted = [s.name for s in inputs.secrets() if s.is_default]
        if defaulted:
            logger.debug("Using defaults for unset inputs: %s", ", ".join(defaulted))

        return inputs

    @classmethod
    def defaults(cls) -> "ConfigInputs":
        """Inputs as they resolve with nothing set."""
        return cls.from_environ(environ={})

    def secrets(self) -> tuple[Secret, ...]:
        return (
            self.private_key,
            self.etherscan_api_key,
            self.coinmarketcap_api_key,
            self.infura_key,
        )
