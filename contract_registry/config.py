"""
Registry Configuration - where the contract list comes from.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from contract_registry.addresses import get_default_registry
from contract_registry.contracts import RegistryLoader
from contract_registry.registry import ContractRegistry


logger = logging.getLogger(__name__)

ENV_SOURCE_FILE = "CONTRACT_REGISTRY_FILE"
ENV_VALIDATE = "CONTRACT_REGISTRY_VALIDATE"
ENV_LOG_LEVEL = "CONTRACT_REGISTRY_LOG_LEVEL"

_FALSE_VALUES = {"0", "false", "no", "off"}


def _as_bool(value) -> bool:
    return str(value).strip().lower() not in _FALSE_VALUES


@dataclass
class RegistryConfig:
    """
    Registry configuration.

    With no ``source_file`` the built-in contract table is used.
    """
    source_file: Optional[str] = None
    validate_on_load: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict) -> "RegistryConfig":
        """Create config from dictionary."""
        return cls(
            source_file=data.get("source_file", data.get("sourceFile")),
            validate_on_load=_as_bool(data.get("validate_on_load", data.get("validateOnLoad", True))),
            log_level=str(data.get("log_level", data.get("logLevel", "WARNING"))).upper(),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RegistryConfig":
        """Create config from environment variables."""
        env = os.environ if environ is None else environ
        validate = _as_bool(env.get(ENV_VALIDATE, "true"))
        return cls(
            source_file=env.get(ENV_SOURCE_FILE) or None,
            validate_on_load=validate,
            log_level=env.get(ENV_LOG_LEVEL, "WARNING").upper(),
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "sourceFile": self.source_file,
            "validateOnLoad": self.validate_on_load,
            "logLevel": self.log_level,
        }


def load_registry(config: Optional[RegistryConfig] = None) -> ContractRegistry:
    """
    Resolve the registry described by a configuration.

    Args:
        config: Registry configuration (read from the environment if None)

    Returns:
        The built-in registry, or the one loaded from ``config.source_file``
    """
    config = config or RegistryConfig.from_env()
    if not config.source_file:
        logger.debug("Using built-in contract table")
        return get_default_registry()

    loader = RegistryLoader(validate_on_load=config.validate_on_load)
    return loader.load_from_file(config.source_file)
