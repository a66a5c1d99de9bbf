"""
Contract Registry - named blockchain contract addresses for selectors.

This package provides the built-in contract table, the registry type that
enforces its invariants, and a loader for registry files.
"""

from contract_registry.models import ContractEntry, is_address
from contract_registry.registry import (
    ContractRegistry,
    ContractRegistryError,
    ContractNotFoundError,
    RegistryInvariantError,
)
from contract_registry.addresses import (
    CONTRACT_ADDRESSES,
    DEFAULT_REGISTRY,
    SENTINEL_NAME,
    get_default_registry,
)
from contract_registry.contracts import (
    REGISTRY_FILE_SCHEMA,
    ContractValidationError,
    RegistryLoader,
    RegistryValidator,
    dump_registry,
)
from contract_registry.config import RegistryConfig, load_registry

__version__ = "0.1.0"
__all__ = [
    # Models
    "ContractEntry",
    "is_address",
    # Registry
    "ContractRegistry",
    "ContractRegistryError",
    "ContractNotFoundError",
    "RegistryInvariantError",
    # Built-in data
    "CONTRACT_ADDRESSES",
    "DEFAULT_REGISTRY",
    "SENTINEL_NAME",
    "get_default_registry",
    # Registry files
    "REGISTRY_FILE_SCHEMA",
    "ContractValidationError",
    "RegistryLoader",
    "RegistryValidator",
    "dump_registry",
    # Configuration
    "RegistryConfig",
    "load_registry",
]
