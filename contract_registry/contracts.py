"""
Registry file loader and validator.

This module provides utilities for loading and validating contract
registries defined in YAML format:

    contracts:
      - name: Custom Address (Enter manually below)
        address: ""
      - name: Vault
        address: "0x53d4299c9e8e2a7a6ed1811a10da67d6795bf412"
        link: https://vault.rustytokenai.com

Addresses must be quoted, otherwise YAML reads them as hex integers.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from jsonschema import Draft7Validator

from contract_registry.models import LINK_PATTERN, ContractEntry
from contract_registry.registry import ContractRegistry, ContractRegistryError


logger = logging.getLogger(__name__)


# JSON Schema for validating registry files
REGISTRY_FILE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["contracts"],
    "properties": {
        "contracts": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["name", "address"],
                "additionalProperties": False,
                "properties": {
                    "name": {
                        "type": "string",
                        "minLength": 1,
                        "description": "Display label",
                    },
                    "address": {
                        "type": "string",
                        "pattern": "^(0x[0-9a-fA-F]{40})?$",
                        "description": "Account literal, empty for manual entry",
                    },
                    "link": {
                        "type": "string",
                        "pattern": LINK_PATTERN.pattern,
                        "description": "Hosted interface URL",
                    },
                },
            },
        },
    },
}


class ContractValidationError(ContractRegistryError):
    """Raised when registry file validation fails."""

    def __init__(self, message: str, errors: List[str]):
        """
        Initialize validation error.

        Args:
            message: Error summary
            errors: List of specific validation errors
        """
        super().__init__(message)
        self.errors = errors


class RegistryValidator:
    """
    Validates registry documents against the JSON Schema.
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        """
        Initialize the validator.

        Args:
            schema: Custom JSON Schema (defaults to REGISTRY_FILE_SCHEMA)
        """
        self.schema = schema or REGISTRY_FILE_SCHEMA
        self._validator = Draft7Validator(self.schema)

    def validate(self, data: Any) -> List[str]:
        """
        Validate a registry document against the schema.

        Args:
            data: Parsed registry document

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        for error in self._validator.iter_errors(data):
            path = ".".join(str(p) for p in error.path) or "root"
            errors.append(f"{path}: {error.message}")
        return errors

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def validate_or_raise(self, data: Any) -> None:
        """
        Validate a registry document, raising on errors.

        Args:
            data: Parsed registry document

        Raises:
            ContractValidationError: If validation fails
        """
        errors = self.validate(data)
        if errors:
            raise ContractValidationError(
                f"Registry validation failed with {len(errors)} error(s)",
                errors,
            )


def _check_shape(data: Any) -> None:
    """Check the document structure the loader relies on, without the schema."""
    errors = []
    if not isinstance(data, dict):
        errors.append(f"root: expected a mapping, got {type(data).__name__}")
    elif not isinstance(data.get("contracts"), list):
        errors.append("contracts: expected a list of contract records")
    else:
        for i, record in enumerate(data["contracts"]):
            if not isinstance(record, dict):
                errors.append(f"contracts.{i}: expected a mapping, got {type(record).__name__}")

    if errors:
        raise ContractValidationError(
            f"Registry document is malformed with {len(errors)} error(s)",
            errors,
        )


class RegistryLoader:
    """
    Loads contract registries from YAML files.
    """

    def __init__(
        self,
        validator: Optional[RegistryValidator] = None,
        validate_on_load: bool = True,
    ):
        """
        Initialize the registry loader.

        Args:
            validator: Custom validator (creates default if None)
            validate_on_load: Whether to schema-validate documents on load
        """
        self.validator = validator or RegistryValidator()
        self.validate_on_load = validate_on_load

    def load_from_file(self, file_path: Union[str, Path]) -> ContractRegistry:
        """
        Load a registry from a YAML file.

        Args:
            file_path: Path to the registry file

        Returns:
            Parsed ContractRegistry

        Raises:
            FileNotFoundError: If the path is missing or not a regular file
            ContractValidationError: If schema validation fails
            RegistryInvariantError: If the entries violate registry invariants
            yaml.YAMLError: If YAML parsing fails
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Registry file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        registry = self.load_from_dict(data)
        logger.info(f"Loaded {len(registry)} contracts from {path}")
        return registry

    def load_from_string(self, yaml_content: str) -> ContractRegistry:
        """
        Load a registry from a YAML string.

        Args:
            yaml_content: YAML content as string

        Returns:
            Parsed ContractRegistry
        """
        data = yaml.safe_load(yaml_content)
        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> ContractRegistry:
        """
        Load a registry from a dictionary.

        Args:
            data: Registry document

        Returns:
            Parsed ContractRegistry

        Raises:
            ContractValidationError: If schema validation fails, or the
                document is not a mapping with a ``contracts`` list
            RegistryInvariantError: If the entries violate registry invariants
        """
        if self.validate_on_load:
            self.validator.validate_or_raise(data)
        else:
            _check_shape(data)

        entries = [ContractEntry(**record) for record in data["contracts"]]
        return ContractRegistry(entries)


def dump_registry(registry: ContractRegistry) -> str:
    """
    Serialize a registry to registry-file YAML.

    Args:
        registry: Registry to serialize

    Returns:
        YAML document, entries in display order
    """
    return yaml.safe_dump(
        {"contracts": registry.to_list()},
        sort_keys=False,
        allow_unicode=True,
    )
