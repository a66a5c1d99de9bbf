"""Tests for registry configuration."""

import os
import tempfile
import unittest

from contract_registry.addresses import DEFAULT_REGISTRY
from contract_registry.config import RegistryConfig, load_registry
from contract_registry.contracts import ContractValidationError


class TestRegistryConfig(unittest.TestCase):
    """Test configuration parsing."""

    def test_defaults(self):
        config = RegistryConfig()
        self.assertIsNone(config.source_file)
        self.assertTrue(config.validate_on_load)
        self.assertEqual(config.log_level, "WARNING")

    def test_from_dict_snake_case(self):
        config = RegistryConfig.from_dict({
            "source_file": "contracts.yaml",
            "validate_on_load": False,
            "log_level": "debug",
        })
        self.assertEqual(config.source_file, "contracts.yaml")
        self.assertFalse(config.validate_on_load)
        self.assertEqual(config.log_level, "DEBUG")

    def test_from_dict_camel_case(self):
        config = RegistryConfig.from_dict({"sourceFile": "a.yaml", "validateOnLoad": False})
        self.assertEqual(config.source_file, "a.yaml")
        self.assertFalse(config.validate_on_load)

    def test_from_dict_string_flags(self):
        for value in ["false", "0", "no", "off", False]:
            with self.subTest(value=value):
                self.assertFalse(RegistryConfig.from_dict({"validate_on_load": value}).validate_on_load)
        self.assertTrue(RegistryConfig.from_dict({"validateOnLoad": "true"}).validate_on_load)

    def test_to_dict_round_trip(self):
        config = RegistryConfig(source_file="a.yaml", validate_on_load=False, log_level="INFO")
        self.assertEqual(RegistryConfig.from_dict(config.to_dict()), config)

    def test_from_env(self):
        config = RegistryConfig.from_env({
            "CONTRACT_REGISTRY_FILE": "/etc/contracts.yaml",
            "CONTRACT_REGISTRY_VALIDATE": "off",
            "CONTRACT_REGISTRY_LOG_LEVEL": "info",
        })
        self.assertEqual(config.source_file, "/etc/contracts.yaml")
        self.assertFalse(config.validate_on_load)
        self.assertEqual(config.log_level, "INFO")

    def test_from_env_empty(self):
        config = RegistryConfig.from_env({"CONTRACT_REGISTRY_FILE": ""})
        self.assertEqual(config, RegistryConfig())


class TestLoadRegistry(unittest.TestCase):
    """Test resolving the configured registry."""

    def test_builtin_without_source_file(self):
        self.assertIs(load_registry(RegistryConfig()), DEFAULT_REGISTRY)

    def test_loads_source_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "contracts.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write('contracts:\n  - name: Manual\n    address: ""\n')
            registry = load_registry(RegistryConfig(source_file=path))
        self.assertEqual(registry.names(), ("Manual",))

    def test_validation_applies(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "contracts.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("contracts: []\n")
            with self.assertRaises(ContractValidationError):
                load_registry(RegistryConfig(source_file=path))


if __name__ == "__main__":
    unittest.main()
