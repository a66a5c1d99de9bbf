"""Tests for contract entry models."""

import unittest

from pydantic import ValidationError

from contract_registry.models import ContractEntry, is_address


VAULT = "0x53d4299c9e8e2a7a6ed1811a10da67d6795bf412"


class TestIsAddress(unittest.TestCase):
    """Test the account literal check."""

    def test_lowercase_address(self):
        self.assertTrue(is_address(VAULT))

    def test_mixed_case_address(self):
        self.assertTrue(is_address("0x7234c36A71ec237c2Ae7698e8916e0735001E9Af"))

    def test_rejects_malformed(self):
        self.assertFalse(is_address(""))
        self.assertFalse(is_address("0x1234"))
        self.assertFalse(is_address(VAULT[2:]))
        self.assertFalse(is_address(VAULT + "00"))
        self.assertFalse(is_address("0x" + "g" * 40))


class TestContractEntry(unittest.TestCase):
    """Test ContractEntry construction and helpers."""

    def test_named_entry(self):
        entry = ContractEntry(name="Vault", address=VAULT, link="https://vault.rustytokenai.com")
        self.assertFalse(entry.is_sentinel)
        self.assertTrue(entry.has_link)

    def test_sentinel_entry(self):
        entry = ContractEntry(name="Custom", address="")
        self.assertTrue(entry.is_sentinel)
        self.assertFalse(entry.has_link)
        self.assertIsNone(entry.link)

    def test_missing_address_rejected(self):
        with self.assertRaises(ValidationError):
            ContractEntry(name="Vault")

    def test_empty_name_rejected(self):
        with self.assertRaises(ValidationError):
            ContractEntry(name="", address=VAULT)

    def test_blank_name_rejected(self):
        with self.assertRaises(ValidationError):
            ContractEntry(name="   ", address=VAULT)

    def test_malformed_address_rejected(self):
        with self.assertRaises(ValidationError):
            ContractEntry(name="Vault", address="0xdeadbeef")

    def test_malformed_link_rejected(self):
        with self.assertRaises(ValidationError):
            ContractEntry(name="Vault", address=VAULT, link="vault.rustytokenai.com")

    def test_link_without_host_rejected(self):
        with self.assertRaises(ValidationError):
            ContractEntry(name="Vault", address=VAULT, link="https://")

    def test_unknown_field_rejected(self):
        with self.assertRaises(ValidationError):
            ContractEntry(name="Vault", address=VAULT, chain="eth")

    def test_entry_is_frozen(self):
        entry = ContractEntry(name="Vault", address=VAULT)
        with self.assertRaises(ValidationError):
            entry.address = ""

    def test_entries_are_hashable(self):
        a = ContractEntry(name="Vault", address=VAULT)
        b = ContractEntry(name="Vault", address=VAULT)
        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)

    def test_to_dict_omits_missing_link(self):
        entry = ContractEntry(name="Custom", address="")
        self.assertEqual(entry.to_dict(), {"name": "Custom", "address": ""})

    def test_to_dict_includes_link(self):
        entry = ContractEntry(name="Vault", address=VAULT, link="https://vault.rustytokenai.com")
        self.assertEqual(
            entry.to_dict(),
            {"name": "Vault", "address": VAULT, "link": "https://vault.rustytokenai.com"},
        )


if __name__ == "__main__":
    unittest.main()
