"""
Built-in contract table.

Entries are listed in display order, with the manual-entry sentinel first.
Add or remove contracts by editing this table.
"""

from contract_registry.models import ContractEntry
from contract_registry.registry import ContractRegistry


SENTINEL_NAME = "Custom Address (Enter manually below)"

CONTRACT_ADDRESSES = (
    ContractEntry(
        name=SENTINEL_NAME,
        address="",
    ),
    ContractEntry(
        name="Vault",
        address="0x53d4299c9e8e2a7a6ed1811a10da67d6795bf412",
        link="https://vault.rustytokenai.com",
    ),
    ContractEntry(
        name="Upgrade",
        address="0x80b7b3c6749254aba3fa08489f859b94d87b1f73",
        link="https://upgrade.rustytokenai.com",
    ),
    ContractEntry(
        name="Jet",
        address="0x1ebc42df3c845c6698c40e99b47768148d245472",
        link="https://jet.rustytokenai.com",
    ),
    ContractEntry(
        name="Zombie",
        address="0x7462af1b5a2a53f4305b8ea7fc60b6464260aa1e",
        link="https://zombie.rustytokenai.com",
    ),
)

DEFAULT_REGISTRY = ContractRegistry(CONTRACT_ADDRESSES)


def get_default_registry() -> ContractRegistry:
    """Return the registry built from the table above."""
    return DEFAULT_REGISTRY
