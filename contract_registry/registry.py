"""
Contract registry for selector data.

This module provides the ContractRegistry class: an immutable, ordered
collection of contract entries containing exactly one manual-entry
sentinel.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from contract_registry.models import ContractEntry


logger = logging.getLogger(__name__)


class ContractRegistryError(Exception):
    """Base exception for registry errors."""
    pass


class ContractNotFoundError(ContractRegistryError):
    """Raised when a contract name is not in the registry."""

    def __init__(self, name: str):
        super().__init__(f"Contract not found: {name}")
        self.name = name


class RegistryInvariantError(ContractRegistryError):
    """Raised when a list of entries cannot form a valid registry."""

    def __init__(self, message: str, errors: List[str]):
        """
        Initialize invariant error.

        Args:
            message: Error summary
            errors: List of specific violations
        """
        super().__init__(message)
        self.errors = errors


def check_invariants(entries: Iterable[ContractEntry]) -> List[str]:
    """
    Check registry invariants over a list of entries.

    Args:
        entries: Entries in display order

    Returns:
        List of violation messages (empty if the entries are consistent)
    """
    entries = list(entries)
    errors = []

    sentinels = [entry.name for entry in entries if entry.is_sentinel]
    if not sentinels:
        errors.append("no sentinel entry with an empty address")
    elif len(sentinels) > 1:
        errors.append(f"multiple sentinel entries: {', '.join(sentinels)}")

    counts = Counter(entry.name for entry in entries)
    for name, count in counts.items():
        if count > 1:
            errors.append(f"duplicate name: {name} ({count} entries)")

    return errors


class ContractRegistry:
    """
    Ordered, read-only collection of contract entries.

    Order is display order. The registry never changes after construction,
    so it can be shared freely between readers.
    """

    def __init__(self, entries: Iterable[ContractEntry]):
        """
        Initialize the registry.

        Args:
            entries: Contract entries in display order

        Raises:
            RegistryInvariantError: If the entries violate registry invariants
        """
        entries = tuple(entries)
        errors = check_invariants(entries)
        if errors:
            raise RegistryInvariantError(
                f"Registry is invalid with {len(errors)} error(s)",
                errors,
            )

        self._entries: Tuple[ContractEntry, ...] = entries
        self._name_index: Dict[str, ContractEntry] = {
            entry.name: entry for entry in entries
        }
        # First entry in display order wins for case-only address duplicates
        self._address_index: Dict[str, ContractEntry] = {}
        for entry in entries:
            self._address_index.setdefault(entry.address.lower(), entry)

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "ContractRegistry":
        """
        Build a registry from plain record dictionaries.

        Args:
            records: Dicts with ``name``, ``address`` and optional ``link``

        Returns:
            ContractRegistry instance
        """
        return cls(ContractEntry(**record) for record in records)

    def entries(self) -> Tuple[ContractEntry, ...]:
        """
        Read the full list of entries.

        Returns:
            All entries in display order
        """
        return self._entries

    @property
    def sentinel(self) -> ContractEntry:
        """The manual-entry placeholder."""
        return self._address_index[""]

    def named_entries(self) -> Tuple[ContractEntry, ...]:
        """
        List entries with a fixed address.

        Returns:
            Entries other than the sentinel, in display order
        """
        return tuple(entry for entry in self._entries if not entry.is_sentinel)

    def names(self) -> Tuple[str, ...]:
        return tuple(entry.name for entry in self._entries)

    def get(self, name: str) -> Optional[ContractEntry]:
        """
        Get an entry by name.

        Args:
            name: Display name

        Returns:
            Contract entry or None if not found
        """
        entry = self._name_index.get(name)
        logger.debug(f"Lookup by name {name!r}: {'hit' if entry else 'miss'}")
        return entry

    def require(self, name: str) -> ContractEntry:
        """
        Get an entry by name, raising if missing.

        Args:
            name: Display name

        Returns:
            Contract entry

        Raises:
            ContractNotFoundError: If no entry has this name
        """
        entry = self.get(name)
        if entry is None:
            raise ContractNotFoundError(name)
        return entry

    def find_by_address(self, address: str) -> Optional[ContractEntry]:
        """
        Find an entry by address.

        Args:
            address: Account literal, compared case-insensitively.
                The empty string resolves to the sentinel.

        Returns:
            Contract entry or None if not found
        """
        entry = self._address_index.get(address.lower())
        logger.debug(f"Lookup by address {address!r}: {'hit' if entry else 'miss'}")
        return entry

    def to_list(self) -> List[Dict[str, Any]]:
        """
        Convert to a list of plain record dictionaries.

        Returns:
            Records in display order
        """
        return [entry.to_dict() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ContractEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> ContractEntry:
        return self._entries[index]

    def __contains__(self, item: Union[str, ContractEntry]) -> bool:
        if isinstance(item, ContractEntry):
            return item in self._entries
        return item in self._name_index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContractRegistry):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"ContractRegistry({list(self.names())!r})"
