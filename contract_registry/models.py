"""
Pydantic models for contract registry records.

This module defines the record shape shared by the built-in contract
table, registry files and every consumer of the registry.
"""

import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")
LINK_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$")


def is_address(value: str) -> bool:
    """Check whether a string is a well-formed account literal."""
    return bool(ADDRESS_PATTERN.match(value))


class ContractEntry(BaseModel):
    """
    A named contract shown in a selector.

    An empty ``address`` marks the sentinel entry: there is no preset
    address and the user is expected to supply one manually.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        ...,
        description="Human-readable display label",
        min_length=1,
    )
    address: str = Field(
        ...,
        description="Account literal, or empty for manual entry",
    )
    link: Optional[str] = Field(
        default=None,
        description="URL of a hosted interface for the contract",
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("address")
    @classmethod
    def _address_format(cls, value: str) -> str:
        if value and not is_address(value):
            raise ValueError(f"malformed address: {value!r}")
        return value

    @field_validator("link")
    @classmethod
    def _link_format(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not LINK_PATTERN.match(value):
            raise ValueError(f"malformed link: {value!r}")
        return value

    @property
    def is_sentinel(self) -> bool:
        """True for the manual-entry placeholder."""
        return self.address == ""

    @property
    def has_link(self) -> bool:
        return self.link is not None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the plain record shape.

        ``link`` is only included when the entry has one.
        """
        data: Dict[str, Any] = {"name": self.name, "address": self.address}
        if self.link is not None:
            data["link"] = self.link
        return data
