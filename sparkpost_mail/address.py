"""Address normalization and rendering.

Callers hand addresses over in several shapes::

    "a@x.com"                                  # bare email
    {"a@x.com": "Alice", "b@x.com": ""}        # email -> name
    {0: "a@x.com", 1: "b@x.com"}               # position -> bare email
    {"email": "a@x.com", "name": "Alice"}      # a single address record
    ["a@x.com", {"b@x.com": "Bob"}]            # any mix of the above

Everything is reduced to an ordered list of :class:`Address` before it is
stored anywhere.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidArgumentError

_ADDRESS_KEYS = frozenset({"email", "name"})


class Address(BaseModel):
    """A single mailbox: an email plus an optional display name."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(min_length=1, description="Email address")
    name: str | None = Field(default=None, description="Display name")

    @field_validator("name")
    @classmethod
    def _empty_name_is_none(cls, value: str | None) -> str | None:
        return value or None

    def to_wire(self) -> str | dict[str, str]:
        """Bare string without a name, ``{"email", "name"}`` otherwise."""
        if self.name is None:
            return self.email
        return {"email": self.email, "name": self.name}


AddressInput = str | Address | Mapping[Any, Any] | list[Any] | tuple[Any, ...]


def normalize_addresses(value: AddressInput) -> list[Address]:
    """Normalize any supported address input into ``Address`` records."""
    if isinstance(value, Address):
        return [value]
    if isinstance(value, str):
        return [_make_address(value)]
    if isinstance(value, Mapping):
        if _is_address_record(value):
            return [_make_address(value["email"], value.get("name"))]
        addresses: list[Address] = []
        for key, item in value.items():
            if isinstance(key, int):
                addresses.append(_make_address(item))
            else:
                addresses.append(_make_address(key, item))
        return addresses
    if isinstance(value, (list, tuple)):
        addresses = []
        for item in value:
            addresses.extend(normalize_addresses(item))
        return addresses
    raise InvalidArgumentError(f"Unsupported address input: {value!r}")


def render_address(address: Address) -> str:
    if address.name is None:
        return address.email
    return f'"{address.name}" <{address.email}>'


def render_address_list(addresses: list[Address]) -> str:
    """Render addresses the way the ``Cc`` header and sender fields carry them."""
    return ",".join(render_address(address) for address in addresses)


def _is_address_record(value: Mapping[Any, Any]) -> bool:
    return "email" in value and set(value.keys()) <= _ADDRESS_KEYS


def _make_address(email: Any, name: Any = None) -> Address:
    if not isinstance(email, str):
        raise InvalidArgumentError(f"Email must be a string, got {email!r}")
    if name is not None and not isinstance(name, str):
        raise InvalidArgumentError(f"Name for {email} must be a string, got {name!r}")
    try:
        return Address(email=email, name=name)
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid address {email!r}") from exc
