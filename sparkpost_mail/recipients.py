"""Flat recipient list with derived To / Cc / Bcc views.

The transmissions API has no Cc or Bcc concept.  Every recipient is one
entry in a single list; copy recipients carry a ``header_to`` routing
value pointing at the main recipient, and the message carries a ``Cc``
header listing the visible copies.  Whatever is a copy recipient but is
*not* in that header is a blind copy.
"""

from __future__ import annotations

from enum import Enum

import structlog
from pydantic import BaseModel, Field

from .address import Address, AddressInput, normalize_addresses, render_address, render_address_list
from .errors import UnsupportedOperationError

logger = structlog.get_logger()

MAIN_RECIPIENT_PLACEHOLDER = "%mainRecipient%"


class StoreState(str, Enum):
    """Lifecycle of a recipient store relative to copy resolution."""

    BUILDING = "building"
    RESOLVED = "resolved"


class RecipientEntry(BaseModel):
    """One recipient of the transmission."""

    address: Address = Field(description="Normalized recipient address")
    header_to: str | None = Field(
        default=None,
        description="Routing value for Cc/Bcc copies; None for primary recipients",
    )

    @property
    def is_copy(self) -> bool:
        return self.header_to is not None

    def to_wire(self) -> dict:
        entry: dict = {"address": self.address.to_wire()}
        if self.header_to is not None:
            entry["header_to"] = self.header_to
        return entry


class RecipientStore:
    """Single source of truth for the recipients of one message.

    Holds either a stored recipient list id or an ordered list of
    entries, never both.  Not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._entries: list[RecipientEntry] = []
        self._list_id: str | None = None
        self._headers: dict[str, str] = {}
        self._cc_listed: frozenset[str] = frozenset()
        self._state = StoreState.BUILDING

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def entries(self) -> list[RecipientEntry]:
        return self._entries

    @property
    def list_id(self) -> str | None:
        return self._list_id

    @property
    def headers(self) -> dict[str, str]:
        return self._headers

    @property
    def state(self) -> StoreState:
        return self._state

    def mark_resolved(self) -> None:
        self._state = StoreState.RESOLVED

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_stored_list(self, list_id: str) -> None:
        """Switch to a provider-side recipient list, dropping explicit recipients."""
        if self._entries:
            logger.debug("recipients_discarded", count=len(self._entries), list_id=list_id)
        self._entries = []
        self._headers.pop("Cc", None)
        self._cc_listed = frozenset()
        self._list_id = list_id
        self._state = StoreState.BUILDING

    def add_to(self, value: AddressInput) -> None:
        self._append(normalize_addresses(value), header_to=None)

    def add_cc(self, value: AddressInput) -> None:
        addresses = normalize_addresses(value)
        self._append(addresses, header_to=MAIN_RECIPIENT_PLACEHOLDER)
        # Each call replaces the header; earlier copies fall through to Bcc.
        self._headers["Cc"] = render_address_list(addresses)
        self._cc_listed = frozenset(render_address(address) for address in addresses)

    def add_bcc(self, value: AddressInput) -> None:
        self._append(normalize_addresses(value), header_to=MAIN_RECIPIENT_PLACEHOLDER)

    def _append(self, addresses: list[Address], *, header_to: str | None) -> None:
        if self._list_id is not None:
            raise UnsupportedOperationError(
                f"Recipients cannot be added while stored list {self._list_id!r} is in use"
            )
        self._entries.extend(
            RecipientEntry(address=address, header_to=header_to) for address in addresses
        )
        self._state = StoreState.BUILDING

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def to_view(self) -> list[str | dict[str, str]]:
        """Primary recipients: bare emails as strings, named ones as ``{email: name}``."""
        if self._list_id is not None:
            return [self._list_id]

        view: list[str | dict[str, str]] = []
        named: dict[str, dict[str, str]] = {}
        for entry in self._entries:
            if entry.is_copy:
                continue
            address = entry.address
            if address.name is None:
                view.append(address.email)
            elif address.email in named:
                named[address.email][address.email] = address.name
            else:
                item = {address.email: address.name}
                named[address.email] = item
                view.append(item)
        return view

    def cc_view(self) -> list[str]:
        return self._copy_emails(in_cc_header=True)

    def bcc_view(self) -> str:
        return ", ".join(self._copy_emails(in_cc_header=False))

    def is_cc_entry(self, entry: RecipientEntry) -> bool:
        """Whether a copy entry is one of the addresses rendered into the ``Cc`` header.

        Compared per rendered address, not against the joined header text,
        so ``john@x.com`` is not found inside ``bigjohn@x.com``.
        """
        return render_address(entry.address) in self._cc_listed

    def _copy_emails(self, *, in_cc_header: bool) -> list[str]:
        if self._list_id is not None:
            return []
        emails: dict[str, None] = {}
        for entry in self._entries:
            if not entry.is_copy:
                continue
            if self.is_cc_entry(entry) is in_cc_header:
                emails.setdefault(entry.address.email, None)
        return list(emails)

    # ------------------------------------------------------------------
    # Wire form
    # ------------------------------------------------------------------

    def to_wire(self) -> dict[str, str] | list[dict]:
        if self._list_id is not None:
            return {"list_id": self._list_id}
        return [entry.to_wire() for entry in self._entries]
