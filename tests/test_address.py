"""Tests for sparkpost_mail.address."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sparkpost_mail.address import (
    Address,
    normalize_addresses,
    render_address,
    render_address_list,
)
from sparkpost_mail.errors import InvalidArgumentError


class TestAddress:
    def test_bare_wire_form(self):
        assert Address(email="a@x.com").to_wire() == "a@x.com"

    def test_named_wire_form(self):
        addr = Address(email="a@x.com", name="Alice")
        assert addr.to_wire() == {"email": "a@x.com", "name": "Alice"}

    def test_empty_name_becomes_none(self):
        assert Address(email="a@x.com", name="").name is None

    def test_is_frozen(self):
        addr = Address(email="a@x.com")
        with pytest.raises(ValidationError):
            addr.email = "b@x.com"  # type: ignore[misc]


class TestNormalizeAddresses:
    def test_plain_string(self):
        assert normalize_addresses("a@x.com") == [Address(email="a@x.com")]

    def test_email_to_name_mapping_keeps_order(self):
        result = normalize_addresses({"a@x.com": "Alice", "b@x.com": "", "c@x.com": "Carol"})
        assert [a.email for a in result] == ["a@x.com", "b@x.com", "c@x.com"]
        assert [a.name for a in result] == ["Alice", None, "Carol"]

    def test_positional_keys_are_bare_emails(self):
        result = normalize_addresses({0: "a@x.com", 1: "b@x.com"})
        assert result == [Address(email="a@x.com"), Address(email="b@x.com")]

    def test_address_shaped_mapping(self):
        result = normalize_addresses({"email": "a@x.com", "name": "Alice"})
        assert result == [Address(email="a@x.com", name="Alice")]

    def test_address_instance(self):
        addr = Address(email="a@x.com", name="Alice")
        assert normalize_addresses(addr) == [addr]

    def test_mixed_list_is_flattened(self):
        result = normalize_addresses(["a@x.com", {"b@x.com": "Bob"}, Address(email="c@x.com")])
        assert [a.email for a in result] == ["a@x.com", "b@x.com", "c@x.com"]
        assert result[1].name == "Bob"

    def test_empty_email_rejected(self):
        with pytest.raises(InvalidArgumentError):
            normalize_addresses("")

    def test_unsupported_type_rejected(self):
        with pytest.raises(InvalidArgumentError):
            normalize_addresses(42)  # type: ignore[arg-type]

    def test_non_string_name_rejected(self):
        with pytest.raises(InvalidArgumentError):
            normalize_addresses({"a@x.com": 5})


class TestRendering:
    def test_render_bare(self):
        assert render_address(Address(email="a@x.com")) == "a@x.com"

    def test_render_named(self):
        assert render_address(Address(email="a@x.com", name="Alice")) == '"Alice" <a@x.com>'

    def test_render_list_joins_with_comma(self):
        addrs = normalize_addresses({"a@x.com": "Alice", 0: "b@x.com"})
        assert render_address_list(addrs) == '"Alice" <a@x.com>,b@x.com'

    def test_render_empty_list(self):
        assert render_address_list([]) == ""
