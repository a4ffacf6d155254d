"""Unit tests for the Address value object."""

import pytest

from connect_relay.domain.errors import InvalidArgumentError
from connect_relay.domain.value_objects.address import (
    NULL_ADDRESS,
    NULL_ADDRESS_HEX,
    Address,
)


class TestAddressParsing:
    """Tests for construction and canonicalization."""

    def test_lower_cases_hex(self) -> None:
        address = Address("0xABCDEF0000000000000000000000000000000001")
        assert address.value == "0xabcdef0000000000000000000000000000000001"

    def test_mixed_case_addresses_are_equal(self) -> None:
        upper = Address("0xABCDEF0000000000000000000000000000000001")
        lower = Address("0xabcdef0000000000000000000000000000000001")
        assert upper == lower
        assert hash(upper) == hash(lower)

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "0x",
            "abcdef0000000000000000000000000000000001",
            "0xabcdef000000000000000000000000000000001",
            "0xabcdef00000000000000000000000000000000011",
            "0xzzcdef0000000000000000000000000000000001",
            "0xabcdef0000000000000000000000000000000001\n",
            " 0xabcdef0000000000000000000000000000000001",
        ],
    )
    def test_rejects_malformed_strings(self, raw: str) -> None:
        with pytest.raises(InvalidArgumentError, match="Malformed address"):
            Address(raw)

    def test_parse_strips_whitespace(self) -> None:
        address = Address.parse("  0xabcdef0000000000000000000000000000000001\n")
        assert str(address) == "0xabcdef0000000000000000000000000000000001"

    def test_parse_passes_address_through(self) -> None:
        address = Address("0xabcdef0000000000000000000000000000000001")
        assert Address.parse(address) is address

    def test_addresses_are_ordered(self) -> None:
        low = Address("0x0000000000000000000000000000000000000001")
        high = Address("0x0000000000000000000000000000000000000002")
        assert sorted([high, low]) == [low, high]


class TestNullAddress:
    """Tests for the null identity."""

    def test_null_address_is_null(self) -> None:
        assert NULL_ADDRESS.is_null
        assert str(NULL_ADDRESS) == NULL_ADDRESS_HEX

    def test_other_address_is_not_null(self) -> None:
        assert not Address("0x0000000000000000000000000000000000000001").is_null

    def test_trailing_newline_cannot_disguise_null(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Malformed address"):
            Address(NULL_ADDRESS_HEX + "\n")
