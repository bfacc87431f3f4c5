from ipaddress import IPv4Address

import pytest

from lnxconfig.core.errors import FieldAddressError, FieldNumberError, FieldSyntaxError
from lnxconfig.parser.fields import (
    expect_arity,
    parse_address,
    parse_cidr,
    parse_endpoint,
    parse_name,
    parse_port,
    parse_prefix_length,
    parse_uint,
)


def test_parse_address_valid() -> None:
    assert parse_address("192.168.1.1") == IPv4Address("192.168.1.1")


@pytest.mark.parametrize("text", ["10.0.0", "10.0.0.256", "10.0.0.1.2", "10.0.0.x", "10..0.1", "", "010.0.0.1"])
def test_parse_address_rejects_malformed(text: str) -> None:
    with pytest.raises(FieldAddressError):
        parse_address(text)


def test_parse_uint() -> None:
    assert parse_uint("5000", "rate") == 5000
    assert parse_uint("0", "rate") == 0


@pytest.mark.parametrize("text", ["-1", "12a", "", "+5", "1.5", "٣"])
def test_parse_uint_rejects_non_decimal(text: str) -> None:
    with pytest.raises(FieldNumberError):
        parse_uint(text, "rate")


def test_parse_uint_rejects_overflow() -> None:
    assert parse_uint(str(2**64 - 1), "rto") == 2**64 - 1
    with pytest.raises(FieldNumberError):
        parse_uint(str(2**64), "rto")


def test_prefix_length_bounds() -> None:
    assert parse_prefix_length("0") == 0
    assert parse_prefix_length("32") == 32
    with pytest.raises(FieldNumberError):
        parse_prefix_length("33")
    with pytest.raises(FieldNumberError):
        parse_prefix_length("024")


def test_port_wraps_to_16_bits() -> None:
    assert parse_port("65535") == 65535
    assert parse_port("65536") == 0
    assert parse_port("70000") == 4464


def test_parse_cidr_and_endpoint() -> None:
    assert parse_cidr("10.1.0.0/16") == (IPv4Address("10.1.0.0"), 16)
    assert parse_endpoint("127.0.0.1:5000") == (IPv4Address("127.0.0.1"), 5000)


@pytest.mark.parametrize("text", ["10.0.0.1", "10.0.0.1/", "/24"])
def test_parse_cidr_requires_both_halves(text: str) -> None:
    with pytest.raises(FieldSyntaxError):
        parse_cidr(text)


def test_parse_endpoint_requires_port() -> None:
    with pytest.raises(FieldSyntaxError):
        parse_endpoint("127.0.0.1")


def test_parse_name_length() -> None:
    assert parse_name("if0", 32) == "if0"
    with pytest.raises(FieldSyntaxError):
        parse_name("x" * 33, 32)


def test_expect_arity_message() -> None:
    with pytest.raises(FieldSyntaxError, match="expected 3 field"):
        expect_arity(["a", "b"], 3, "route")


def test_parse_uint_rejects_huge_literal_as_number() -> None:
    with pytest.raises(FieldNumberError, match="exceeds maximum"):
        parse_uint("9" * 5000, "rto")


def test_parse_uint_ignores_leading_zeros_for_width() -> None:
    assert parse_uint("0" * 5000 + "42", "rto") == 42


def test_port_literal_must_fit_64_bits() -> None:
    assert parse_port(str(2**64 - 1)) == 65535
    with pytest.raises(FieldNumberError):
        parse_port(str(2**64))
    with pytest.raises(FieldNumberError):
        parse_port("9" * 5000)
