"""Field decoders shared by the directive extractors.

Every decoder takes the raw text of one field and either returns a typed
value or raises a ``FieldError`` subclass. Line numbers are attached by the
classifier, so nothing here knows which line it is reading.
"""

from __future__ import annotations

from ipaddress import AddressValueError, IPv4Address

from lnxconfig.core.errors import FieldAddressError, FieldNumberError, FieldSyntaxError

PREFIX_MAX_DIGITS = 2
PREFIX_MAX = 32
PORT_MODULUS = 2**16
UINT64_MAX = 2**64 - 1


def expect_arity(tokens: list[str], count: int, directive: str) -> None:
    if len(tokens) != count:
        raise FieldSyntaxError(f"{directive}: expected {count} field(s), found {len(tokens)}")


def expect_keyword(token: str, keyword: str, directive: str) -> None:
    if token != keyword:
        raise FieldSyntaxError(f"{directive}: expected '{keyword}', found '{token}'")


def split_pair(text: str, sep: str, what: str) -> tuple[str, str]:
    head, found, tail = text.partition(sep)
    if not found or not head or not tail:
        raise FieldSyntaxError(f"expected {what}, found '{text}'")
    return head, tail


def parse_address(text: str) -> IPv4Address:
    # IPv4Address only accepts four ASCII-decimal octets 0-255 without leading zeros.
    try:
        return IPv4Address(text)
    except AddressValueError as exc:
        raise FieldAddressError(f"invalid address '{text}'") from exc


def parse_uint(text: str, what: str, maximum: int = UINT64_MAX) -> int:
    if not (text.isascii() and text.isdigit()):
        raise FieldNumberError(f"expected number for {what}, found '{text}'")
    # int() refuses literals past the interpreter digit limit
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(maximum)):
        raise FieldNumberError(f"{what} '{text[:20]}...' exceeds maximum {maximum}")
    value = int(digits)
    if value > maximum:
        raise FieldNumberError(f"{what} {value} exceeds maximum {maximum}")
    return value


def parse_prefix_length(text: str) -> int:
    if len(text) > PREFIX_MAX_DIGITS:
        raise FieldNumberError(f"prefix length '{text}' has more than {PREFIX_MAX_DIGITS} digits")
    return parse_uint(text, "prefix length", PREFIX_MAX)


def parse_port(text: str) -> int:
    """Decode a transport port, narrowing to 16 bits.

    Values above 65535 wrap modulo 2**16 (70000 becomes 4464) rather than
    being rejected, matching the width of the stored field. The literal itself
    must still fit an unsigned 64-bit integer.
    """
    return parse_uint(text, "port", UINT64_MAX) % PORT_MODULUS


def parse_cidr(text: str) -> tuple[IPv4Address, int]:
    addr, prefix = split_pair(text, "/", "<addr>/<prefix>")
    return parse_address(addr), parse_prefix_length(prefix)


def parse_endpoint(text: str) -> tuple[IPv4Address, int]:
    addr, port = split_pair(text, ":", "<addr>:<port>")
    return parse_address(addr), parse_port(port)


def parse_name(text: str, max_length: int) -> str:
    if len(text) > max_length:
        raise FieldSyntaxError(f"interface name '{text}' longer than {max_length} characters")
    return text
