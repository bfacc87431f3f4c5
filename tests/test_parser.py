from ipaddress import IPv4Address

import pytest

from lnxconfig.core.errors import (
    DirectiveSyntaxError,
    InvalidAddressError,
    InvalidEnumError,
    InvalidNumberError,
    LnxParseError,
)
from lnxconfig.core.model import Interface, Neighbor, RIPNeighbor, RoutingMode, StaticRoute, TimingParameters
from lnxconfig.core.settings import ParserSettings
from lnxconfig.parser.loader import parse_text

SCENARIO_A = """interface if0 10.0.0.1/24 127.0.0.1:5000
neighbor 10.0.0.2 at 127.0.0.1:5001 via if0
routing rip
rip advertise-to 10.0.0.2
route 10.1.0.0/16 via 10.0.0.2
"""


def test_scenario_a() -> None:
    t = parse_text(SCENARIO_A)
    assert t.interfaces == (Interface("if0", IPv4Address("10.0.0.1"), 24, IPv4Address("127.0.0.1"), 5000),)
    assert t.neighbors == (Neighbor(IPv4Address("10.0.0.2"), IPv4Address("127.0.0.1"), 5001, "if0"),)
    assert t.routing_mode == RoutingMode.RIP
    assert t.rip_neighbors == (RIPNeighbor(IPv4Address("10.0.0.2")),)
    assert t.static_routes == (StaticRoute(IPv4Address("10.1.0.0"), 16, IPv4Address("10.0.0.2")),)


def test_defaults_without_scalar_directives() -> None:
    t = parse_text("interface if0 10.0.0.1/24 127.0.0.1:5000\n")
    assert t.routing_mode == RoutingMode.STATIC
    assert t.timing == TimingParameters(5000, 12000, 1000, 5_000_000)


def test_empty_input() -> None:
    t = parse_text("")
    assert t.interfaces == () and t.neighbors == () and t.rip_neighbors == () and t.static_routes == ()


def test_unknown_directive_is_skipped() -> None:
    t = parse_text("bogus directive here\n" + SCENARIO_A)
    assert t == parse_text(SCENARIO_A)


def test_unknown_directive_rejected_in_strict_mode() -> None:
    settings = ParserSettings(reject_unknown_directives=True)
    with pytest.raises(DirectiveSyntaxError) as info:
        parse_text("routing rip\nbogus directive here\n", settings)
    assert info.value.lineno == 2


def test_strict_mode_still_skips_indented_comments() -> None:
    settings = ParserSettings(reject_unknown_directives=True)
    t = parse_text("   # indented comment\nrouting rip\n", settings)
    assert t.routing_mode == RoutingMode.RIP


def test_unknown_rip_subdirective_is_fatal() -> None:
    with pytest.raises(DirectiveSyntaxError) as info:
        parse_text("routing rip\n\nrip unknown-subdirective 5\n")
    assert info.value.lineno == 3
    assert "unknown-subdirective" in info.value.reason


def test_unknown_tcp_subdirective_is_fatal() -> None:
    with pytest.raises(DirectiveSyntaxError):
        parse_text("tcp rto-avg 10\n")


@pytest.mark.parametrize("line", ["rip", "tcp", "rip advertise-to", "tcp rto-min", "tcp rto-min 1 2"])
def test_sub_directive_arity(line: str) -> None:
    with pytest.raises(DirectiveSyntaxError):
        parse_text(line)


def test_last_timing_write_wins() -> None:
    t = parse_text("tcp rto-min 2000\ntcp rto-min 3000\n")
    assert t.timing.tcp_rto_min_us == 3000
    assert t.timing.tcp_rto_max_us == 5_000_000


def test_all_timing_directives() -> None:
    t = parse_text(
        "rip periodic-update-rate 1000\n"
        "rip route-timeout-threshold 4000\n"
        "tcp rto-min 10\n"
        "tcp rto-max 20\n"
    )
    assert t.timing == TimingParameters(1000, 4000, 10, 20)


def test_settings_defaults_apply() -> None:
    settings = ParserSettings(defaults=TimingParameters(rip_periodic_update_rate_ms=100))
    t = parse_text("tcp rto-min 7\n", settings)
    assert t.timing.rip_periodic_update_rate_ms == 100
    assert t.timing.tcp_rto_min_us == 7


def test_prefix_boundary() -> None:
    t = parse_text("interface if0 10.0.0.1/32 127.0.0.1:5000")
    assert t.interfaces[0].prefix_length == 32
    with pytest.raises(InvalidNumberError) as info:
        parse_text("interface if0 10.0.0.1/33 127.0.0.1:5000")
    assert info.value.lineno == 1


def test_interface_port_wraps() -> None:
    t = parse_text("interface if0 10.0.0.1/24 127.0.0.1:65537")
    assert t.interfaces[0].transport_port == 1


@pytest.mark.parametrize(
    "line",
    [
        "interface if0 10.0.0.1/24",
        "interface if0 10.0.0.1/24 127.0.0.1:5000 extra",
        "interface if0 10.0.0.1 127.0.0.1:5000",
        "interface if0 10.0.0.1/24 127.0.0.1",
        "neighbor 10.0.0.2 at 127.0.0.1:5001",
        "neighbor 10.0.0.2 on 127.0.0.1:5001 via if0",
        "neighbor 10.0.0.2 at 127.0.0.1:5001 through if0",
        "neighbor 10.0.0.2 at 127.0.0.1:5001 via #if0",
        "route 10.1.0.0/16 10.0.0.2",
        "route 10.1.0.0/16 through 10.0.0.2",
        "routing",
        "routing rip static",
    ],
)
def test_arity_and_keyword_errors(line: str) -> None:
    with pytest.raises(DirectiveSyntaxError):
        parse_text(line)


@pytest.mark.parametrize(
    "line",
    [
        "interface if0 10.0.0/24 127.0.0.1:5000",
        "interface if0 10.0.0.1/24 127.0.0.300:5000",
        "neighbor 10.0.0.2.1 at 127.0.0.1:5001 via if0",
        "rip advertise-to 10.0.0",
        "route 10.1.0.0/16 via 10.0.0.2x",
    ],
)
def test_invalid_addresses(line: str) -> None:
    with pytest.raises(InvalidAddressError):
        parse_text(line)


@pytest.mark.parametrize(
    "line",
    [
        "interface if0 10.0.0.1/x 127.0.0.1:5000",
        "interface if0 10.0.0.1/24 127.0.0.1:-1",
        "rip periodic-update-rate fast",
        "tcp rto-max 18446744073709551616",
        "route 10.0.0.0/100 via 10.0.0.1",
    ],
)
def test_invalid_numbers(line: str) -> None:
    with pytest.raises(InvalidNumberError):
        parse_text(line)


def test_invalid_routing_mode() -> None:
    with pytest.raises(InvalidEnumError, match="ospf"):
        parse_text("routing ospf")


def test_neighbor_trailing_comment() -> None:
    t = parse_text("neighbor 10.0.0.2 at 127.0.0.1:5001 via if0 # to r2\nneighbor 10.0.0.3 at 127.0.0.1:5002 via if1#x\n")
    assert [n.interface_name for n in t.neighbors] == ["if0", "if1"]


def test_comments_and_blank_lines() -> None:
    t = parse_text("# header\n\n   \n\t\nrouting rip\n")
    assert t.routing_mode == RoutingMode.RIP


def test_overlong_directive_token_is_unknown() -> None:
    t = parse_text("interfaceinterface if0 10.0.0.1/24 127.0.0.1:5000\n")
    assert t.interfaces == ()


def test_leading_whitespace_before_directive() -> None:
    t = parse_text("   routing rip\n")
    assert t.routing_mode == RoutingMode.RIP


def test_first_error_aborts() -> None:
    text = "routing bogus\nrip advertise-to nope\n"
    with pytest.raises(LnxParseError) as info:
        parse_text(text)
    assert isinstance(info.value, InvalidEnumError)
    assert info.value.lineno == 1
    assert info.value.line == "routing bogus"
    assert str(info.value).startswith("line 1:")


def test_no_cross_reference_checks() -> None:
    t = parse_text("neighbor 10.0.0.2 at 127.0.0.1:5001 via missing\nrip advertise-to 192.0.2.1\n")
    assert t.neighbors[0].interface_name == "missing"
    assert t.rip_neighbors[0].destination_address == IPv4Address("192.0.2.1")


def test_collections_keep_declaration_order() -> None:
    t = parse_text("route 10.3.0.0/16 via 10.0.0.2\nroute 10.1.0.0/16 via 10.0.0.2\nroute 10.2.0.0/16 via 10.0.0.2\n")
    assert [str(r.network_address) for r in t.static_routes] == ["10.3.0.0", "10.1.0.0", "10.2.0.0"]


def test_parse_is_deterministic() -> None:
    assert parse_text(SCENARIO_A) == parse_text(SCENARIO_A)
    assert parse_text(SCENARIO_A).to_dict() == parse_text(SCENARIO_A).to_dict()


def test_topology_helpers() -> None:
    t = parse_text(SCENARIO_A)
    iface = t.interface("if0")
    assert iface is not None
    assert str(iface.network) == "10.0.0.0/24"
    assert t.interface("if9") is None
    assert len(t.neighbors_via("if0")) == 1


def test_huge_numbers_are_parse_errors_with_line() -> None:
    with pytest.raises(InvalidNumberError) as info:
        parse_text("routing rip\ntcp rto-min " + "9" * 5000)
    assert info.value.lineno == 2
    with pytest.raises(InvalidNumberError) as info:
        parse_text("interface if0 10.0.0.1/24 127.0.0.1:" + "9" * 5000)
    assert info.value.lineno == 1
