from __future__ import annotations

from lnxconfig.core.errors import FieldEnumError, FieldSyntaxError
from lnxconfig.core.model import Interface, Neighbor, RIPNeighbor, RoutingMode, StaticRoute
from lnxconfig.core.registry import DirectiveRegistry
from lnxconfig.parser.builder import TopologyBuilder
from lnxconfig.parser.fields import (
    expect_arity,
    expect_keyword,
    parse_address,
    parse_cidr,
    parse_endpoint,
    parse_name,
    parse_uint,
)

DIRECTIVES = DirectiveRegistry()

# sub-directive -> TimingParameters field
RIP_TIMERS = {
    "periodic-update-rate": "rip_periodic_update_rate_ms",
    "route-timeout-threshold": "rip_route_timeout_threshold_ms",
}
TCP_TIMERS = {
    "rto-min": "tcp_rto_min_us",
    "rto-max": "tcp_rto_max_us",
}


def _sub_directive(directive: str, tokens: list[str], known: list[str]) -> tuple[str, list[str]]:
    if not tokens:
        raise FieldSyntaxError(f"{directive}: missing sub-directive (one of {', '.join(known)})")
    sub, args = tokens[0], tokens[1:]
    if sub not in known:
        raise FieldSyntaxError(f"unrecognized {directive} directive '{sub}'")
    return sub, args


@DIRECTIVES.directive("interface")
def interface(builder: TopologyBuilder, rest: str) -> None:
    # interface <name> <addr>/<prefix> <addr>:<port>
    tokens = rest.split()
    expect_arity(tokens, 3, "interface")
    name = parse_name(tokens[0], builder.settings.max_name_length)
    assigned, prefix = parse_cidr(tokens[1])
    transport, port = parse_endpoint(tokens[2])
    builder.add_interface(Interface(name, assigned, prefix, transport, port))


@DIRECTIVES.directive("neighbor")
def neighbor(builder: TopologyBuilder, rest: str) -> None:
    # neighbor <addr> at <addr>:<port> via <ifname> [# comment]
    body = rest.split("#", 1)[0]
    tokens = body.split()
    expect_arity(tokens, 5, "neighbor")
    expect_keyword(tokens[1], "at", "neighbor")
    expect_keyword(tokens[3], "via", "neighbor")
    destination = parse_address(tokens[0])
    transport, port = parse_endpoint(tokens[2])
    ifname = parse_name(tokens[4], builder.settings.max_name_length)
    builder.add_neighbor(Neighbor(destination, transport, port, ifname))


@DIRECTIVES.directive("routing")
def routing(builder: TopologyBuilder, rest: str) -> None:
    tokens = rest.split()
    expect_arity(tokens, 1, "routing")
    try:
        mode = RoutingMode(tokens[0])
    except ValueError as exc:
        raise FieldEnumError(f"unrecognized routing mode '{tokens[0]}'") from exc
    builder.set_routing_mode(mode)


@DIRECTIVES.directive("rip")
def rip(builder: TopologyBuilder, rest: str) -> None:
    sub, args = _sub_directive("rip", rest.split(), [*RIP_TIMERS, "advertise-to"])
    expect_arity(args, 1, f"rip {sub}")
    if sub == "advertise-to":
        builder.add_rip_neighbor(RIPNeighbor(parse_address(args[0])))
        return
    builder.set_timing(RIP_TIMERS[sub], parse_uint(args[0], f"rip {sub}"))


@DIRECTIVES.directive("route")
def route(builder: TopologyBuilder, rest: str) -> None:
    # route <addr>/<prefix> via <addr>
    tokens = rest.split()
    expect_arity(tokens, 3, "route")
    expect_keyword(tokens[1], "via", "route")
    network, prefix = parse_cidr(tokens[0])
    builder.add_static_route(StaticRoute(network, prefix, parse_address(tokens[2])))


@DIRECTIVES.directive("tcp")
def tcp(builder: TopologyBuilder, rest: str) -> None:
    sub, args = _sub_directive("tcp", rest.split(), list(TCP_TIMERS))
    expect_arity(args, 1, f"tcp {sub}")
    builder.set_timing(TCP_TIMERS[sub], parse_uint(args[0], f"tcp {sub}"))
