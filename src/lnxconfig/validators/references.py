"""Cross-directive checks over a parsed topology.

The parser accepts dangling references on purpose; these checks are an
opt-in lint for callers that want them reported.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Callable

from lnxconfig.core.model import CheckResult, RoutingMode, Severity, Topology
from lnxconfig.core.results import RunSummary
from lnxconfig.validators.base import make_result

CheckFn = Callable[[Topology], list[CheckResult]]


def neighbor_interfaces(topology: Topology) -> list[CheckResult]:
    declared = {i.name for i in topology.interfaces}
    out: list[CheckResult] = []
    for n in topology.neighbors:
        ok = n.interface_name in declared
        out.append(
            make_result(
                "neighbor-interface",
                f"{n.destination_address} via {n.interface_name}",
                ok,
                "interface declared" if ok else f"no interface named '{n.interface_name}'",
            )
        )
    return out


def rip_peers(topology: Topology) -> list[CheckResult]:
    neighbors = {n.destination_address for n in topology.neighbors}
    out: list[CheckResult] = []
    for r in topology.rip_neighbors:
        ok = r.destination_address in neighbors
        message = "matches a neighbor" if ok else f"no neighbor with address {r.destination_address}"
        out.append(make_result("rip-peer", f"advertise-to {r.destination_address}", ok, message))
    if topology.rip_neighbors and topology.routing_mode == RoutingMode.STATIC:
        out.append(
            make_result(
                "rip-peer",
                "routing mode",
                False,
                "rip advertise-to declared but routing mode is static",
                Severity.WARN,
            )
        )
    return out


def unique_interfaces(topology: Topology) -> list[CheckResult]:
    counts = Counter(i.name for i in topology.interfaces)
    return [
        make_result("interface-unique", name, count == 1, f"declared {count} time(s)", evidence={"count": count})
        for name, count in counts.items()
    ]


def neighbor_subnets(topology: Topology) -> list[CheckResult]:
    out: list[CheckResult] = []
    for n in topology.neighbors:
        iface = topology.interface(n.interface_name)
        if iface is None:
            continue
        ok = n.destination_address in iface.network
        out.append(
            make_result(
                "neighbor-subnet",
                f"{n.destination_address} via {n.interface_name}",
                ok,
                f"{'inside' if ok else 'outside'} {iface.network}",
                Severity.WARN,
            )
        )
    return out


def route_next_hops(topology: Topology) -> list[CheckResult]:
    neighbors = {n.destination_address for n in topology.neighbors}
    return [
        make_result(
            "route-next-hop",
            f"{s.network} via {s.next_hop_address}",
            s.next_hop_address in neighbors,
            "next hop is a neighbor" if s.next_hop_address in neighbors else "next hop is not a declared neighbor",
            Severity.WARN,
        )
        for s in topology.static_routes
    ]


CHECKS: list[CheckFn] = [unique_interfaces, neighbor_interfaces, neighbor_subnets, rip_peers, route_next_hops]


def run_reference_checks(topology: Topology, source: Path | None = None) -> RunSummary:
    summary = RunSummary(source=source)
    for check in CHECKS:
        summary.extend(check(topology))
    return summary
