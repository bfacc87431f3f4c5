from __future__ import annotations

from lnxconfig.core.model import TimingParameters, Topology


def format_topology(topology: Topology, defaults: TimingParameters | None = None) -> str:
    """Render a topology back into lnx directives.

    Timing directives are written only when they differ from ``defaults``,
    so parsing the output with the same defaults reproduces ``topology``.
    """
    defaults = defaults or TimingParameters()
    lines: list[str] = []
    for i in topology.interfaces:
        lines.append(f"interface {i.name} {i.assigned_address}/{i.prefix_length} {i.transport_address}:{i.transport_port}")
    for n in topology.neighbors:
        lines.append(f"neighbor {n.destination_address} at {n.transport_address}:{n.transport_port} via {n.interface_name}")
    lines.append(f"routing {topology.routing_mode.value}")

    timing = topology.timing
    if timing.rip_periodic_update_rate_ms != defaults.rip_periodic_update_rate_ms:
        lines.append(f"rip periodic-update-rate {timing.rip_periodic_update_rate_ms}")
    if timing.rip_route_timeout_threshold_ms != defaults.rip_route_timeout_threshold_ms:
        lines.append(f"rip route-timeout-threshold {timing.rip_route_timeout_threshold_ms}")
    for r in topology.rip_neighbors:
        lines.append(f"rip advertise-to {r.destination_address}")
    for s in topology.static_routes:
        lines.append(f"route {s.network_address}/{s.prefix_length} via {s.next_hop_address}")
    if timing.tcp_rto_min_us != defaults.tcp_rto_min_us:
        lines.append(f"tcp rto-min {timing.tcp_rto_min_us}")
    if timing.tcp_rto_max_us != defaults.tcp_rto_max_us:
        lines.append(f"tcp rto-max {timing.tcp_rto_max_us}")
    return "\n".join(lines) + "\n"
