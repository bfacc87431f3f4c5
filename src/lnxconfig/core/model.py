from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from ipaddress import IPv4Address, IPv4Network
from typing import Any


class RoutingMode(str, Enum):
    STATIC = "static"
    RIP = "rip"


class CheckStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    WARN = "WARN"


class Severity(str, Enum):
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"


DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS = 5000
DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS = 12000
DEFAULT_TCP_RTO_MIN_US = 1000
DEFAULT_TCP_RTO_MAX_US = 5_000_000


@dataclass(frozen=True, slots=True)
class Interface:
    name: str
    assigned_address: IPv4Address
    prefix_length: int
    transport_address: IPv4Address
    transport_port: int

    @property
    def network(self) -> IPv4Network:
        return IPv4Network(f"{self.assigned_address}/{self.prefix_length}", strict=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "assigned_address": str(self.assigned_address),
            "prefix_length": self.prefix_length,
            "transport_address": str(self.transport_address),
            "transport_port": self.transport_port,
        }


@dataclass(frozen=True, slots=True)
class Neighbor:
    destination_address: IPv4Address
    transport_address: IPv4Address
    transport_port: int
    interface_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "destination_address": str(self.destination_address),
            "transport_address": str(self.transport_address),
            "transport_port": self.transport_port,
            "interface_name": self.interface_name,
        }


@dataclass(frozen=True, slots=True)
class RIPNeighbor:
    destination_address: IPv4Address

    def to_dict(self) -> dict[str, Any]:
        return {"destination_address": str(self.destination_address)}


@dataclass(frozen=True, slots=True)
class StaticRoute:
    network_address: IPv4Address
    prefix_length: int
    next_hop_address: IPv4Address

    @property
    def network(self) -> IPv4Network:
        return IPv4Network(f"{self.network_address}/{self.prefix_length}", strict=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "network_address": str(self.network_address),
            "prefix_length": self.prefix_length,
            "next_hop_address": str(self.next_hop_address),
        }


@dataclass(frozen=True, slots=True)
class TimingParameters:
    rip_periodic_update_rate_ms: int = DEFAULT_RIP_PERIODIC_UPDATE_RATE_MS
    rip_route_timeout_threshold_ms: int = DEFAULT_RIP_ROUTE_TIMEOUT_THRESHOLD_MS
    tcp_rto_min_us: int = DEFAULT_TCP_RTO_MIN_US
    tcp_rto_max_us: int = DEFAULT_TCP_RTO_MAX_US

    def to_dict(self) -> dict[str, Any]:
        return {
            "rip_periodic_update_rate_ms": self.rip_periodic_update_rate_ms,
            "rip_route_timeout_threshold_ms": self.rip_route_timeout_threshold_ms,
            "tcp_rto_min_us": self.tcp_rto_min_us,
            "tcp_rto_max_us": self.tcp_rto_max_us,
        }


@dataclass(frozen=True, slots=True)
class Topology:
    interfaces: tuple[Interface, ...] = ()
    neighbors: tuple[Neighbor, ...] = ()
    rip_neighbors: tuple[RIPNeighbor, ...] = ()
    static_routes: tuple[StaticRoute, ...] = ()
    routing_mode: RoutingMode = RoutingMode.STATIC
    timing: TimingParameters = field(default_factory=TimingParameters)

    def interface(self, name: str) -> Interface | None:
        for iface in self.interfaces:
            if iface.name == name:
                return iface
        return None

    def neighbors_via(self, name: str) -> list[Neighbor]:
        return [n for n in self.neighbors if n.interface_name == name]

    def to_dict(self) -> dict[str, Any]:
        return {
            "interfaces": [i.to_dict() for i in self.interfaces],
            "neighbors": [n.to_dict() for n in self.neighbors],
            "rip_neighbors": [r.to_dict() for r in self.rip_neighbors],
            "static_routes": [s.to_dict() for s in self.static_routes],
            "routing_mode": self.routing_mode.value,
            "timing": self.timing.to_dict(),
        }


@dataclass(slots=True)
class CheckResult:
    phase: str
    name: str
    status: CheckStatus
    severity: Severity
    message: str
    evidence: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase,
            "name": self.name,
            "status": self.status.value,
            "severity": self.severity.value,
            "message": self.message,
            "evidence": self.evidence,
        }
