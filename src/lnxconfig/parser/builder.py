from __future__ import annotations

import dataclasses
import logging

from lnxconfig.core.model import Interface, Neighbor, RIPNeighbor, RoutingMode, StaticRoute, TimingParameters, Topology
from lnxconfig.core.settings import ParserSettings

log = logging.getLogger(__name__)


class TopologyBuilder:
    """Single-writer accumulator for one parse pass.

    Starts from the settings' timing defaults and STATIC routing; records
    are appended in declaration order and scalars are overwritten, so the
    last occurrence of a repeated scalar directive wins.
    """

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self.settings = settings or ParserSettings()
        self.interfaces: list[Interface] = []
        self.neighbors: list[Neighbor] = []
        self.rip_neighbors: list[RIPNeighbor] = []
        self.static_routes: list[StaticRoute] = []
        self.routing_mode = RoutingMode.STATIC
        self.timing: TimingParameters = self.settings.defaults

    def add_interface(self, interface: Interface) -> None:
        self.interfaces.append(interface)

    def add_neighbor(self, neighbor: Neighbor) -> None:
        self.neighbors.append(neighbor)

    def add_rip_neighbor(self, rip_neighbor: RIPNeighbor) -> None:
        self.rip_neighbors.append(rip_neighbor)

    def add_static_route(self, route: StaticRoute) -> None:
        self.static_routes.append(route)

    def set_routing_mode(self, mode: RoutingMode) -> None:
        self.routing_mode = mode

    def set_timing(self, name: str, value: int) -> None:
        if getattr(self.timing, name) != value:
            log.debug("timing %s: %d -> %d", name, getattr(self.timing, name), value)
        self.timing = dataclasses.replace(self.timing, **{name: value})

    def build(self) -> Topology:
        return Topology(
            interfaces=tuple(self.interfaces),
            neighbors=tuple(self.neighbors),
            rip_neighbors=tuple(self.rip_neighbors),
            static_routes=tuple(self.static_routes),
            routing_mode=self.routing_mode,
            timing=self.timing,
        )
