from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from lnxconfig.core.errors import LnxParseError
from lnxconfig.core.model import Topology
from lnxconfig.core.settings import ParserSettings
from lnxconfig.parser.builder import TopologyBuilder
from lnxconfig.parser.classifier import apply_line
from lnxconfig.parser.reader import NumberedLine, iter_file_lines, iter_text_lines

log = logging.getLogger(__name__)


def parse_lines(lines: Iterable[NumberedLine], settings: ParserSettings | None = None) -> Topology:
    """Run one pass over numbered lines and return the finished topology.

    The first fatal error propagates unchanged; no partial topology escapes.
    """
    builder = TopologyBuilder(settings)
    for lineno, line in lines:
        try:
            apply_line(builder, lineno, line)
        except LnxParseError as exc:
            log.debug("parse failed at line %d: %s", exc.lineno, exc.reason)
            raise
    topology = builder.build()
    log.debug(
        "parsed %d interface(s), %d neighbor(s), %d route(s), routing %s",
        len(topology.interfaces),
        len(topology.neighbors),
        len(topology.static_routes),
        topology.routing_mode.value,
    )
    return topology


def parse_text(text: str, settings: ParserSettings | None = None) -> Topology:
    return parse_lines(iter_text_lines(text), settings)


def parse_file(path: Path | str, settings: ParserSettings | None = None) -> Topology:
    return parse_lines(iter_file_lines(path), settings)
