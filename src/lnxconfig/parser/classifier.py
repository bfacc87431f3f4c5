from __future__ import annotations

import logging

from lnxconfig.core.errors import DirectiveSyntaxError, FieldError
from lnxconfig.parser.builder import TopologyBuilder
from lnxconfig.parser.directives import DIRECTIVES

log = logging.getLogger(__name__)


def split_directive(line: str) -> tuple[str, str] | None:
    """Return ``(keyword, rest)`` for a directive line, or None for lines to skip.

    Blank lines, lines starting with ``#`` and whitespace-only lines carry no
    directive.
    """
    if not line or line[0] == "#":
        return None
    parts = line.split(None, 1)
    if not parts:
        return None
    return parts[0], parts[1] if len(parts) > 1 else ""


def apply_line(builder: TopologyBuilder, lineno: int, line: str) -> None:
    split = split_directive(line)
    if split is None:
        return
    keyword, rest = split
    # an over-long token never names a directive
    handler = DIRECTIVES.get(keyword) if len(keyword) <= builder.settings.max_directive_length else None
    if handler is None:
        if keyword.startswith("#"):
            return
        if builder.settings.reject_unknown_directives:
            known = ", ".join(DIRECTIVES.keywords())
            raise DirectiveSyntaxError(lineno, f"unknown directive '{keyword}' (expected one of {known})", line)
        log.debug("line %d: skipping unknown directive '%s'", lineno, keyword)
        return
    try:
        handler(builder, rest)
    except FieldError as exc:
        raise exc.at_line(lineno, line) from exc
