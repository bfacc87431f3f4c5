from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from lnxconfig.parser.builder import TopologyBuilder

DirectiveFn = Callable[["TopologyBuilder", str], None]


class DirectiveRegistry:
    """Maps a directive keyword to the extractor that consumes its line."""

    def __init__(self) -> None:
        self._handlers: dict[str, DirectiveFn] = {}

    def register(self, keyword: str, fn: DirectiveFn) -> None:
        if keyword in self._handlers:
            raise ValueError(f"Directive already registered: {keyword}")
        self._handlers[keyword] = fn

    def directive(self, keyword: str) -> Callable[[DirectiveFn], DirectiveFn]:
        def wrap(fn: DirectiveFn) -> DirectiveFn:
            self.register(keyword, fn)
            return fn

        return wrap

    def get(self, keyword: str) -> DirectiveFn | None:
        return self._handlers.get(keyword)

    def keywords(self) -> list[str]:
        return list(self._handlers)
