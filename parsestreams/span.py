"""Streams whose positions are spans between a start and an end position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from parsestreams.easy_errors import Errors


@dataclass(frozen=True, order=True)
class Span:
    """A range of positions from ``start`` to ``end``."""

    start: Any
    end: Any

    @classmethod
    def from_position(cls, position) -> "Span":
        return cls(position, position)

    def map(self, f: Callable[[Any], Any]) -> "Span":
        return Span(f(self.start), f(self.end))


@dataclass
class SpanStream:
    """Wraps ``inner`` and reports each position as an empty ``Span``."""

    inner: Any

    def uncons(self):
        return self.inner.uncons()

    def is_partial(self) -> bool:
        return self.inner.is_partial()

    def position(self) -> Span:
        return Span.from_position(self.inner.position())

    def checkpoint(self):
        return self.inner.checkpoint()

    def reset(self, checkpoint) -> None:
        try:
            self.inner.reset(checkpoint)
        except Errors as err:
            raise err.map_position(Span.from_position) from err

    def uncons_range(self, size: int):
        return self.inner.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]):
        return self.inner.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]):
        return self.inner.uncons_while1(predicate)

    def distance(self, end) -> int:
        return self.inner.distance(end)

    def range(self):
        return self.inner.range()