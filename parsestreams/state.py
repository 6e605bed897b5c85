"""A stream that carries user state alongside an inner stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(order=True)
class StateStream:
    """Delegates all stream operations to ``stream`` and holds ``state``."""

    stream: Any
    state: Any = None

    def uncons(self):
        return self.stream.uncons()

    def is_partial(self) -> bool:
        return self.stream.is_partial()

    def position(self):
        return self.stream.position()

    def checkpoint(self):
        return self.stream.checkpoint()

    def reset(self, checkpoint) -> None:
        self.stream.reset(checkpoint)

    def uncons_range(self, size: int):
        return self.stream.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]):
        return self.stream.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]):
        return self.stream.uncons_while1(predicate)

    def distance(self, end) -> int:
        return self.stream.distance(end)

    def range(self):
        return self.stream.range()