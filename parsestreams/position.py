"""Streams that track the position of the tokens they hand out."""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import islice, takewhile
from typing import Any, Callable, NamedTuple

from parsestreams.easy_errors import Error


def _is_newline(token) -> bool:
    return token == "\n" or token == 10


@dataclass
class IndexPositioner:
    """Counts tokens taken from the stream, starting at ``value``."""

    value: int = 0

    def position(self) -> int:
        return self.value

    def update(self, token) -> None:
        self.value += 1

    def update_range(self, value) -> None:
        self.value += len(value)

    def checkpoint(self) -> "IndexPositioner":
        return replace(self)

    def reset(self, checkpoint: "IndexPositioner") -> None:
        self.value = checkpoint.value


@dataclass(order=True)
class SourcePosition:
    """A line and column in a source text, both starting at 1."""

    line: int = 1
    column: int = 1

    def position(self) -> "SourcePosition":
        return replace(self)

    def update(self, token) -> None:
        self.column += 1
        if _is_newline(token):
            self.column = 1
            self.line += 1

    def update_range(self, value) -> None:
        for token in value:
            self.update(token)

    def checkpoint(self) -> "SourcePosition":
        return replace(self)

    def reset(self, checkpoint: "SourcePosition") -> None:
        self.line = checkpoint.line
        self.column = checkpoint.column

    def __str__(self):
        return f"line: {self.line}, column: {self.column}"


_SEQUENCE_TYPES = (str, bytes, bytearray, list, tuple)


class _SequenceStream:
    """A resettable stream over an in-memory sequence."""

    def __init__(self, data, offset: int = 0):
        self.data = data
        self.offset = offset

    def uncons(self):
        if self.offset >= len(self.data):
            raise Error.end_of_input()
        token = self.data[self.offset]
        self.offset += 1
        return token

    def uncons_range(self, size: int):
        if size > len(self.data) - self.offset:
            raise Error.end_of_input()
        value = self.data[self.offset:self.offset + size]
        self.offset += size
        return value

    def _take_while(self, predicate: Callable[[Any], bool]):
        rest = islice(self.data, self.offset, None)
        count = sum(1 for _ in takewhile(predicate, rest))
        value = self.data[self.offset:self.offset + count]
        self.offset += count
        return value

    def uncons_while(self, predicate: Callable[[Any], bool]):
        return self._take_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]):
        value = self._take_while(predicate)
        if len(value) == 0:
            if self.offset >= len(self.data):
                raise Error.end_of_input()
            raise Error.unexpected_token(self.data[self.offset])
        return value

    def is_partial(self) -> bool:
        return False

    def checkpoint(self) -> int:
        return self.offset

    def reset(self, checkpoint: int) -> None:
        self.offset = checkpoint

    def distance(self, end: int) -> int:
        return self.offset - end

    def range(self):
        return self.data[self.offset:]

    def __eq__(self, other):
        if not isinstance(other, _SequenceStream):
            return NotImplemented
        return self.range() == other.range()

    def __repr__(self):
        return f"_SequenceStream({self.range()!r})"


def default_positioner(input):
    """Return the usual positioner for ``input``: line/column for text, an index otherwise."""
    if isinstance(input, str):
        return SourcePosition()
    if isinstance(input, _SequenceStream) and isinstance(input.data, str):
        return SourcePosition()
    return IndexPositioner()


class _Checkpoint(NamedTuple):
    input: Any
    positioner: Any


@dataclass
class PositionStream:
    """Wraps ``input`` and keeps ``positioner`` up to date with every token taken.

    ``input`` may be a stream object or a plain ``str``, ``bytes``, list or tuple.
    Without a positioner the default one for ``input`` is used.
    """

    input: Any
    positioner: Any = None

    def __post_init__(self):
        if self.positioner is None:
            self.positioner = default_positioner(self.input)
        if isinstance(self.input, _SEQUENCE_TYPES):
            self.input = _SequenceStream(self.input)

    def uncons(self):
        token = self.input.uncons()
        self.positioner.update(token)
        return token

    def is_partial(self) -> bool:
        return self.input.is_partial()

    def position(self):
        return self.positioner.position()

    def checkpoint(self) -> _Checkpoint:
        return _Checkpoint(self.input.checkpoint(), self.positioner.checkpoint())

    def reset(self, checkpoint: _Checkpoint) -> None:
        self.input.reset(checkpoint.input)
        self.positioner.reset(checkpoint.positioner)

    def uncons_range(self, size: int):
        value = self.input.uncons_range(size)
        self.positioner.update_range(value)
        return value

    def _tracking(self, predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
        def accept(token) -> bool:
            if predicate(token):
                self.positioner.update(token)
                return True
            return False

        return accept

    def uncons_while(self, predicate: Callable[[Any], bool]):
        return self.input.uncons_while(self._tracking(predicate))

    def uncons_while1(self, predicate: Callable[[Any], bool]):
        return self.input.uncons_while1(self._tracking(predicate))

    def distance(self, end: _Checkpoint) -> int:
        return self.input.distance(end.input)

    def range(self):
        return self.input.range()