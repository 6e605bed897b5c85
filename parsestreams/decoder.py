"""Incremental decoding state: the bytes read so far, a position and user state."""

from __future__ import annotations

from typing import Any

from parsestreams.combine_buffer import Buffer, Bufferless
from parsestreams.easy_errors import Error, Errors


class DecoderError(Exception):
    """A failure while decoding: either a parse error or an I/O error."""


class ParseFailure(DecoderError):
    """The parser rejected the input."""

    def __init__(self, error: Any):
        super().__init__(error)
        self.error = error

    def __str__(self):
        return str(self.error)


class IoFailure(DecoderError):
    """Reading the input failed at ``position``."""

    def __init__(self, position: Any, error: BaseException):
        super().__init__(position, error)
        self.position = position
        self.error = error

    def to_easy(self) -> Errors:
        """The easy ``Errors`` equivalent: the I/O error at its position."""
        return Errors(self.position, [Error.other(self.error)])

    def __str__(self):
        return str(self.error)


class Decoder:
    """Holds what a decoder needs between calls.

    With the default ``Buffer`` the bytes read are kept here and any binary
    reader may be used. A bufferless decoder keeps nothing and reads from a
    ``BufReader``, whose own buffer holds the bytes.
    """

    def __init__(self, state: Any = None, position: Any = None, buffer: Any = None):
        self.state = state
        self._position = position
        self._buffer = Buffer() if buffer is None else buffer
        self._end_of_input = False

    @classmethod
    def new_bufferless(cls, state: Any = None, position: Any = None) -> "Decoder":
        return cls(state, position, Bufferless())

    def buffer(self) -> bytes:
        """The bytes held by a buffered decoder and not yet advanced past."""
        if not isinstance(self._buffer, Buffer):
            raise TypeError("a bufferless decoder holds no buffer of its own")
        return self._buffer.buffer()

    def position(self) -> Any:
        return self._position

    def end_of_input(self) -> bool:
        """Whether the last read returned no data."""
        return self._end_of_input

    def advance(self, read: Any, removed: int) -> None:
        """Drop ``removed`` parsed bytes from wherever the bytes are kept."""
        self._buffer.advance(read, removed)

    def before_parse(self, reader: Any) -> None:
        """Read more input; a read of nothing marks the end of input."""
        if self._buffer.extend_buf_sync(reader) == 0:
            self._end_of_input = True