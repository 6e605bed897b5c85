"""Where a decoder keeps the bytes it parses: its own buffer, or the reader's."""

from __future__ import annotations

from typing import Any

from parsestreams.buf_reader import BufReader, _ByteBuffer, extend_buf_sync


class Buffer:
    """An internal buffer owned by the decoder; any binary reader can feed it."""

    def __init__(self):
        self._buf = _ByteBuffer()

    def buffer(self, read: Any = None) -> bytes:
        """The buffered bytes; ``read`` is not consulted."""
        return bytes(self._buf.data)

    def advance(self, read: Any, length: int) -> None:
        """Drop ``length`` parsed bytes from the front of the buffer."""
        self._buf.advance(length)

    def extend_buf_sync(self, read: Any) -> int:
        """Read once from ``read`` into the buffer; 0 means the end of input."""
        return extend_buf_sync(self._buf, read)


class Bufferless:
    """No buffer of its own: the bytes live in the ``BufReader`` being read."""

    @staticmethod
    def _check(read: Any) -> BufReader:
        if not isinstance(read, BufReader):
            raise TypeError("a bufferless decoder needs its reader wrapped in a BufReader")
        return read

    def buffer(self, read: Any) -> bytes:
        """The bytes buffered inside ``read``."""
        return self._check(read).buffer()

    def advance(self, read: Any, length: int) -> None:
        """Drop ``length`` parsed bytes from the buffer inside ``read``."""
        self._check(read).buf.advance(length)

    def extend_buf_sync(self, read: Any) -> int:
        """Read once from the reader wrapped by ``read`` into its buffer."""
        reader = self._check(read)
        return extend_buf_sync(reader.buf, reader.inner)