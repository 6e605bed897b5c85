"""A buffered reader whose buffer can be grown and consumed explicitly."""

from __future__ import annotations

from typing import Any

DEFAULT_CAPACITY = 8096
_RESERVE = 8 * 1024


class _ByteBuffer:
    """Buffered bytes together with the room reserved for them."""

    def __init__(self, capacity: int = 0):
        self.data = bytearray()
        self.capacity = capacity

    def __len__(self) -> int:
        return len(self.data)

    def advance(self, length: int) -> None:
        """Drop ``length`` bytes from the front of the buffer."""
        if length < 0 or length > len(self.data):
            raise ValueError(
                f"cannot advance {length} bytes past a buffer of {len(self.data)}"
            )
        del self.data[:length]
        self.capacity -= length

    def clear(self) -> None:
        self.advance(len(self.data))


def extend_buf_sync(buf, read) -> int:
    """Read once from ``read`` into the free room of ``buf``.

    ``buf`` holds a ``data`` bytearray and a ``capacity``; when it has no free
    room left, 8 KiB more is reserved first. Returns the number of bytes read,
    0 meaning the end of input.
    """
    spare = buf.capacity - len(buf.data)
    if spare <= 0:
        buf.capacity = len(buf.data) + _RESERVE
        spare = _RESERVE
    chunk = read.read(spare)
    if chunk is None:
        raise BlockingIOError("the reader has no data available yet")
    if len(chunk) > spare:
        raise ValueError(
            "reader returned more bytes than the number requested"
        )
    buf.data.extend(chunk)
    return len(chunk)


class BufReader:
    """Reads from ``inner`` through an internal buffer.

    ``inner`` and the buffer ``buf`` are kept as attributes so that a decoder
    can parse straight from the buffered bytes and advance past them.
    """

    def __init__(self, inner: Any, capacity: int = DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.inner = inner
        self.buf = _ByteBuffer(capacity)

    @classmethod
    def with_capacity(cls, capacity: int, inner: Any) -> "BufReader":
        return cls(inner, capacity)

    def buffer(self) -> bytes:
        """The buffered bytes, without reading more."""
        return bytes(self.buf.data)

    def into_inner(self) -> Any:
        """Return the wrapped reader; buffered bytes are dropped."""
        inner = self.inner
        self.buf.clear()
        return inner

    def fill_buf(self) -> bytes:
        """Return the buffered bytes, reading more first if there are none."""
        if not self.buf.data:
            extend_buf_sync(self.buf, self.inner)
        return bytes(self.buf.data)

    def consume(self, amount: int) -> None:
        """Mark ``amount`` buffered bytes as used."""
        self.buf.advance(amount)

    def read(self, size: int | None = -1) -> bytes:
        """Read at most ``size`` bytes; a negative size takes what is buffered."""
        data = self.fill_buf()
        if size is None or size < 0:
            size = len(data)
        out = data[:size]
        self.consume(len(out))
        return out