"""A stream that replays recently taken tokens so a one-shot stream can reset."""

from __future__ import annotations

from collections import deque
from typing import Any

from parsestreams.easy_errors import Error, Errors

_TOO_FAR = "Backtracked to far"


class BufferedStream:
    """Keeps the last ``lookahead`` tokens of ``inner`` with their positions.

    Checkpoints are token offsets. Resetting further back than the buffer
    reaches raises an error.
    """

    def __init__(self, inner: Any, lookahead: int):
        if lookahead < 0:
            raise ValueError("lookahead must not be negative")
        self.inner = inner
        self._offset = 0
        self._buffer_offset = 0
        self._buffer: deque = deque(maxlen=lookahead)

    @property
    def _oldest(self) -> int:
        return self._buffer_offset - len(self._buffer)

    def checkpoint(self) -> int:
        return self._offset

    def reset(self, checkpoint: int) -> None:
        if checkpoint < self._oldest:
            raise Errors(self.position(), [Error.message_static_message(_TOO_FAR)])
        self._offset = checkpoint

    def position(self):
        if self._offset >= self._buffer_offset:
            return self.inner.position()
        if self._offset < self._oldest:
            if not self._buffer:
                raise IndexError("the buffer holds no tokens")
            return self._buffer[0][1]
        return self._buffer[len(self._buffer) - (self._buffer_offset - self._offset)][1]

    def uncons(self):
        if self._offset >= self._buffer_offset:
            position = self.inner.position()
            token = self.inner.uncons()
            self._buffer_offset += 1
            self._buffer.append((token, position))
            self._offset += 1
            return token
        if self._offset < self._oldest:
            raise Error.message_static_message(_TOO_FAR)
        token = self._buffer[len(self._buffer) - (self._buffer_offset - self._offset)][0]
        self._offset += 1
        return token

    def is_partial(self) -> bool:
        return self.inner.is_partial()