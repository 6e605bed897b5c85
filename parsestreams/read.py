"""A byte stream read one byte at a time from a binary file-like object."""

from __future__ import annotations

import enum
from typing import BinaryIO

from parsestreams.easy_errors import Error


class ReadErrorKind(enum.Enum):
    UNEXPECTED = "unexpected"
    END_OF_INPUT = "end_of_input"
    IO = "io"


class ReadError(Exception):
    """A minimal error: an unexpected parse, the end of input, or an I/O failure."""

    def __init__(self, kind: ReadErrorKind, cause: BaseException | None = None):
        super().__init__()
        if (kind is ReadErrorKind.IO) != (cause is not None):
            raise ValueError("an I/O error needs a cause and only it may have one")
        self.kind = kind
        self.cause = cause

    def is_unexpected_end_of_input(self) -> bool:
        return self.kind is ReadErrorKind.END_OF_INPUT

    def to_easy(self) -> Error:
        """Convert to the equivalent easy ``Error``."""
        if self.kind is ReadErrorKind.UNEXPECTED:
            return Error.unexpected_static_message("parse")
        if self.kind is ReadErrorKind.END_OF_INPUT:
            return Error.end_of_input()
        return Error.other(self.cause)

    def __eq__(self, other):
        if not isinstance(other, ReadError):
            return NotImplemented
        return self.kind is other.kind and self.kind is not ReadErrorKind.IO

    def __hash__(self):
        if self.kind is ReadErrorKind.IO:
            return id(self)
        return hash(self.kind)

    def __repr__(self):
        if self.kind is ReadErrorKind.IO:
            return f"ReadError({self.kind.name}, {self.cause!r})"
        return f"ReadError({self.kind.name})"

    def __str__(self):
        if self.kind is ReadErrorKind.UNEXPECTED:
            return "unexpected parse"
        if self.kind is ReadErrorKind.END_OF_INPUT:
            return "unexpected end of input"
        return str(self.cause)


class ReadStream:
    """Yields the bytes of ``reader`` one by one as integers.

    It keeps no position and cannot be reset; wrap it in a positioned,
    buffered stream to parse with backtracking.
    """

    def __init__(self, reader: BinaryIO):
        self._reader = reader

    def uncons(self) -> int:
        try:
            chunk = self._reader.read(1)
        except OSError as err:
            raise ReadError(ReadErrorKind.IO, err) from err
        if not chunk:
            raise ReadError(ReadErrorKind.END_OF_INPUT)
        return chunk[0]

    def is_partial(self) -> bool:
        return False