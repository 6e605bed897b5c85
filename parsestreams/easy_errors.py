"""Informative parse errors: tokens, ranges and messages tied to a position."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterable


class _InfoKind(enum.Enum):
    TOKEN = "token"
    RANGE = "range"
    OWNED = "owned"
    STATIC = "static"


_TEXT_KINDS = (_InfoKind.OWNED, _InfoKind.STATIC)


@dataclass(frozen=True, eq=False)
class Info:
    """A piece of error information: a token, a range or a text message."""

    kind: _InfoKind
    value: Any

    @classmethod
    def token(cls, value):
        return cls(_InfoKind.TOKEN, value)

    @classmethod
    def range(cls, value):
        return cls(_InfoKind.RANGE, value)

    @classmethod
    def owned(cls, text):
        return cls(_InfoKind.OWNED, str(text))

    @classmethod
    def static(cls, text):
        return cls(_InfoKind.STATIC, text)

    @property
    def is_text(self) -> bool:
        return self.kind in _TEXT_KINDS

    def map_token(self, f: Callable[[Any], Any]) -> "Info":
        """Return a copy with ``f`` applied to a token value."""
        if self.kind is _InfoKind.TOKEN:
            return Info(self.kind, f(self.value))
        return self

    def map_range(self, f: Callable[[Any], Any]) -> "Info":
        """Return a copy with ``f`` applied to a range value."""
        if self.kind is _InfoKind.RANGE:
            return Info(self.kind, f(self.value))
        return self

    def __eq__(self, other):
        if not isinstance(other, Info):
            return NotImplemented
        if self.is_text and other.is_text:
            return self.value == other.value
        return self.kind is other.kind and self.value == other.value

    def __hash__(self):
        group = "text" if self.is_text else self.kind.value
        return hash((group, str(self.value)))

    def __str__(self):
        if self.is_text:
            return f"{self.value}"
        return f"`{self.value}`"


class ErrorKind(enum.Enum):
    """The category of a single parse error."""

    UNEXPECTED = "unexpected"
    EXPECTED = "expected"
    MESSAGE = "message"
    OTHER = "other"


class Error(Exception):
    """A single error: something unexpected, something expected, a message,
    or another exception that caused the failure."""

    def __init__(self, kind: ErrorKind, info: Info | None = None, cause: BaseException | None = None):
        super().__init__()
        if kind is ErrorKind.OTHER:
            if cause is None:
                raise ValueError("an OTHER error needs a cause")
        elif info is None:
            raise ValueError(f"a {kind.value} error needs info")
        self.kind = kind
        self.info = info
        self.cause = cause

    @classmethod
    def end_of_input(cls):
        return cls(ErrorKind.UNEXPECTED, Info.static("end of input"))

    @classmethod
    def unexpected_token(cls, token):
        return cls(ErrorKind.UNEXPECTED, Info.token(token))

    @classmethod
    def unexpected_range(cls, value):
        return cls(ErrorKind.UNEXPECTED, Info.range(value))

    @classmethod
    def unexpected_format(cls, msg):
        return cls(ErrorKind.UNEXPECTED, Info.owned(msg))

    @classmethod
    def unexpected_static_message(cls, msg):
        return cls(ErrorKind.UNEXPECTED, Info.static(msg))

    @classmethod
    def expected_token(cls, token):
        return cls(ErrorKind.EXPECTED, Info.token(token))

    @classmethod
    def expected_range(cls, value):
        return cls(ErrorKind.EXPECTED, Info.range(value))

    @classmethod
    def expected_format(cls, msg):
        return cls(ErrorKind.EXPECTED, Info.owned(msg))

    @classmethod
    def expected_static_message(cls, msg):
        return cls(ErrorKind.EXPECTED, Info.static(msg))

    @classmethod
    def message_token(cls, token):
        return cls(ErrorKind.MESSAGE, Info.token(token))

    @classmethod
    def message_range(cls, value):
        return cls(ErrorKind.MESSAGE, Info.range(value))

    @classmethod
    def message_format(cls, msg):
        return cls(ErrorKind.MESSAGE, Info.owned(msg))

    @classmethod
    def message_static_message(cls, msg):
        return cls(ErrorKind.MESSAGE, Info.static(msg))

    @classmethod
    def other(cls, err):
        return cls(ErrorKind.OTHER, cause=err)

    def is_unexpected_end_of_input(self) -> bool:
        return self == Error.end_of_input()

    def map_token(self, f: Callable[[Any], Any]) -> "Error":
        if self.kind is ErrorKind.OTHER:
            return self
        return Error(self.kind, self.info.map_token(f))

    def map_range(self, f: Callable[[Any], Any]) -> "Error":
        if self.kind is ErrorKind.OTHER:
            return self
        return Error(self.kind, self.info.map_range(f))

    def __eq__(self, other):
        if not isinstance(other, Error):
            return NotImplemented
        if self.kind is ErrorKind.OTHER or other.kind is ErrorKind.OTHER:
            return False
        return self.kind is other.kind and self.info == other.info

    def __hash__(self):
        if self.kind is ErrorKind.OTHER:
            return id(self)
        return hash((self.kind, self.info))

    def __repr__(self):
        if self.kind is ErrorKind.OTHER:
            return f"Error({self.kind.name}, cause={self.cause!r})"
        return f"Error({self.kind.name}, {self.info!r})"

    def __str__(self):
        if self.kind is ErrorKind.UNEXPECTED:
            return f"Unexpected {self.info}"
        if self.kind is ErrorKind.EXPECTED:
            return f"Expected {self.info}"
        if self.kind is ErrorKind.MESSAGE:
            return str(self.info)
        return str(self.cause)


def fmt_errors(errors: Iterable[Error]) -> str:
    """Format errors: unexpected lines, then one expected list, then messages."""
    errors = list(errors)
    parts = [f"{e}\n" for e in errors if e.kind is ErrorKind.UNEXPECTED]

    expected = [e.info for e in errors if e.kind is ErrorKind.EXPECTED]
    last = len(expected) - 1
    for i, info in enumerate(expected):
        if i == 0:
            prefix = "Expected"
        elif i < last:
            prefix = ","
        else:
            prefix = " or"
        parts.append(f"{prefix} {info}")
    if expected:
        parts.append("\n")

    parts.extend(
        f"{e}\n" for e in errors if e.kind in (ErrorKind.MESSAGE, ErrorKind.OTHER)
    )
    return "".join(parts)


class Errors(Exception):
    """All errors that occurred at one position."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, position, errors: Iterable[Error] | None = None):
        super().__init__()
        self.position = position
        self.errors: list[Error] = list(errors) if errors is not None else []

    @classmethod
    def empty(cls, position):
        return cls(position, [])

    @classmethod
    def from_errors(cls, position, errors):
        return cls(position, errors)

    @classmethod
    def end_of_input(cls, position):
        return cls(position, [Error.end_of_input()])

    def add_error(self, error: Error) -> None:
        """Add ``error`` unless an equal error is already present."""
        if all(existing != error for existing in self.errors):
            self.errors.append(error)

    def set_expected(self, info: Info) -> None:
        """Replace every expected error with a single one holding ``info``."""
        self.clear_expected()
        self.errors.append(Error(ErrorKind.EXPECTED, info))

    def clear_expected(self) -> None:
        self.errors = [e for e in self.errors if e.kind is not ErrorKind.EXPECTED]

    def merge(self, other: "Errors") -> "Errors":
        """Keep the errors furthest ahead; combine them at equal positions."""
        if self.position < other.position:
            return other
        if self.position > other.position:
            return self
        for error in other.errors:
            self.add_error(error)
        other.errors = []
        return self

    def map_position(self, f: Callable[[Any], Any]) -> "Errors":
        return Errors(f(self.position), self.errors)

    def map_token(self, f: Callable[[Any], Any]) -> "Errors":
        return Errors(self.position, [e.map_token(f) for e in self.errors])

    def map_range(self, f: Callable[[Any], Any]) -> "Errors":
        return Errors(self.position, [e.map_range(f) for e in self.errors])

    def is_unexpected_end_of_input(self) -> bool:
        return any(e.is_unexpected_end_of_input() for e in self.errors)

    def __eq__(self, other):
        if not isinstance(other, Errors):
            return NotImplemented
        return self.position == other.position and self.errors == other.errors

    def __repr__(self):
        return f"Errors(position={self.position!r}, errors={self.errors!r})"

    def __str__(self):
        return f"Parse error at {self.position}\n" + fmt_errors(self.errors)