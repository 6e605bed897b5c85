"""A stream wrapper whose failures are always easy ``Error``/``Errors`` values."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from parsestreams.easy_errors import Error, Errors


def _to_stream_error(err: BaseException) -> Error:
    """Turn an error raised by an inner stream into an easy ``Error``."""
    if isinstance(err, Error):
        return err
    to_easy = getattr(err, "to_easy", None)
    if callable(to_easy):
        converted = to_easy()
        if isinstance(converted, Error):
            return converted
    return Error.other(err)


@contextmanager
def _easy_errors() -> Iterator[None]:
    try:
        yield
    except Error:
        raise
    except Exception as err:
        raise _to_stream_error(err) from err


@dataclass
class EasyStream:
    """Wraps ``inner`` and converts every error it raises into the easy types.

    Token-level failures are raised as ``Error``; a failed ``reset`` is raised
    as ``Errors`` carrying the current position.
    """

    inner: Any

    def uncons(self):
        with _easy_errors():
            return self.inner.uncons()

    def is_partial(self) -> bool:
        return self.inner.is_partial()

    def position(self):
        return self.inner.position()

    def checkpoint(self):
        return self.inner.checkpoint()

    def reset(self, checkpoint) -> None:
        try:
            self.inner.reset(checkpoint)
        except Errors:
            raise
        except Exception as err:
            raise Errors(self.position(), [_to_stream_error(err)]) from err

    def uncons_range(self, size: int):
        with _easy_errors():
            return self.inner.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]):
        with _easy_errors():
            return self.inner.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]):
        with _easy_errors():
            return self.inner.uncons_while1(predicate)

    def distance(self, end) -> int:
        return self.inner.distance(end)

    def range(self):
        return self.inner.range()