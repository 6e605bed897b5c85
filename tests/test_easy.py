import io
from itertools import takewhile

import pytest

from parsestreams.easy import EasyStream
from parsestreams.easy_errors import Error, ErrorKind, Errors
from parsestreams.read import ReadError, ReadErrorKind, ReadStream


class ListStream:
    def __init__(self, items, partial=False):
        self.items = list(items)
        self.index = 0
        self.partial = partial

    def uncons(self):
        if self.index >= len(self.items):
            raise ReadError(ReadErrorKind.END_OF_INPUT)
        token = self.items[self.index]
        self.index += 1
        return token

    def is_partial(self):
        return self.partial

    def position(self):
        return self.index

    def checkpoint(self):
        return self.index

    def reset(self, checkpoint):
        if checkpoint > len(self.items):
            raise ReadError(ReadErrorKind.UNEXPECTED)
        self.index = checkpoint

    def uncons_range(self, size):
        if self.index + size > len(self.items):
            raise ReadError(ReadErrorKind.END_OF_INPUT)
        taken = self.items[self.index:self.index + size]
        self.index += size
        return taken

    def uncons_while(self, predicate):
        taken = list(takewhile(predicate, self.items[self.index:]))
        self.index += len(taken)
        return taken

    def uncons_while1(self, predicate):
        taken = self.uncons_while(predicate)
        if not taken:
            raise LookupError("nothing matched")
        return taken

    def distance(self, end):
        return self.index - end

    def range(self):
        return self.items[self.index:]


class EasyRaisingStream(ListStream):
    def __init__(self, error):
        super().__init__([])
        self.error = error

    def uncons(self):
        raise self.error


def test_uncons_yields_tokens_in_order():
    stream = EasyStream(ListStream("abc"))
    assert [stream.uncons() for _ in range(3)] == ["a", "b", "c"]


def test_end_of_input_is_converted():
    stream = EasyStream(ListStream(""))
    with pytest.raises(Error) as info:
        stream.uncons()
    assert info.value == Error.end_of_input()
    assert info.value.is_unexpected_end_of_input()


def test_read_stream_inner():
    stream = EasyStream(ReadStream(io.BytesIO(b"a")))
    assert stream.uncons() == ord("a")
    with pytest.raises(Error) as info:
        stream.uncons()
    assert info.value.is_unexpected_end_of_input()


def test_unexpected_read_error_becomes_parse_message():
    stream = EasyRaisingStream(ReadError(ReadErrorKind.UNEXPECTED))
    with pytest.raises(Error) as info:
        EasyStream(stream).uncons()
    assert info.value == Error.unexpected_static_message("parse")


def test_foreign_error_becomes_other():
    original = RuntimeError("boom")
    with pytest.raises(Error) as info:
        EasyStream(EasyRaisingStream(original)).uncons()
    assert info.value.kind is ErrorKind.OTHER
    assert info.value.cause is original
    assert str(info.value) == "boom"


def test_easy_error_passes_through_unchanged():
    original = Error.expected_token("x")
    with pytest.raises(Error) as info:
        EasyStream(EasyRaisingStream(original)).uncons()
    assert info.value is original


def test_checkpoint_and_reset_round_trip():
    stream = EasyStream(ListStream("abcd"))
    stream.uncons()
    checkpoint = stream.checkpoint()
    assert stream.uncons() == "b"
    assert stream.uncons() == "c"
    stream.reset(checkpoint)
    assert stream.position() == checkpoint
    assert stream.uncons() == "b"


def test_failed_reset_raises_errors_at_position():
    stream = EasyStream(ListStream("ab"))
    stream.uncons()
    with pytest.raises(Errors) as info:
        stream.reset(10)
    assert info.value.position == stream.position()
    assert info.value.errors == [Error.unexpected_static_message("parse")]


def test_range_operations_delegate():
    stream = EasyStream(ListStream("aab1"))
    start = stream.checkpoint()
    assert stream.uncons_range(1) == ["a"]
    assert stream.uncons_while(lambda c: c.isalpha()) == ["a", "b"]
    assert stream.distance(start) == 3
    assert stream.range() == ["1"]


def test_uncons_range_past_end_is_converted():
    stream = EasyStream(ListStream("ab"))
    with pytest.raises(Error) as info:
        stream.uncons_range(5)
    assert info.value == Error.end_of_input()


def test_uncons_while1_converts_failure():
    stream = EasyStream(ListStream("1"))
    with pytest.raises(Error) as info:
        stream.uncons_while1(lambda c: c.isalpha())
    assert info.value.kind is ErrorKind.OTHER
    assert isinstance(info.value.cause, LookupError)


def test_uncons_while1_returns_matches():
    stream = EasyStream(ListStream("ab1"))
    assert stream.uncons_while1(lambda c: c.isalpha()) == ["a", "b"]
    assert stream.position() == 2


@pytest.mark.parametrize("partial", [True, False])
def test_is_partial_delegates(partial):
    assert EasyStream(ListStream("", partial=partial)).is_partial() is partial