# parsestreams

Building blocks for the input side of a parser: streams that hand out tokens
one at a time, remember where they are, can be rewound to a checkpoint, and
report failures with readable, mergeable error values.

Only the standard library is needed.

## Modules

| Module | Provides |
| --- | --- |
| `parsestreams.easy_errors` | `Info`, `ErrorKind`, `Error`, `Errors`, `fmt_errors`: structured parse errors |
| `parsestreams.easy` | `EasyStream`: wraps a stream so its failures are raised as `Error` (or `Errors` for a failed `reset`) |
| `parsestreams.read` | `ReadStream`, `ReadError`, `ReadErrorKind`: a byte stream read from a binary file object |
| `parsestreams.state` | `StateStream`: a stream carrying a user `state` next to it |
| `parsestreams.position` | `IndexPositioner`, `SourcePosition`, `PositionStream`, `default_positioner` |
| `parsestreams.span` | `Span`, `SpanStream`: positions reported as start/end spans |
| `parsestreams.buf_reader` | `BufReader`, `extend_buf_sync`: a buffered reader whose buffer can be inspected |
| `parsestreams.buffered` | `BufferedStream`: limited backtracking for a stream that only goes forwards |
| `parsestreams.combine_buffer` | `Buffer`, `Bufferless`: the two ways a decoder can keep its bytes |
| `parsestreams.decoder` | `Decoder`, `DecoderError`, `ParseFailure`, `IoFailure` |

## Streams

Every stream has `uncons()`, which returns the next token or raises an error,
and `is_partial()`. Streams that can rewind also have `checkpoint()` and
`reset(checkpoint)`; range streams add `uncons_range`, `uncons_while`,
`uncons_while1`, `distance` and `range`.

`PositionStream` accepts a stream object or a plain `str`, `bytes`, list or
tuple, which it wraps in a resettable range stream of its own.

Reading bytes from a file, tracking the position and rewinding:

```python
import io
from parsestreams.read import ReadStream
from parsestreams.position import PositionStream, IndexPositioner
from parsestreams.buffered import BufferedStream

raw = ReadStream(io.BytesIO(b"123,"))
stream = BufferedStream(PositionStream(raw, IndexPositioner()), 1)

start = stream.checkpoint()
first = stream.uncons()      # ord("1")
stream.reset(start)          # rewind within the lookahead window
assert stream.uncons() == first
```

`BufferedStream` keeps only the last `lookahead` tokens with their positions.
Resetting to a checkpoint older than that raises `Errors` with the message
"Backtracked to far".

`ReadStream` raises `ReadError` at the end of input or on an I/O failure;
wrapping a stream in `EasyStream` turns such failures into `Error` values.

## Positions

`SourcePosition` counts lines and columns from 1 and moves to the next line
after a newline, whether the tokens are characters or bytes:

```python
from parsestreams.position import SourcePosition

pos = SourcePosition()
for ch in "ab\nc":
    pos.update(ch)
print(pos)   # line: 2, column: 2
```

`IndexPositioner` counts tokens. `default_positioner(input)` picks
`SourcePosition` for text and `IndexPositioner` for everything else.
`SpanStream` reports each position of the stream it wraps as
`Span(start, end)` with both ends equal.

## Errors

```python
from parsestreams.easy_errors import Error, Errors

err = Errors.from_errors(0, [Error.unexpected_token(",")])
err.add_error(Error.expected_token("."))
err.add_error(Error.expected_token("a"))
err.add_error(Error.expected_static_message("digit"))
print(err)
```

prints

```
Parse error at 0
Unexpected `,`
Expected `.`, `a` or digit
```

`Errors.merge` keeps the errors that got furthest, or combines both when they
happened at the same position, skipping duplicates. `set_expected`,
`clear_expected`, `map_position`, `map_token` and `map_range` reshape an
`Errors` value.

## Buffered reading and decoding

```python
import io
from parsestreams.buf_reader import BufReader

reader = BufReader.with_capacity(3, io.BytesIO(bytes([1, 2, 3, 4, 5])))
reader.read(3)   # b"\x01\x02\x03"
```

`fill_buf()` returns the buffered bytes, reading once more when the buffer is
empty; `consume(n)` drops bytes from its front.

`Decoder` keeps what an incremental parser needs between calls:
`before_parse(reader)` reads more bytes into the buffer (marking
`end_of_input()` when a read returns nothing) and `advance(read, n)` drops the
bytes a parse consumed. A decoder built with `Decoder.new_bufferless()` keeps
no bytes of its own and expects a `BufReader`. `IoFailure.to_easy()` turns a
read failure into an `Errors` value at its position.

## What it does not do

This package provides streams, positions, buffers and errors only. It has no
parsers or combinators that consume these streams, no command-line tool, and
only synchronous, blocking readers: there is no asyncio support.

## Running the tests

```
pip install -e .[test]
pytest
```