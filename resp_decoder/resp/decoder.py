from __future__ import annotations

import logging
import re

from resp_decoder.data_types import (
    Array,
    BulkString,
    DecodedValue,
    Error,
    Integer,
    SimpleString,
)
from resp_decoder.resp.constants import (
    CR,
    CRLF,
    LF,
    MAX_LENGTH,
    MAX_LENGTH_DIGITS,
    MIN_LENGTH,
    NULL_LENGTH,
    Prefix,
)
from resp_decoder.resp.errors import (
    InvalidLength,
    InvalidPrefix,
    MalformedTerminator,
    TruncatedInput,
)

logger = logging.getLogger(__name__)

_LENGTH_PATTERN = re.compile(rb"[+-]?[0-9]+")


class RESPDecoder:
    """Depth-first decoder over a fully buffered RESP message.

    The cursor only moves forward. Each call to :meth:`parse` consumes
    exactly one value, including every nested element of an array, and
    raises a :class:`~resp_decoder.resp.errors.RESPDecodeError` subclass on
    the first malformed byte. Open arrays are kept on an explicit stack,
    so nesting depth is not bounded by the interpreter recursion limit.
    """

    def __init__(self, buffer: bytes, cursor: int = 0) -> None:
        if not 0 <= cursor <= len(buffer):
            raise ValueError(f"Cursor {cursor} is outside the buffer")

        self.buffer = bytes(buffer)
        self.cursor = cursor

    @property
    def remaining(self) -> int:
        return len(self.buffer) - self.cursor

    def parse(self) -> DecodedValue:
        # Arrays still being filled, innermost last: (items so far, declared count).
        # Items are appended as decoded, so a bogus count can only
        # allocate as much as the buffer actually holds.
        open_arrays: list[tuple[list[DecodedValue], int]] = []

        while True:
            start = self.cursor
            prefix = self.read_prefix()

            value: DecodedValue
            match prefix:
                case Prefix.SIMPLE_STRING:
                    value = SimpleString(self.read_line())
                case Prefix.ERROR:
                    value = Error(self.read_line())
                case Prefix.INTEGER:
                    value = Integer(self.read_line())
                case Prefix.BULK_STRING:
                    value = self.parse_bulk_string()
                case Prefix.ARRAY:
                    count = self.read_length()
                    if count > 0:
                        open_arrays.append(([], count))
                        continue
                    value = Array(None if count == NULL_LENGTH else ())
                case _:
                    raise InvalidPrefix(prefix, start)

            logger.debug("Decoded %r at byte %d", type(value), start)

            while open_arrays:
                items, count = open_arrays[-1]
                items.append(value)
                if len(items) < count:
                    break
                open_arrays.pop()
                value = Array(tuple(items))
            else:
                return value

    def read_prefix(self) -> int:
        if self.cursor >= len(self.buffer):
            raise TruncatedInput("Expected a type prefix", self.cursor)

        prefix = self.buffer[self.cursor]
        self.cursor += 1
        return prefix

    def read_line(self) -> bytes:
        start = self.cursor
        end = self.buffer.find(LF, start)

        if end == -1:
            raise TruncatedInput("No line feed before end of input", start)

        self.cursor = end + 1

        if end == start or self.buffer[end - 1] != CR:
            raise MalformedTerminator("Line does not end with CRLF", start)

        return self.buffer[start : end - 1]

    def read_length(self) -> int:
        start = self.cursor
        raw = self.read_line()

        if not _LENGTH_PATTERN.fullmatch(raw):
            raise InvalidLength(f"Length field is not a number: {raw!r}", start)
        if len(raw.lstrip(b"+-").lstrip(b"0")) > MAX_LENGTH_DIGITS:
            raise InvalidLength(f"Length field overflows: {raw[:32]!r}...", start)

        length = int(raw)
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise InvalidLength(f"Length field overflows: {raw!r}", start)
        if length < NULL_LENGTH:
            raise InvalidLength(f"Negative length: {length}", start)

        return length

    def parse_bulk_string(self) -> BulkString:
        length = self.read_length()
        if length == NULL_LENGTH:
            return BulkString(None)

        start = self.cursor
        end = start + length + len(CRLF)

        if end > len(self.buffer):
            raise TruncatedInput(
                f"Bulk string needs {length + len(CRLF)} bytes, {self.remaining} available",
                start,
            )

        self.cursor = end

        if self.buffer[end - len(CRLF) : end] != CRLF:
            raise MalformedTerminator(
                "Bulk string does not end with CRLF", end - len(CRLF)
            )

        return BulkString(self.buffer[start : start + length])


def parse(buffer: bytes, cursor: int = 0) -> tuple[DecodedValue, int]:
    """Decode one value at ``cursor``; return it with the advanced cursor."""
    decoder = RESPDecoder(buffer, cursor)
    value = decoder.parse()
    return value, decoder.cursor


def decode(buffer: bytes) -> DecodedValue:
    """Decode the first value in ``buffer``, ignoring any trailing bytes."""
    value, _ = parse(buffer)
    return value
