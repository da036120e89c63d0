from resp_decoder.data_types import (
    Array,
    BulkString,
    DecodedValue,
    Error,
    Integer,
    SimpleString,
)
from resp_decoder.resp.decoder import RESPDecoder, decode, parse

__all__ = [
    "Array",
    "BulkString",
    "DecodedValue",
    "Error",
    "Integer",
    "RESPDecoder",
    "SimpleString",
    "decode",
    "parse",
]
