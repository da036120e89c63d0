from enum import IntEnum


class Prefix(IntEnum):
    SIMPLE_STRING = ord("+")
    ERROR = ord("-")
    INTEGER = ord(":")
    BULK_STRING = ord("$")
    ARRAY = ord("*")


CR = ord("\r")
LF = ord("\n")
CRLF = b"\r\n"

NULL_LENGTH = -1

# Length fields are signed 64-bit on the wire.
MIN_LENGTH = -(2**63)
MAX_LENGTH = 2**63 - 1
MAX_LENGTH_DIGITS = len(str(MAX_LENGTH))
