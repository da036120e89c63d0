from __future__ import annotations

from dataclasses import dataclass


class RESPType(type):
    def __repr__(self) -> str:
        return self.__name__.lower()


@dataclass(frozen=True)
class SimpleString(metaclass=RESPType):
    prefix = "+"

    value: bytes


@dataclass(frozen=True)
class Error(metaclass=RESPType):
    prefix = "-"

    value: bytes


@dataclass(frozen=True)
class Integer(metaclass=RESPType):
    prefix = ":"

    value: bytes

    def as_int(self) -> int:
        """Coerce the raw decimal digits. Raises ValueError if they are not a number."""
        return int(self.value.decode("ascii"))


@dataclass(frozen=True)
class BulkString(metaclass=RESPType):
    prefix = "$"

    value: bytes | None

    @property
    def is_null(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class Array(metaclass=RESPType):
    prefix = "*"

    items: tuple[DecodedValue, ...] | None

    @property
    def is_null(self) -> bool:
        return self.items is None


DecodedValue = SimpleString | Error | Integer | BulkString | Array
