class RESPDecodeError(ValueError):
    """Base class for every failure raised while decoding a RESP buffer.

    ``position`` is the byte offset at which the failing read started.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} (at byte {position})")
        self.message = message
        self.position = position


class TruncatedInput(RESPDecodeError):
    pass


class InvalidPrefix(RESPDecodeError):
    def __init__(self, prefix: int, position: int) -> None:
        super().__init__(f"Unknown RESP prefix: {bytes([prefix])!r}", position)
        self.prefix = prefix


class MalformedTerminator(RESPDecodeError):
    pass


class InvalidLength(RESPDecodeError):
    pass
