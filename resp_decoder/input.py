import logging
import os
import stat
from typing import BinaryIO

logger = logging.getLogger(__name__)


class InputError(Exception):
    pass


def ensure_pipe(stream: BinaryIO) -> None:
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError) as e:
        raise InputError(f"Cannot inspect input: {e}") from e

    if not stat.S_ISFIFO(mode):
        raise InputError("Input must be piped in")


def read_all(stream: BinaryIO) -> bytes:
    data = stream.read()
    if not data:
        raise InputError("Input is empty")

    logger.debug("Read %d bytes of input", len(data))
    return data
