import argparse
import logging
import sys

from resp_decoder.config import LOG_LEVELS, DecoderConfig
from resp_decoder.formatter import render
from resp_decoder.input import InputError, ensure_pipe, read_all
from resp_decoder.resp.decoder import RESPDecoder
from resp_decoder.resp.errors import RESPDecodeError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> DecoderConfig:
    parser = argparse.ArgumentParser(
        description="Decode a RESP message piped in on stdin"
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Print the whole value tree instead of the top level only",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if bytes remain after the first decoded value",
    )
    parser.add_argument(
        "--no-pipe-check",
        action="store_true",
        help="Accept stdin even when it is not a pipe",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity on stderr",
    )
    args = parser.parse_args(argv)

    return DecoderConfig(
        recursive=args.recursive,
        strict=args.strict,
        require_pipe=not args.no_pipe_check,
        log_level=args.log_level,
    )


def run(config: DecoderConfig) -> list[str]:
    stdin = sys.stdin.buffer

    if config.require_pipe:
        ensure_pipe(stdin)
    data = read_all(stdin)

    decoder = RESPDecoder(data)
    value = decoder.parse()

    if decoder.remaining:
        if config.strict:
            raise InputError(
                f"{decoder.remaining} trailing bytes after byte {decoder.cursor}"
            )
        logger.warning("Ignoring %d trailing bytes", decoder.remaining)

    return render(value, recursive=config.recursive)


def main(argv: list[str] | None = None) -> None:
    config = parse_args(argv)

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        lines = run(config)
    except (InputError, RESPDecodeError) as e:
        logger.error(e)
        sys.exit(1)

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
