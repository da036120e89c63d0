import pytest

from resp_decoder.config import DecoderConfig
from resp_decoder.main import parse_args


def test_decode_simple_string(run_cli) -> None:
    result = run_cli(b"+OK\r\n")

    assert result.returncode == 0
    assert result.stdout.decode().splitlines() == ["type: +", "OK @from value"]


def test_decode_array(run_cli) -> None:
    result = run_cli(b"*2\r\n$3\r\nbar\r\n$5\r\nhello\r\n")

    assert result.returncode == 0
    assert result.stdout.decode().splitlines() == [
        "type: *",
        "bar @from array value",
        "hello @from array value",
    ]


def test_decode_recursive(run_cli) -> None:
    result = run_cli(b"*1\r\n*1\r\n+deep\r\n", "--recursive")

    assert result.returncode == 0
    assert result.stdout.decode().splitlines() == [
        "type: *",
        "* 1 items",
        "  * 1 items",
        "    + deep",
    ]


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        (b"@", "Unknown RESP prefix"),
        (b"$5\r\nhell\r\n", "Bulk string needs 7 bytes"),
        (b"$abc\r\n", "not a number"),
        (b"", "Input is empty"),
    ],
)
def test_failures_exit_nonzero_without_output(run_cli, payload, message) -> None:
    result = run_cli(payload)

    assert result.returncode == 1
    assert result.stdout == b""
    assert message in result.stderr.decode()


def test_trailing_bytes_warn_by_default(run_cli) -> None:
    result = run_cli(b"+OK\r\n+MORE\r\n")

    assert result.returncode == 0
    assert "Ignoring 7 trailing bytes" in result.stderr.decode()
    assert " - __main__ - WARNING - " in result.stderr.decode()


def test_trailing_bytes_fail_in_strict_mode(run_cli) -> None:
    result = run_cli(b"+OK\r\n+MORE\r\n", "--strict")

    assert result.returncode == 1
    assert result.stdout == b""


def test_regular_file_is_rejected(run_cli, tmp_path) -> None:
    path = tmp_path / "message.resp"
    path.write_bytes(b"+OK\r\n")

    with open(path, "rb") as file:
        result = run_cli(b"", stdin=file)

    assert result.returncode == 1
    assert "piped" in result.stderr.decode()


def test_pipe_check_can_be_disabled(run_cli, tmp_path) -> None:
    path = tmp_path / "message.resp"
    path.write_bytes(b"+OK\r\n")

    with open(path, "rb") as file:
        result = run_cli(b"", "--no-pipe-check", stdin=file)

    assert result.returncode == 0
    assert result.stdout.decode().splitlines()[0] == "type: +"


def test_parse_args_builds_config() -> None:
    config = parse_args(["--recursive", "--log-level", "debug"])

    assert config == DecoderConfig(
        recursive=True, strict=False, require_pipe=True, log_level="DEBUG"
    )


def test_config_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError):
        DecoderConfig(log_level="LOUD")


def test_deeply_nested_array(run_cli) -> None:
    depth = 5000
    payload = b"*1\r\n" * depth + b":1\r\n"

    result = run_cli(payload)
    assert result.returncode == 0
    assert result.stdout.decode().splitlines() == ["type: *", " @from array value"]

    result = run_cli(payload, "--recursive")
    assert result.returncode == 0
    assert len(result.stdout.decode().splitlines()) == depth + 2


def test_oversized_length_field_is_reported(run_cli) -> None:
    result = run_cli(b"*" + b"1" * 5000 + b"\r\n")

    assert result.returncode == 1
    assert result.stdout == b""
    assert "Length field overflows" in result.stderr.decode()
    assert "Traceback" not in result.stderr.decode()
