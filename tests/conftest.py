import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def run_cli():
    def run(data: bytes, *args: str, stdin=None) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", "resp_decoder.main", *args],
            input=data if stdin is None else None,
            stdin=stdin,
            capture_output=True,
            cwd=PROJECT_ROOT,
            timeout=30,
        )

    return run
