"""Fixtures for integration tests."""

import stat
from pathlib import Path
from typing import Protocol

import pytest


class StubCargoFn(Protocol):
    """Protocol for stub cargo creation function."""

    def __call__(self, stdout: str, stderr: str = "", exit_code: int = 0) -> Path:
        """Create a stub cargo executable and return its path."""


@pytest.fixture
def stub_cargo(tmp_path: Path) -> StubCargoFn:
    """Create shell scripts that behave like ``cargo test``.

    The script records its arguments in ``args.txt`` next to itself, writes
    the given text to stdout and stderr, and exits with the given code.
    """

    def _create(stdout: str, stderr: str = "", exit_code: int = 0) -> Path:
        (tmp_path / "stdout.txt").write_text(stdout)
        (tmp_path / "stderr.txt").write_text(stderr)
        script = tmp_path / "cargo"
        script.write_text(
            "#!/bin/sh\n"
            'here="$(dirname "$0")"\n'
            'echo "$@" > "$here/args.txt"\n'
            'cat "$here/stderr.txt" >&2\n'
            'cat "$here/stdout.txt"\n'
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return _create
