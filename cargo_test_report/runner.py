"""Run ``cargo test`` and capture its console transcript."""

import asyncio
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class CargoNotFoundError(Exception):
    """Raised when the cargo executable cannot be started."""


@dataclass(frozen=True, kw_only=True)
class CargoRun:
    """Outcome of one ``cargo test`` invocation."""

    returncode: int
    transcript: bytes


async def run_cargo_test(
    cwd: Path,
    cargo_args: Sequence[str] = (),
    cargo_bin: str = "cargo",
) -> CargoRun:
    """Run ``cargo test`` and return its combined stdout and stderr.

    Cargo writes build status lines to stderr and test output to stdout, so
    both streams are merged into a single transcript in emission order.

    Args:
        cwd: Directory containing the crate or workspace to test
        cargo_args: Extra arguments passed after ``cargo test``
        cargo_bin: Cargo executable name or path

    Returns:
        Exit code and raw transcript bytes.

    Raises:
        CargoNotFoundError: If the cargo executable does not exist

    """
    command = [cargo_bin, "test", *cargo_args]
    logger.info("Running %s in %s", " ".join(command), cwd)

    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
    except FileNotFoundError as e:
        raise CargoNotFoundError(f"Cannot run '{cargo_bin}': {e}") from e

    stdout, _ = await process.communicate()
    returncode = process.returncode if process.returncode is not None else -1

    logger.info("cargo test exited with code %d", returncode)
    return CargoRun(returncode=returncode, transcript=stdout)


def read_transcript(path: Path) -> bytes:
    """Read a previously captured transcript; ``-`` reads standard input."""
    if str(path) == "-":
        return sys.stdin.buffer.read()
    return path.read_bytes()
