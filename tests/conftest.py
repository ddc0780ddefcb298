"""Shared fixtures for transcript based tests."""

from pathlib import Path
from typing import Protocol

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class LoadTranscriptFn(Protocol):
    """Protocol for transcript fixture loading function."""

    def __call__(self, name: str) -> bytes:
        """Return the raw bytes of a transcript fixture."""


@pytest.fixture
def load_transcript() -> LoadTranscriptFn:
    """Load captured cargo test transcripts from tests/fixtures."""

    def _load(name: str) -> bytes:
        return (FIXTURES_DIR / f"{name}.txt").read_bytes()

    return _load
