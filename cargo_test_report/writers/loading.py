"""Loading of report writers from entry points."""

from importlib.metadata import entry_points
from typing import Any

from cargo_test_report.writers.manifest import WriterManifest

ENTRY_POINT_GROUP = "cargo_test_report.writers"


class WriterNotFoundError(Exception):
    """Raised when a writer is not found."""


def load_writer_manifest(key: str) -> WriterManifest[Any]:
    """Load a writer manifest by key.

    Args:
        key: The writer key as registered in pyproject.toml
             (e.g., "junit", "json")

    Returns:
        The writer manifest instance

    Raises:
        WriterNotFoundError: If no writer with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: WriterManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise WriterNotFoundError(
        f"Writer '{key}' not found. Available writers: {available}"
    )
