"""Writer manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from cargo_test_report.writers.base import ReportWriter


@dataclass(frozen=True, kw_only=True)
class WriterManifest[ConfigT: BaseModel]:
    """Manifest describing a writer plugin.

    The manifest pairs the writer's configuration class with the factory that
    builds the writer from a validated configuration.
    """

    config_cls: type[ConfigT]
    writer_factory: Callable[[ConfigT], ReportWriter]
