"""JUnit XML writer manifest."""

from cargo_test_report.writers.junit.config import JUnitConfig
from cargo_test_report.writers.junit.writer import JUnitWriter
from cargo_test_report.writers.manifest import WriterManifest

junit_manifest = WriterManifest(
    config_cls=JUnitConfig,
    writer_factory=JUnitWriter.from_config,
)
