"""JSON writer manifest."""

from cargo_test_report.writers.json_report.config import JsonReportConfig
from cargo_test_report.writers.json_report.writer import JsonReportWriter
from cargo_test_report.writers.manifest import WriterManifest

json_report_manifest = WriterManifest(
    config_cls=JsonReportConfig,
    writer_factory=JsonReportWriter.from_config,
)
