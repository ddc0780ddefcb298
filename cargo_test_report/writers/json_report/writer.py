"""JSON writer implementation."""

import json
from dataclasses import dataclass
from typing import Any

from cargo_test_report.models.report import Report
from cargo_test_report.writers.base import ReportWriter
from cargo_test_report.writers.json_report.config import JsonReportConfig


@dataclass(frozen=True, kw_only=True)
class JsonReportWriter(ReportWriter):
    """Writes a report as a JSON document with overall totals."""

    config: JsonReportConfig

    @classmethod
    def from_config(cls, config: JsonReportConfig) -> "JsonReportWriter":
        """Create writer from its configuration."""
        return cls(config=config)

    def render(self, report: Report) -> str:
        """Serialise the report as JSON."""
        return json.dumps(format_report(report), indent=self.config.indent)


def format_report(report: Report) -> dict[str, Any]:
    """Format a report for JSON output."""
    return {
        "total": sum(s.total for s in report),
        "passed": sum(s.passed for s in report),
        "failed": sum(s.failed for s in report),
        "ignored": sum(s.ignored for s in report),
        "suites": [suite.model_dump(mode="json") for suite in report],
    }
