"""JSON writer module."""

from cargo_test_report.writers.json_report.config import JsonReportConfig
from cargo_test_report.writers.json_report.manifest import json_report_manifest
from cargo_test_report.writers.json_report.writer import JsonReportWriter

__all__ = ["JsonReportConfig", "JsonReportWriter", "json_report_manifest"]
