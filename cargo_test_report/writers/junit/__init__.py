"""JUnit XML writer module."""

from cargo_test_report.writers.junit.config import JUnitConfig
from cargo_test_report.writers.junit.manifest import junit_manifest
from cargo_test_report.writers.junit.writer import JUnitWriter

__all__ = ["JUnitConfig", "JUnitWriter", "junit_manifest"]
