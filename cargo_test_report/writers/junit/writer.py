"""JUnit XML writer implementation."""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from cargo_test_report.models.report import Report, Suite
from cargo_test_report.writers.base import ReportWriter
from cargo_test_report.writers.junit.config import JUnitConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class JUnitWriter(ReportWriter):
    """Writes a report as a ``<testsuites>`` JUnit XML document."""

    config: JUnitConfig

    @classmethod
    def from_config(cls, config: JUnitConfig) -> "JUnitWriter":
        """Create writer from its configuration."""
        return cls(config=config)

    def render(self, report: Report) -> str:
        """Serialise the report as JUnit XML."""
        root = ET.Element(
            "testsuites",
            {
                "name": self.config.name,
                "tests": str(sum(s.total for s in report)),
                "failures": str(sum(s.failed for s in report)),
                "errors": "0",
                "skipped": str(sum(s.ignored for s in report)),
            },
        )
        for suite in report:
            root.append(self._suite_element(suite))

        if self.config.pretty:
            ET.indent(root)

        log.debug("Rendered %d suite(s) as JUnit XML", len(report))
        return ET.tostring(root, encoding="utf-8", xml_declaration=True).decode()

    def _suite_element(self, suite: Suite) -> ET.Element:
        element = ET.Element(
            "testsuite",
            {
                "name": suite.name,
                "tests": str(suite.total),
                "failures": str(suite.failed),
                "errors": "0",
                "skipped": str(suite.ignored),
            },
        )
        for test in suite.tests:
            case = ET.SubElement(
                element, "testcase", {"name": test.name, "classname": suite.name}
            )
            if test.status == "fail":
                failure = ET.SubElement(
                    case, "failure", {"message": test.error or ""}
                )
                failure.text = test.error
        return element
