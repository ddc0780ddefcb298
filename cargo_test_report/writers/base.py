"""Abstract base class for report writers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cargo_test_report.models.report import Report


@dataclass(frozen=True, kw_only=True)
class ReportWriter(ABC):
    """Abstract base for report serialisation formats."""

    @abstractmethod
    def render(self, report: Report) -> str:
        """Serialise a report.

        Args:
            report: Suites in transcript order

        Returns:
            Document text in the writer's format

        """
