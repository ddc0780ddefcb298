"""Intermediate records produced while recognizing a suite."""

from dataclasses import dataclass

from cargo_test_report.models.report import Status


@dataclass(frozen=True, kw_only=True)
class SuiteResult:
    """Aggregate counts taken from a suite's summary line.

    The filtered-out count is read from the line but not kept.
    """

    state: Status
    passed: int
    failed: int
    ignored: int
    measured: int
    total: int


@dataclass(frozen=True, kw_only=True)
class Failure:
    """Failure output of one test, matched back to its test by name."""

    name: str
    message: str
