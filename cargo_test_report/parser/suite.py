"""Assembly of a complete suite from its header to its summary."""

from cargo_test_report.models.report import Suite
from cargo_test_report.parser.failures import correlate, failures_section
from cargo_test_report.parser.lines import (
    outcome_line,
    suite_count,
    suite_header,
    suite_summary,
)
from cargo_test_report.parser.primitives import many, optional


def suite(buf: bytes, pos: int) -> tuple[Suite, int]:
    """Parse one suite block.

    The stages run in fixed order: header, test count, test lines, an
    optional failures section, and the summary. The suite is only built
    once all of them matched, so a mismatch anywhere yields no suite.

    Args:
        buf: Complete transcript
        pos: Offset of the suite header

    Returns:
        The suite and the offset just past its summary line

    Raises:
        GrammarMismatch: If any required stage does not match

    """
    name, pos = suite_header(buf, pos)
    _, pos = suite_count(buf, pos)
    tests, pos = many(outcome_line, buf, pos)
    failures, pos = optional(failures_section, buf, pos)
    result, pos = suite_summary(buf, pos)

    return (
        Suite(
            name=name,
            state=result.state,
            passed=result.passed,
            failed=result.failed,
            ignored=result.ignored,
            measured=result.measured,
            total=result.total,
            tests=correlate(tests, failures),
        ),
        pos,
    )
