"""Recognizers for the ``failures:`` section and failure correlation."""

from collections.abc import Sequence

from cargo_test_report.errors import GrammarMismatch
from cargo_test_report.models.report import Test
from cargo_test_report.models.result import Failure
from cargo_test_report.parser.primitives import (
    decode,
    line_end,
    line_ending,
    many,
    one_or_more,
    rest_of_line,
    take_until,
    ws_tag,
)

SUMMARY_ANCHOR = b"test result: "


def failure_banner(buf: bytes, pos: int) -> tuple[str, int]:
    """Parse ``---- <name> stdout ----`` into the failing test's name."""
    pos = ws_tag(buf, pos, b"----")
    end = take_until(buf, pos, b" ")
    name = decode(buf, pos, end)
    pos = ws_tag(buf, end, b"stdout")
    return name, ws_tag(buf, pos, b"----")


def failure_block(buf: bytes, pos: int) -> tuple[Failure, int]:
    """Parse one banner and the output that follows it.

    Only the first output line becomes the message. Remaining output lines,
    including the backtrace hint, are consumed up to the blank line that
    closes the block.
    """
    name, pos = failure_banner(buf, pos)
    message, pos = rest_of_line(buf, pos)
    _, pos = many(_detail_line, buf, pos)
    pos = line_ending(buf, pos)
    return Failure(name=name, message=message), pos


def failures_section(buf: bytes, pos: int) -> tuple[list[Failure], int]:
    """Parse the ``failures:`` section up to the suite summary.

    The name listing cargo repeats after the failure blocks is skipped
    without being compared to the blocks.
    """
    pos = ws_tag(buf, pos, b"failures:")
    failures, pos = one_or_more(failure_block, buf, pos)
    return failures, take_until(buf, pos, SUMMARY_ANCHOR)


def correlate(
    tests: Sequence[Test], failures: Sequence[Failure] | None
) -> list[Test]:
    """Attach failure messages to the tests with exactly matching names.

    Test status is left as reported by the test line; a test without a
    matching failure keeps ``error=None``.
    """
    if failures is None:
        return list(tests)

    messages: dict[str, str] = {}
    for failure in failures:
        messages.setdefault(failure.name, failure.message)

    return [
        test.model_copy(update={"error": messages.get(test.name)}) for test in tests
    ]


def _detail_line(buf: bytes, pos: int) -> tuple[None, int]:
    end = line_end(buf, pos)
    if not buf[pos:end].strip():
        raise GrammarMismatch("failure output line", pos)
    return None, line_ending(buf, end)
