"""Recognizers for single transcript lines."""

from collections.abc import Mapping

from cargo_test_report.errors import GrammarMismatch
from cargo_test_report.models.report import Status, Test
from cargo_test_report.models.result import SuiteResult
from cargo_test_report.parser.primitives import (
    decode,
    digits,
    line_end,
    rest_of_line,
    skip_whitespace,
    spaces,
    tag,
    take_until,
    ws_keyword,
    ws_tag,
)

# Status lines cargo prints before the first test binary runs.
NOISE_TAGS: tuple[bytes, ...] = (
    b"Updating",
    b"Downloading",
    b"Downloaded",
    b"Installing",
    b"Compiling",
    b"Finished",
    b"Locking",
    b"Adding",
    b"Blocking",
)

OUTCOMES: Mapping[bytes, Status] = {
    b"ok": "pass",
    b"FAILED": "fail",
}

SUITE_TAGS: Mapping[bytes, None] = {
    b"Running": None,
    b"Doc-tests": None,
}

TEST_MARKER = b" ..."


def noise_line(buf: bytes, pos: int) -> tuple[None, int]:
    """Consume one build status line such as ``Compiling foo v0.1.0``."""
    start = skip_whitespace(buf, pos)
    for literal in NOISE_TAGS:
        if buf.startswith(literal, start):
            _, pos = rest_of_line(buf, ws_tag(buf, start, literal))
            return None, pos
    raise GrammarMismatch("build status line", start)


def outcome_line(buf: bytes, pos: int) -> tuple[Test, int]:
    """Parse ``test <name> ... ok|FAILED`` into a :class:`Test`.

    The name runs up to the first ``" ..."`` on the line, so a name that
    itself contains that marker is cut short.
    """
    pos = spaces(buf, tag(buf, pos, b"test"))
    marker = take_until(buf, pos, TEST_MARKER, end=line_end(buf, pos))
    name = decode(buf, pos, marker)
    status, pos = ws_keyword(buf, marker + len(TEST_MARKER), OUTCOMES)
    return Test(name=name, status=status), pos


def suite_count(buf: bytes, pos: int) -> tuple[None, int]:
    """Consume the ``running <N> tests`` line; the count is not checked."""
    _, pos = rest_of_line(buf, ws_tag(buf, pos, b"running"))
    return None, pos


def suite_header(buf: bytes, pos: int) -> tuple[str, int]:
    """Parse ``Running <path>`` or ``Doc-tests <crate>`` into a suite name."""
    _, pos = ws_keyword(buf, pos, SUITE_TAGS)
    return rest_of_line(buf, pos)


def suite_summary(buf: bytes, pos: int) -> tuple[SuiteResult, int]:
    """Parse the ``test result: ...`` line into aggregate counts."""
    pos = tag(buf, skip_whitespace(buf, pos), b"test result: ")
    state, pos = _outcome(buf, pos)
    pos = tag(buf, pos, b".")
    counts: dict[str, int] = {}
    for label in ("passed", "failed", "ignored", "measured"):
        counts[label], pos = digits(buf, pos)
        pos = tag(buf, pos, f"{label};".encode())
    _, pos = digits(buf, pos)
    pos = ws_tag(buf, pos, b"filtered out")
    pos = _finished_in(buf, pos)
    return (
        SuiteResult(
            state=state,
            total=counts["passed"] + counts["failed"] + counts["ignored"],
            **counts,
        ),
        pos,
    )


def _outcome(buf: bytes, pos: int) -> tuple[Status, int]:
    for literal, status in OUTCOMES.items():
        if buf.startswith(literal, pos):
            return status, pos + len(literal)
    raise GrammarMismatch("'ok' or 'FAILED'", pos)


def _finished_in(buf: bytes, pos: int) -> int:
    # Newer toolchains append "; finished in 0.01s" to the summary.
    if not buf.startswith(b"; finished in", pos):
        return pos
    return skip_whitespace(buf, line_end(buf, pos))
