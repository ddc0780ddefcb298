"""Fallback for transcripts where the build failed before any test ran."""

from cargo_test_report.models.report import Suite, Test
from cargo_test_report.parser.primitives import decode, ws_tag

UNKNOWN_SUITE = "unknown"
COMPILE_FAILED_TEST = "compile failed"


def compile_error(buf: bytes, pos: int) -> tuple[Suite, int]:
    """Turn an ``error[E....]: ...`` block into a single failed suite.

    Everything after the colon, up to the end of the transcript, becomes
    the error text, including any ``error: aborting ...`` trailer lines.
    """
    pos = ws_tag(buf, pos, b"error")
    if buf.startswith(b"[", pos) and (close := buf.find(b"]", pos)) != -1:
        pos = close + 1
    pos = ws_tag(buf, pos, b":")
    message = decode(buf, pos, len(buf))

    return (
        Suite(
            name=UNKNOWN_SUITE,
            state="fail",
            passed=0,
            failed=1,
            ignored=0,
            measured=0,
            total=1,
            tests=[Test(name=COMPILE_FAILED_TEST, status="fail", error=message)],
        ),
        len(buf),
    )
