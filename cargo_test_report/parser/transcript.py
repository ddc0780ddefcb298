"""Top-level driver turning a cargo test transcript into a report."""

import logging

from cargo_test_report.errors import (
    GrammarMismatch,
    MalformedTranscriptError,
    NoContentError,
)
from cargo_test_report.models.report import Report
from cargo_test_report.parser.compile_error import compile_error
from cargo_test_report.parser.lines import noise_line
from cargo_test_report.parser.primitives import many, one_or_more, skip_whitespace
from cargo_test_report.parser.suite import suite

log = logging.getLogger(__name__)


def parse_transcript(transcript: bytes) -> Report:
    """Parse the captured output of one ``cargo test`` run.

    Build status lines before the first suite are skipped. The transcript
    must then hold one or more suites, or failing that a compile error,
    which is reported as a single failed suite. Anything after the last
    suite is ignored.

    Args:
        transcript: Complete console output, stdout and stderr combined

    Returns:
        Suites in the order they appear in the transcript

    Raises:
        TranscriptDecodeError: If a captured region is not valid UTF-8
        NoContentError: If neither suites nor a compile error were found
        MalformedTranscriptError: If content matched the grammar only part way

    """
    _, pos = many(noise_line, transcript, 0)
    start = skip_whitespace(transcript, pos)

    try:
        suites, end = one_or_more(suite, transcript, pos)
    except GrammarMismatch as suites_mismatch:
        try:
            fallback, _ = compile_error(transcript, pos)
        except GrammarMismatch as error_mismatch:
            deepest = max(suites_mismatch, error_mismatch, key=lambda m: m.offset)
            if deepest.offset <= start:
                raise NoContentError(
                    "No test suites or compile error found in transcript"
                ) from None
            raise MalformedTranscriptError(deepest) from deepest

        log.debug("No test suites found, reporting compile error")
        return [fallback]

    if (trailing := len(transcript) - skip_whitespace(transcript, end)) > 0:
        log.debug("Ignoring %d byte(s) after the last suite", trailing)

    log.debug("Parsed %d suite(s)", len(suites))
    return suites
