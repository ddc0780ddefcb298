"""Tests for parsing complete cargo test transcripts."""

import logging
from collections.abc import Callable

import pytest

from cargo_test_report.errors import (
    MalformedTranscriptError,
    NoContentError,
    TranscriptDecodeError,
)
from cargo_test_report.models.report import Suite, Test
from cargo_test_report.parser import parse_transcript


def _empty_suite(name: str) -> Suite:
    return Suite(
        name=name,
        state="pass",
        passed=0,
        failed=0,
        ignored=0,
        measured=0,
        total=0,
        tests=[],
    )


def test_minimal_pass() -> None:
    """Parses a single passing suite without preamble."""
    transcript = (
        b"Running x\n"
        b"running 1 tests\n"
        b"test a ... ok\n"
        b"test result: ok. 1 passed; 0 failed; 0 ignored; 0 measured; "
        b"0 filtered out\n"
    )

    assert parse_transcript(transcript) == [
        Suite(
            name="x",
            state="pass",
            passed=1,
            failed=0,
            ignored=0,
            measured=0,
            total=1,
            tests=[Test(name="a", status="pass", error=None)],
        )
    ]


def test_successful_output(load_transcript: Callable[[str], bytes]) -> None:
    """Skips the finished banner and parses the suite."""
    report = parse_transcript(load_transcript("successful_run"))

    assert report == [
        Suite(
            name="target/debug/cargo_test_junit-83252957c74e106d",
            state="pass",
            passed=2,
            failed=0,
            ignored=0,
            measured=0,
            total=2,
            tests=[
                Test(name="tests::it_should_match_failed", status="pass"),
                Test(name="tests::it_should_parse_first_line", status="pass"),
            ],
        )
    ]


def test_fail_run(load_transcript: Callable[[str], bytes]) -> None:
    """Correlates failure messages and ignores the trailing error line."""
    report = parse_transcript(load_transcript("fail_run"))

    assert report == [
        _empty_suite("target/debug/deps/docker_command-be014e20fbd07382"),
        Suite(
            name="target/debug/integration_test-d4fc68dd5824cbb9",
            state="fail",
            passed=1,
            failed=2,
            ignored=0,
            measured=0,
            total=3,
            tests=[
                Test(
                    name="fail",
                    status="fail",
                    error=(
                        "thread 'fail' panicked at 'assertion failed: "
                        "`(left == right)` (left: `1`, right: `2`)', "
                        "tests/integration_test.rs:16"
                    ),
                ),
                Test(
                    name="fail2",
                    status="fail",
                    error=(
                        "thread 'fail2' panicked at 'assertion failed: "
                        "`(left == right)` (left: `3`, right: `2`)', "
                        "tests/integration_test.rs:22"
                    ),
                ),
                Test(name="it_runs_a_command", status="pass", error=None),
            ],
        ),
    ]


def test_success_run_with_doc_tests(load_transcript: Callable[[str], bytes]) -> None:
    """Parses consecutive suites including doc tests, in order."""
    report = parse_transcript(load_transcript("success_run"))

    assert report == [
        _empty_suite("target/debug/deps/foo-5a7be5d1b9c8e0f6"),
        Suite(
            name="target/debug/integration_test-283604d1063344ba",
            state="pass",
            passed=1,
            failed=0,
            ignored=0,
            measured=0,
            total=1,
            tests=[Test(name="it_runs_a_command", status="pass")],
        ),
        _empty_suite("foo"),
    ]


def test_full_run_skips_preamble(load_transcript: Callable[[str], bytes]) -> None:
    """Dependency resolution and build lines do not affect the report."""
    report = parse_transcript(load_transcript("full_run"))

    assert [suite.name for suite in report] == [
        "target/debug/deps/libzfs_sys-a797c24cd4b4a7ea",
        "libzfs-sys",
    ]
    assert [test.name for test in report[0].tests] == [
        "bindgen_test_layout_zpool_handle",
        "tests::open_close_handle",
        "tests::pool_search_import_list_export",
    ]
    assert report[0].total == 3


def test_compile_fail(load_transcript: Callable[[str], bytes]) -> None:
    """A build error becomes one failed suite with the remaining output."""
    transcript = load_transcript("compile_fail")

    report = parse_transcript(transcript)

    expected_error = transcript.split(b"error[E0369]: ", 1)[1].decode()
    assert report == [
        Suite(
            name="unknown",
            state="fail",
            passed=0,
            failed=1,
            ignored=0,
            measured=0,
            total=1,
            tests=[Test(name="compile failed", status="fail", error=expected_error)],
        )
    ]
    assert expected_error.endswith("run the command again with --verbose.\n")


def test_modern_toolchain_output(load_transcript: Callable[[str], bytes]) -> None:
    """Handles newer status lines, duration trailers and multi-line panics."""
    report = parse_transcript(load_transcript("modern_run"))

    assert len(report) == 2
    unit, doc = report
    assert unit.name == (
        "unittests src/lib.rs (target/debug/deps/demo-1f2e3d4c5b6a7980)"
    )
    assert (unit.passed, unit.failed, unit.total) == (2, 1, 3)
    assert unit.tests[1] == Test(
        name="tests::divides",
        status="fail",
        error="thread 'tests::divides' panicked at src/lib.rs:20:9:",
    )
    assert doc.name == "demo"
    assert doc.tests == [Test(name="src/lib.rs - add (line 3)", status="pass")]


def test_windows_line_endings() -> None:
    """CRLF terminated lines are accepted."""
    transcript = (
        b"   Compiling x v0.1.0\r\n"
        b"     Running x\r\n"
        b"\r\n"
        b"running 1 test\r\n"
        b"test a ... ok\r\n"
        b"\r\n"
        b"test result: ok. 1 passed; 0 failed; 0 ignored; 0 measured; "
        b"0 filtered out\r\n"
    )

    report = parse_transcript(transcript)

    assert report[0].name == "x"
    assert report[0].tests == [Test(name="a", status="pass")]


def test_totals_match_counts(load_transcript: Callable[[str], bytes]) -> None:
    """Every suite total equals passed plus failed plus ignored."""
    for name in ("fail_run", "success_run", "full_run", "modern_run"):
        for suite in parse_transcript(load_transcript(name)):
            assert suite.total == suite.passed + suite.failed + suite.ignored


def test_noise_between_suites_is_not_skipped() -> None:
    """Status lines are only skipped before the first suite."""
    summary = (
        b"test result: ok. 0 passed; 0 failed; 0 ignored; 0 measured; "
        b"0 filtered out\n"
    )
    transcript = (
        b"Running a\nrunning 0 tests\n\n" + summary
        + b"   Compiling late v0.1.0\n"
        + b"Running b\nrunning 0 tests\n\n" + summary
    )

    report = parse_transcript(transcript)

    assert [suite.name for suite in report] == ["a"]


def test_logs_ignored_trailing_output(
    load_transcript: Callable[[str], bytes], caplog: pytest.LogCaptureFixture
) -> None:
    """Output after the last suite is reported at debug level."""
    with caplog.at_level(logging.DEBUG, logger="cargo_test_report"):
        parse_transcript(load_transcript("fail_run"))

    assert "after the last suite" in caplog.text


@pytest.mark.parametrize(
    "transcript",
    [
        b"",
        b"   Compiling foo v0.1.0\n    Finished dev target(s) in 0.1 secs\n",
        b"warning: unused variable `x`\n",
    ],
)
def test_no_content(transcript: bytes) -> None:
    """Fails when neither suites nor a compile error are present."""
    with pytest.raises(NoContentError):
        parse_transcript(transcript)


@pytest.mark.parametrize(
    "transcript",
    [
        b"     Running target/debug/foo\n\nrunning 1 test\ntest a ... ok\n",
        b"     Running target/debug/foo",
        b"error[E0001 missing colon\n",
    ],
)
def test_malformed(transcript: bytes) -> None:
    """Fails with the deepest mismatch when content stops matching."""
    with pytest.raises(MalformedTranscriptError) as exc_info:
        parse_transcript(transcript)

    assert exc_info.value.offset > 0


def test_invalid_utf8_in_test_name() -> None:
    """A non UTF-8 test name is a hard failure."""
    transcript = (
        b"Running x\nrunning 1 test\ntest bad\xff ... ok\n\n"
        b"test result: ok. 1 passed; 0 failed; 0 ignored; 0 measured; "
        b"0 filtered out\n"
    )

    with pytest.raises(TranscriptDecodeError):
        parse_transcript(transcript)
