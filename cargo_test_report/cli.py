"""CLI entry point turning cargo test output into a test report."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from cargo_test_report.errors import TranscriptError
from cargo_test_report.models.report import Report
from cargo_test_report.parser import parse_transcript
from cargo_test_report.runner import read_transcript, run_cargo_test
from cargo_test_report.writers.loading import load_writer_manifest

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_UNPARSEABLE = 2

STATUS_SYMBOLS = {
    "pass": "✅",
    "fail": "❌",
}


def log_report_summary(log: logging.Logger, report: Report) -> None:
    """Log a formatted summary of suite results and failing tests."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for suite in report:
        symbol = STATUS_SYMBOLS.get(suite.state, "?")
        log.info(
            "%s %s: %d passed, %d failed, %d ignored",
            symbol,
            suite.name,
            suite.passed,
            suite.failed,
            suite.ignored,
        )
        for test in suite.tests:
            if test.status == "fail":
                log.info("  Failed: %s", test.name)
                if test.error:
                    log.info("  Message: %s", test.error)


def parse_cargo_args(cargo_args: Sequence[str]) -> Sequence[str]:
    """Drop the ``--`` separating CLI options from cargo arguments."""
    if cargo_args and cargo_args[0] == "--":
        return tuple(cargo_args[1:])
    return tuple(cargo_args)


async def run(
    format_key: str,
    format_config_json: str,
    input_path: Path | None,
    output_path: Path | None,
    cwd: Path,
    cargo_bin: str = "cargo",
    cargo_args: Sequence[str] = (),
) -> int:
    """Produce a report and return exit code."""
    log = logging.getLogger("cargo_test_report")

    log.info("Loading writer: %s", format_key)
    manifest = load_writer_manifest(format_key)

    config_dict = json.loads(format_config_json)
    config = manifest.config_cls(**config_dict)

    cargo_returncode = 0
    if input_path is not None:
        log.info("Reading transcript from %s", input_path)
        transcript = read_transcript(input_path)
    else:
        cargo_run = await run_cargo_test(cwd, cargo_args, cargo_bin)
        transcript = cargo_run.transcript
        cargo_returncode = cargo_run.returncode

    try:
        report = parse_transcript(transcript)
    except TranscriptError as e:
        log.error("Cannot parse cargo test output: %s", e)
        return EXIT_UNPARSEABLE

    log_report_summary(log, report)

    output = manifest.writer_factory(config).render(report)
    if output_path is not None:
        output_path.write_text(output, encoding="utf-8")
        log.info("Report written to %s", output_path)
    else:
        print(output)

    if any(suite.state == "fail" for suite in report):
        return EXIT_FAILED
    if cargo_returncode != 0:
        log.warning(
            "cargo test exited with code %d but no failing suite was parsed",
            cargo_returncode,
        )
        return EXIT_FAILED
    return EXIT_PASSED


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run cargo test and convert its output into a test report"
    )
    parser.add_argument(
        "--format",
        default="junit",
        help="Report format key (junit, json)",
    )
    parser.add_argument(
        "--format-config",
        default="{}",
        help="JSON configuration for the report writer",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read a captured transcript from this file ('-' for stdin) "
        "instead of running cargo",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--cargo",
        default="cargo",
        help="Cargo executable",
    )
    parser.add_argument(
        "--cwd",
        type=Path,
        default=Path.cwd(),
        help="Directory to run cargo test in",
    )
    parser.add_argument(
        "cargo_args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to cargo test, after '--'",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            format_key=args.format,
            format_config_json=args.format_config,
            input_path=args.input,
            output_path=args.output,
            cwd=args.cwd,
            cargo_bin=args.cargo,
            cargo_args=parse_cargo_args(args.cargo_args),
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
