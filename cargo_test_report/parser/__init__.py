"""Recognition grammar for cargo test transcripts."""

from cargo_test_report.parser.transcript import parse_transcript

__all__ = ["parse_transcript"]
