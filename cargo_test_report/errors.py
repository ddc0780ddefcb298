"""Exceptions raised while turning a transcript into a report."""


class TranscriptError(Exception):
    """Base class for transcript recognition failures."""


class TranscriptDecodeError(TranscriptError):
    """Raised when a captured region of the transcript is not valid UTF-8."""

    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(f"Invalid UTF-8 at byte {offset}: {reason}")
        self.offset = offset


class GrammarMismatch(TranscriptError):
    """Raised when a required token is absent at the expected position."""

    def __init__(self, expected: str, offset: int) -> None:
        super().__init__(f"Expected {expected} at byte {offset}")
        self.expected = expected
        self.offset = offset


class NoContentError(TranscriptError):
    """Raised when neither test suites nor a compile error were found."""


class MalformedTranscriptError(TranscriptError):
    """Raised when recognized content stops matching the grammar part way."""

    def __init__(self, mismatch: GrammarMismatch) -> None:
        super().__init__(f"Malformed transcript: {mismatch}")
        self.expected = mismatch.expected
        self.offset = mismatch.offset
