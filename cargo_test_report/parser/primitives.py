"""Byte-level recognizers shared by the transcript grammar.

Every recognizer takes the transcript and a start offset and returns the
offset just past what it consumed, or a ``(value, offset)`` pair when it
produces a value. A recognizer that does not match raises
:class:`~cargo_test_report.errors.GrammarMismatch`; combinators catch that
exception to backtrack. Decode failures are never caught here.
"""

from collections.abc import Callable, Mapping

from cargo_test_report.errors import GrammarMismatch, TranscriptDecodeError

type Recognizer[T] = Callable[[bytes, int], tuple[T, int]]

WHITESPACE = b" \t\r\n"
SPACES = b" \t"
DIGITS = b"0123456789"


def skip_whitespace(buf: bytes, pos: int) -> int:
    """Skip spaces, tabs and line terminators."""
    while pos < len(buf) and buf[pos] in WHITESPACE:
        pos += 1
    return pos


def spaces(buf: bytes, pos: int) -> int:
    """Consume one or more spaces or tabs."""
    start = pos
    while pos < len(buf) and buf[pos] in SPACES:
        pos += 1
    if pos == start:
        raise GrammarMismatch("whitespace", start)
    return pos


def tag(buf: bytes, pos: int, literal: bytes) -> int:
    """Consume an exact literal."""
    if not buf.startswith(literal, pos):
        raise GrammarMismatch(repr(literal.decode()), pos)
    return pos + len(literal)


def ws_tag(buf: bytes, pos: int, literal: bytes) -> int:
    """Consume a literal surrounded by optional whitespace."""
    pos = tag(buf, skip_whitespace(buf, pos), literal)
    return skip_whitespace(buf, pos)


def ws_keyword[T](
    buf: bytes, pos: int, keywords: Mapping[bytes, T]
) -> tuple[T, int]:
    """Consume the first matching keyword and return its mapped value."""
    pos = skip_whitespace(buf, pos)
    for literal, value in keywords.items():
        if buf.startswith(literal, pos):
            return value, skip_whitespace(buf, pos + len(literal))
    expected = " or ".join(repr(k.decode()) for k in keywords)
    raise GrammarMismatch(expected, pos)


def decode(buf: bytes, start: int, end: int) -> str:
    """Decode a captured region as UTF-8."""
    try:
        return buf[start:end].decode("utf-8")
    except UnicodeDecodeError as e:
        raise TranscriptDecodeError(start + e.start, e.reason) from e


def line_ending(buf: bytes, pos: int) -> int:
    """Consume a single ``\\n`` or ``\\r\\n``."""
    if buf.startswith(b"\n", pos):
        return pos + 1
    if buf.startswith(b"\r\n", pos):
        return pos + 2
    raise GrammarMismatch("line ending", pos)


def line_end(buf: bytes, pos: int) -> int:
    """Return the offset of the next line terminator, or the buffer length.

    The search never reads past the next ``\\n``.
    """
    newline = buf.find(b"\n", pos)
    end = len(buf) if newline == -1 else newline
    carriage = buf.find(b"\r", pos, end)
    return end if carriage == -1 else carriage


def rest_of_line(buf: bytes, pos: int) -> tuple[str, int]:
    """Capture everything up to a line terminator, which must follow."""
    end = line_end(buf, pos)
    return decode(buf, pos, end), line_ending(buf, end)


def digits(buf: bytes, pos: int) -> tuple[int, int]:
    """Consume a decimal integer with optional surrounding whitespace."""
    start = skip_whitespace(buf, pos)
    end = start
    while end < len(buf) and buf[end] in DIGITS:
        end += 1
    if end == start:
        raise GrammarMismatch("integer", start)
    return int(buf[start:end]), skip_whitespace(buf, end)


def take_until(
    buf: bytes, pos: int, literal: bytes, end: int | None = None
) -> int:
    """Return the offset of the next ``literal``, which must be present."""
    found = buf.find(literal, pos, len(buf) if end is None else end)
    if found == -1:
        raise GrammarMismatch(repr(literal.decode()), pos)
    return found


def many[T](
    recognizer: Recognizer[T], buf: bytes, pos: int
) -> tuple[list[T], int]:
    """Apply a recognizer until it stops matching or stops consuming."""
    values: list[T] = []
    while True:
        try:
            value, new_pos = recognizer(buf, pos)
        except GrammarMismatch:
            return values, pos
        if new_pos == pos:
            return values, pos
        values.append(value)
        pos = new_pos


def one_or_more[T](
    recognizer: Recognizer[T], buf: bytes, pos: int
) -> tuple[list[T], int]:
    """Like :func:`many`, but the first application must match."""
    first, pos = recognizer(buf, pos)
    rest, pos = many(recognizer, buf, pos)
    return [first, *rest], pos


def optional[T](
    recognizer: Recognizer[T], buf: bytes, pos: int
) -> tuple[T | None, int]:
    """Apply a recognizer, yielding ``None`` without consuming on mismatch."""
    try:
        return recognizer(buf, pos)
    except GrammarMismatch:
        return None, pos
