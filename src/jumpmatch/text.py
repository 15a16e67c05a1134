"""Text-boundary primitives and column conversions.

Python strings index code points, while the editor addresses columns in UTF-8
bytes and the viewport in display cells. The helpers here convert between the
three so matchers can work on ``str`` and still report byte ranges.
"""

import unicodedata

from jumpmatch.types import ColumnRange

_WIDE = ("W", "F")


def starts_with_uppercase(text: str) -> bool:
    """Check whether the first character of ``text`` is an uppercase letter.

    A leading blank is never uppercase, and neither is a digit or punctuation,
    even though upper-casing either leaves it unchanged.
    """
    if not text:
        return False

    first = text[0]
    if first.isspace():
        return False

    return first.isupper()


def utf8_length(text: str) -> int:
    """Length of ``text`` in UTF-8 bytes."""
    if text.isascii():
        return len(text)
    return len(text.encode("utf-8", "surrogatepass"))


def char_display_width(char: str, column: int = 0, tabstop: int = 8) -> int:
    """Number of display cells ``char`` occupies when drawn at ``column``."""
    if char == "\t":
        return tabstop - (column % tabstop)
    if unicodedata.category(char) == "Cc":
        # Drawn as ^X
        return 2
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in _WIDE:
        return 2
    return 1


def cell_to_char_index(line: str, cell: int, tabstop: int = 8) -> int:
    """Map a display cell to the index of the character drawn there.

    Cells past the end of the line map to virtual characters after the last
    one, one per cell, so callers can detect that the cell is off the line.

    Args:
        line: Line text
        cell: 0-based display cell
        tabstop: Tab stop width used to lay the line out

    Returns:
        Character index covering ``cell``.

    """
    if cell <= 0:
        return 0

    column = 0
    for index, char in enumerate(line):
        column += char_display_width(char, column, tabstop)
        if column > cell:
            return index

    return len(line) + (cell - column)


def char_to_byte_offset(line: str, index: int) -> int:
    """Byte offset of the character at ``index``, or -1 if out of range.

    ``index == len(line)`` is in range and gives the byte length of the line.
    """
    if index < 0 or index > len(line):
        return -1
    return utf8_length(line[:index])


def byte_to_char_index(line: str, offset: int) -> int:
    """Index of the character containing byte ``offset``, clamped to the line."""
    if offset <= 0:
        return 0
    if line.isascii():
        return min(offset, len(line))

    consumed = 0
    for index, char in enumerate(line):
        consumed += utf8_length(char)
        if consumed > offset:
            return index
    return len(line)


def char_span_to_bytes(line: str, start: int, end: int) -> ColumnRange:
    """Convert a character span of ``line`` to a byte column range."""
    if line.isascii():
        return ColumnRange(start=start, end=end)

    byte_start = utf8_length(line[:start])
    return ColumnRange(start=byte_start, end=byte_start + utf8_length(line[start:end]))
