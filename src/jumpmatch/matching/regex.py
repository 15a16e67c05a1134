"""Regex-backed matcher."""

import re
from dataclasses import dataclass

from jumpmatch.text import (
    byte_to_char_index,
    char_span_to_bytes,
    char_to_byte_offset,
    utf8_length,
)
from jumpmatch.types import ColumnRange, JumpContext, JumpOptions


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Matches the leftmost hit of a compiled pattern.

    Zero-width hits (``^$``, look-arounds on their own) are widened to the
    character at the hit position so callers always receive a target cell. A
    zero-width hit at the end of a non-empty line covers the last character;
    on an empty line it is reported as ``(0, 1)``.

    Attributes:
        pattern: Compiled pattern searched in each line
        oneshot: Caller stops scanning a line after the first hit
        linewise: Hit stands for the whole line

    """

    pattern: re.Pattern[str]
    oneshot: bool = False
    linewise: bool = False

    def match(
        self,
        line: str,
        jump_context: JumpContext,
        options: JumpOptions,
        *,
        start: int = 0,
    ) -> ColumnRange | None:
        """Find the leftmost hit at or after byte offset ``start``.

        An offset inside a multi-byte character resumes at the next character.
        A hit never begins before ``start``, so a caller advancing ``start``
        past each hit always terminates.
        """
        if start > utf8_length(line):
            return None

        pos = byte_to_char_index(line, start)
        if char_to_byte_offset(line, pos) < start:
            pos += 1
        found = self.pattern.search(line, pos)
        if found is None:
            return None

        begin, end = found.span()
        if begin == end:
            if not line:
                return ColumnRange(start=0, end=1)
            if begin == len(line):
                begin -= 1
                if begin < pos:
                    return None
            end = begin + 1

        return char_span_to_bytes(line, begin, end)
