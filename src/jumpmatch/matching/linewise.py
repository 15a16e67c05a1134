"""Line-oriented matchers that do not search the line's content."""

from collections.abc import Callable
from dataclasses import dataclass

from jumpmatch.text import (
    cell_to_char_index,
    char_span_to_bytes,
    char_to_byte_offset,
    utf8_length,
)
from jumpmatch.types import ColumnRange, HintDirection, JumpContext, JumpOptions

_LINE_START = ColumnRange(start=0, end=1)


@dataclass(frozen=True, slots=True)
class LineStartMatcher:
    """Targets the first column of every line, blank or not."""

    oneshot: bool = True
    linewise: bool = True

    def match(
        self,
        line: str,
        jump_context: JumpContext,
        options: JumpOptions,
        *,
        start: int = 0,
    ) -> ColumnRange | None:
        """Return ``(0, 1)`` whatever the line holds."""
        if start > 0:
            return None
        return _LINE_START


@dataclass(frozen=True, slots=True)
class VerticalMatcher:
    """Targets the column at the window's left edge on every line.

    Jumping after the cursor targets line starts. Otherwise the window's
    leftmost visible cell is translated to a byte offset in the line; when the
    line does not reach that far, the last character is targeted instead.

    Attributes:
        tabstop: Tab stop width used to lay lines out in cells
        cell_to_char: Maps ``(line, cell, tabstop)`` to a character index
        char_to_byte: Maps ``(line, index)`` to a byte offset, -1 if out of range

    """

    tabstop: int = 8
    cell_to_char: Callable[[str, int, int], int] = cell_to_char_index
    char_to_byte: Callable[[str, int], int] = char_to_byte_offset
    oneshot: bool = True
    linewise: bool = True

    def match(
        self,
        line: str,
        jump_context: JumpContext,
        options: JumpOptions,
        *,
        start: int = 0,
    ) -> ColumnRange | None:
        """Find the viewport-aligned column of ``line``."""
        if start > 0:
            return None

        if jump_context.direction == HintDirection.AFTER_CURSOR or not line:
            return _LINE_START

        index = self.cell_to_char(
            line, jump_context.window_context.col_first, self.tabstop
        )
        offset = self.char_to_byte(line, index)
        if -1 < offset < utf8_length(line):
            width = utf8_length(line[index]) if 0 <= index < len(line) else 1
            return ColumnRange(start=offset, end=offset + width)

        # Line ends left of the viewport: clamp to its last character
        return char_span_to_bytes(line, len(line) - 1, len(line))
