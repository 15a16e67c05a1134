"""Jump context types consumed by matchers."""

from dataclasses import dataclass
from enum import Enum


class HintDirection(Enum):
    """Side of the cursor a jump is restricted to.

    BEFORE_CURSOR: Only targets before the cursor position.

    AFTER_CURSOR: Only targets after the cursor position.
    """

    BEFORE_CURSOR = "before_cursor"
    AFTER_CURSOR = "after_cursor"


@dataclass(frozen=True, slots=True)
class WindowContext:
    """Visible column range of the window a line is displayed in.

    Attributes:
        col_first: Leftmost visible display cell (0-based)
        col_last: Rightmost visible display cell (0-based, inclusive)

    """

    col_first: int = 0
    col_last: int = 0


@dataclass(frozen=True, slots=True)
class JumpContext:
    """Per-jump context handed to every match call.

    Attributes:
        direction: Side of the cursor being searched, or None for both sides
        window_context: Viewport of the window being scanned

    """

    direction: HintDirection | None = None
    window_context: WindowContext = WindowContext()
