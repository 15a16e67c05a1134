"""The matcher contract shared by every matcher kind."""

from dataclasses import dataclass
from typing import Protocol

from jumpmatch.types.context import JumpContext
from jumpmatch.types.options import JumpOptions


@dataclass(frozen=True, slots=True)
class ColumnRange:
    """Half-open column range within one line.

    Offsets are UTF-8 byte offsets local to the line, which is how the host
    editor addresses columns.

    Attributes:
        start: Start offset (inclusive)
        end: End offset (exclusive)

    """

    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of bytes covered by the range."""
        return self.end - self.start


class Matcher(Protocol):
    """Locates the next jump target within a single line.

    Implementations are immutable and hold no per-call state, so one instance
    can be shared across every line of a jump and across threads.

    Attributes:
        oneshot: At most one target per line; the caller stops scanning the
            line after the first hit.
        linewise: The target stands for the whole line rather than a span.

    """

    @property
    def oneshot(self) -> bool:
        """Whether the caller should stop after the first hit on a line."""
        ...

    @property
    def linewise(self) -> bool:
        """Whether the hit targets the whole line."""
        ...

    def match(
        self,
        line: str,
        jump_context: JumpContext,
        options: JumpOptions,
        *,
        start: int = 0,
    ) -> ColumnRange | None:
        """Find the first target in ``line`` at or after byte offset ``start``.

        Args:
            line: Text of the line, without its line terminator
            jump_context: Direction and viewport of the current jump
            options: Options of the current jump
            start: Byte offset to resume scanning from

        Returns:
            The target's column range, or None when the line has no target.

        """
        ...
