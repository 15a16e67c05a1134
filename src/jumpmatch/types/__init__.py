"""Types for matcher construction and matching.

Types are organised into submodules by concern:

- context: Jump direction and window viewport
- options: Per-jump options
- matcher: Column ranges and the matcher protocol
"""

from jumpmatch.types.context import HintDirection, JumpContext, WindowContext
from jumpmatch.types.matcher import ColumnRange, Matcher
from jumpmatch.types.options import JumpOptions

__all__ = [
    # Context
    "HintDirection",
    "JumpContext",
    "WindowContext",
    # Options
    "JumpOptions",
    # Matcher contract
    "ColumnRange",
    "Matcher",
]
