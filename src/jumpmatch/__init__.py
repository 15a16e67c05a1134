"""jumpmatch - per-line jump target matchers for editor motion plugins."""

__version__ = "0.1.0"

from jumpmatch.configuration import MatcherSettings
from jumpmatch.errors import JumpMatchError, PatternCompileError, UnknownMappingError
from jumpmatch.mappings import MappingRegistry, SpellingMappings
from jumpmatch.matching import (
    LineStartMatcher,
    MatcherKind,
    RegexMatcher,
    VerticalMatcher,
    build_matcher,
    by_anywhere,
    by_camel_case,
    by_line_start,
    by_line_start_skip_whitespace,
    by_pattern,
    by_vertical,
    by_word_start,
)
from jumpmatch.patterns import compile_pattern, compile_raw
from jumpmatch.types import (
    ColumnRange,
    HintDirection,
    JumpContext,
    JumpOptions,
    Matcher,
    WindowContext,
)

__all__ = [
    "__version__",
    # Configuration
    "MatcherSettings",
    # Errors
    "JumpMatchError",
    "PatternCompileError",
    "UnknownMappingError",
    # Mappings
    "MappingRegistry",
    "SpellingMappings",
    # Compiler
    "compile_pattern",
    "compile_raw",
    # Types
    "ColumnRange",
    "HintDirection",
    "JumpContext",
    "JumpOptions",
    "Matcher",
    "WindowContext",
    # Matchers
    "LineStartMatcher",
    "MatcherKind",
    "RegexMatcher",
    "VerticalMatcher",
    "build_matcher",
    "by_anywhere",
    "by_camel_case",
    "by_line_start",
    "by_line_start_skip_whitespace",
    "by_pattern",
    "by_vertical",
    "by_word_start",
]
