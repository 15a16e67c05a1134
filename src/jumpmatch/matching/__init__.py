"""Matcher implementations and the matcher catalogue.

This package provides:
- RegexMatcher: Leftmost hit of a compiled pattern
- LineStartMatcher: First column of every line
- VerticalMatcher: Column at the window's left edge
- MatcherKind / build_matcher: Closed catalogue of jump modes
"""

from jumpmatch.matching.catalogue import (
    MatcherKind,
    build_matcher,
    by_anywhere,
    by_camel_case,
    by_line_start,
    by_line_start_skip_whitespace,
    by_pattern,
    by_vertical,
    by_word_start,
)
from jumpmatch.matching.linewise import LineStartMatcher, VerticalMatcher
from jumpmatch.matching.regex import RegexMatcher

__all__ = [
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
