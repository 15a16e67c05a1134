"""Matcher catalogue.

One constructor per jump mode, plus ``build_matcher`` dispatching over the
closed ``MatcherKind`` enumeration.
"""

from enum import Enum
from typing import assert_never

from jumpmatch.configuration import MatcherSettings
from jumpmatch.mappings import SpellingMappings
from jumpmatch.matching.linewise import LineStartMatcher, VerticalMatcher
from jumpmatch.matching.regex import RegexMatcher
from jumpmatch.patterns import compile_pattern, compile_raw
from jumpmatch.types import JumpOptions, Matcher

# Keyword characters: letters, digits and underscore
WORD_PATTERN = r"\w+"

NON_BLANK_PATTERN = r"\S"

# Token alternatives, most specific first; the engine keeps the first
# alternative that matches at the leftmost position.
CAMEL_CASE_ALTERNATIVES: tuple[str, ...] = (
    r"[A-Z][a-z]+",  # CamelWord
    r"[A-Z]+(?=[A-Z][a-z])",  # Acronym before a CamelWord
    r"[A-Z]+",  # AllUpper
    r"[a-z]+",  # AllLower
    r"#[0-9A-Fa-f]+\b",  # colour
    r"\b0[xX][0-9A-Fa-f]+\b",
    r"\b0[oO][0-7]+\b",
    r"\b0[bB][01]+\b",
    r"[0-9]+",
    r"~",
    r"!",
    r"@",
    r"#",
    r"\$",
)

CAMEL_CASE_PATTERN = "(?:{})".format(
    "|".join(f"(?:{alt})" for alt in CAMEL_CASE_ALTERNATIVES)
)

ANYWHERE_PATTERN = (
    r"(?:(?<!\w)\w|^$)"  # word start or empty line
    r"|(?:\w(?!\w)|^$)"  # word end or empty line
    r"|(?<=[a-z])[A-Z]"  # lower to upper transition
    r"|(?<=_)."
    r"|(?<=#)."
)


class MatcherKind(Enum):
    """Jump modes a matcher can be built for.

    PATTERN: User-typed pattern, with case folding and spelling mappings.

    WORD_START: Start of every word.

    CAMEL_CASE: Every camel-case, acronym or numeric-literal token.

    LINE_START: First column of every line.

    LINE_START_SKIP_WHITESPACE: First non-blank character of every line.

    VERTICAL: Column at the window's left edge on every line.

    ANYWHERE: Any word boundary, case transition or character after ``_``/``#``.
    """

    PATTERN = "pattern"
    WORD_START = "word_start"
    CAMEL_CASE = "camel_case"
    LINE_START = "line_start"
    LINE_START_SKIP_WHITESPACE = "line_start_skip_whitespace"
    VERTICAL = "vertical"
    ANYWHERE = "anywhere"


def by_pattern(
    pattern: str,
    options: JumpOptions,
    *,
    plain_search: bool = False,
    settings: MatcherSettings | None = None,
    mappings: SpellingMappings | None = None,
) -> RegexMatcher:
    """Matcher for a user search pattern.

    Raises:
        PatternCompileError: If the pattern is not a valid regex
        UnknownMappingError: If ``options`` selects an unregistered mapping

    """
    settings = settings or MatcherSettings()
    compiled = compile_pattern(
        pattern,
        plain_search,
        options,
        smart_case=settings.smart_case,
        mappings=mappings,
    )
    return RegexMatcher(pattern=compiled)


def by_word_start() -> RegexMatcher:
    """Matcher for the first run of keyword characters."""
    return RegexMatcher(pattern=compile_raw(WORD_PATTERN))


def by_camel_case() -> RegexMatcher:
    """Matcher for camel-case words, acronyms and numeric literals."""
    return RegexMatcher(pattern=compile_raw(CAMEL_CASE_PATTERN))


def by_line_start() -> LineStartMatcher:
    """Matcher for the first column of each line."""
    return LineStartMatcher()


def by_line_start_skip_whitespace() -> RegexMatcher:
    """Matcher for the first non-blank character of each line."""
    return RegexMatcher(
        pattern=compile_raw(NON_BLANK_PATTERN), oneshot=True, linewise=True
    )


def by_vertical(settings: MatcherSettings | None = None) -> VerticalMatcher:
    """Matcher for the window's left-edge column on each line."""
    settings = settings or MatcherSettings()
    return VerticalMatcher(tabstop=settings.tabstop)


def by_anywhere() -> RegexMatcher:
    """Matcher for any meaningful boundary within a line."""
    return RegexMatcher(pattern=compile_raw(ANYWHERE_PATTERN))


def build_matcher(
    kind: MatcherKind,
    *,
    pattern: str | None = None,
    options: JumpOptions | None = None,
    plain_search: bool = False,
    settings: MatcherSettings | None = None,
    mappings: SpellingMappings | None = None,
) -> Matcher:
    """Build the matcher for a jump mode.

    Args:
        kind: Jump mode
        pattern: User pattern (PATTERN only)
        options: Jump options (PATTERN only, defaults to JumpOptions())
        plain_search: Match ``pattern`` literally (PATTERN only)
        settings: Host settings (PATTERN and VERTICAL)
        mappings: Alternate-spelling provider (PATTERN only)

    Returns:
        Matcher for ``kind``.

    Raises:
        ValueError: If ``kind`` is PATTERN and no pattern is given
        PatternCompileError: If the pattern is not a valid regex

    """
    match kind:
        case MatcherKind.PATTERN:
            if pattern is None:
                raise ValueError("A pattern is required for MatcherKind.PATTERN")
            return by_pattern(
                pattern,
                options or JumpOptions(),
                plain_search=plain_search,
                settings=settings,
                mappings=mappings,
            )
        case MatcherKind.WORD_START:
            return by_word_start()
        case MatcherKind.CAMEL_CASE:
            return by_camel_case()
        case MatcherKind.LINE_START:
            return by_line_start()
        case MatcherKind.LINE_START_SKIP_WHITESPACE:
            return by_line_start_skip_whitespace()
        case MatcherKind.VERTICAL:
            return by_vertical(settings)
        case MatcherKind.ANYWHERE:
            return by_anywhere()
        case _:
            assert_never(kind)
