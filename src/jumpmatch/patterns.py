"""Pattern compiler.

Turns raw patterns into compiled ``re`` patterns. User patterns go through
case-folding negotiation and alternate-spelling merging; fixed patterns used by
the built-in matchers are only escaped when asked to.
"""

import logging
import re
from functools import cache, lru_cache

from jumpmatch.errors import PatternCompileError
from jumpmatch.mappings import DEFAULT_MAPPINGS, SpellingMappings
from jumpmatch.text import starts_with_uppercase
from jumpmatch.types import JumpOptions

logger = logging.getLogger(__name__)

# User patterns are unbounded over a session
USER_PATTERN_CACHE_SIZE = 256


def _compile(pattern: str, flags: int) -> re.Pattern[str]:
    """Compile ``pattern``, surfacing engine failures as PatternCompileError."""
    try:
        compiled = re.compile(pattern, flags)
    except re.error as e:
        raise PatternCompileError(pattern, str(e)) from e

    logger.debug(f"Compiled pattern {pattern!r} (flags={flags})")
    return compiled


@cache
def _compile_fixed(pattern: str) -> re.Pattern[str]:
    """Compile a built-in pattern; the set of these is fixed."""
    return _compile(pattern, 0)


@lru_cache(maxsize=USER_PATTERN_CACHE_SIZE)
def _compile_user(pattern: str, flags: int) -> re.Pattern[str]:
    """Compile a user pattern, keeping only the most recent ones."""
    return _compile(pattern, flags)


def escape_literal(text: str) -> str:
    """Escape every regex metacharacter in ``text``."""
    return re.escape(text)


def resolve_case_flags(raw: str, options: JumpOptions, smart_case: bool) -> int:
    """Resolve the case-folding flags for a user pattern.

    With smart-case on, the pattern is case-insensitive unless it starts with
    an uppercase letter and ``options.case_insensitive`` is not consulted.
    Otherwise the option decides.
    """
    if smart_case:
        return 0 if starts_with_uppercase(raw) else re.IGNORECASE
    if options.case_insensitive:
        return re.IGNORECASE
    return 0


def compile_pattern(
    raw: str,
    plain_search: bool,
    options: JumpOptions,
    *,
    smart_case: bool = False,
    mappings: SpellingMappings | None = None,
) -> re.Pattern[str]:
    """Compile a user search pattern.

    Args:
        raw: Pattern as typed by the user
        plain_search: Match ``raw`` literally instead of as a regex
        options: Options of the current jump
        smart_case: Host smart-case setting
        mappings: Alternate-spelling provider (defaults to the global registry)

    Returns:
        Compiled pattern.

    Raises:
        PatternCompileError: If the resulting pattern is rejected by the engine
        UnknownMappingError: If ``options`` selects an unregistered mapping

    """
    flags = resolve_case_flags(raw, options, smart_case)
    if mappings is None:
        mappings = DEFAULT_MAPPINGS
    fragment = mappings.alternate_spellings(raw, options)

    pattern = escape_literal(raw) if plain_search else raw
    if fragment:
        pattern = f"({pattern})|({fragment})"

    return _compile_user(pattern, flags)


def compile_raw(pattern: str, plain_search: bool = False) -> re.Pattern[str]:
    """Compile a fixed pattern without case or mapping negotiation.

    Raises:
        PatternCompileError: If the pattern is rejected by the engine

    """
    if plain_search:
        pattern = escape_literal(pattern)
    return _compile_fixed(pattern)
