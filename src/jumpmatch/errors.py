"""Error classes for jumpmatch.

This module provides:
- JumpMatchError: Base exception class for all library errors
- PatternCompileError: A pattern string was rejected by the regex engine
- UnknownMappingError: A spelling mapping table name is not registered
"""


class JumpMatchError(Exception):
    """Base exception for all jumpmatch errors."""

    pass


class PatternCompileError(JumpMatchError):
    """Raised when a pattern cannot be compiled by the regex engine.

    Attributes:
        pattern: The pattern string handed to the engine

    """

    def __init__(self, pattern: str, reason: str = "") -> None:
        """Initialise with the offending pattern and the engine's reason."""
        self.pattern = pattern
        message = f"Cannot compile pattern {pattern!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownMappingError(JumpMatchError):
    """Raised when a spelling mapping table is requested by an unknown name."""

    pass
