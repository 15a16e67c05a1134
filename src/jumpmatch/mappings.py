"""Alternate-spelling mappings merged into user search patterns.

A mapping table relates a character to other characters the user should be
able to reach by typing it, e.g. ``e`` to ``éèêë``. Tables are registered by
name in ``MappingRegistry`` and selected per jump through
``JumpOptions.match_mappings``.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Mapping
from typing import ClassVar, Protocol, TypedDict

from jumpmatch.errors import UnknownMappingError
from jumpmatch.types import JumpOptions

logger = logging.getLogger(__name__)

# Latin-1 Supplement and Latin Extended-A
_LATIN_RANGE = range(0x00C0, 0x0180)


class SpellingMappings(Protocol):
    """Protocol for alternate-spelling providers used by the pattern compiler."""

    def alternate_spellings(self, pattern: str, options: JumpOptions) -> str:
        """Build a pattern fragment matching alternate spellings of ``pattern``.

        Args:
            pattern: Raw user pattern
            options: Options of the current jump

        Returns:
            Regex fragment, or an empty string when there is no alternative.

        """
        ...


def _build_latin_table() -> dict[str, str]:
    """Map each ASCII letter to the accented Latin letters decomposing to it."""
    table: dict[str, str] = {}
    for codepoint in _LATIN_RANGE:
        char = chr(codepoint)
        base = unicodedata.normalize("NFD", char)[0]
        if base == char or not base.isascii() or not base.isalpha():
            continue
        table[base] = table.get(base, "") + char
    return table


class MappingRegistryState(TypedDict):
    """State snapshot for MappingRegistry.

    Used for test isolation - captures and restores registry state
    to prevent test pollution.
    """

    tables: dict[str, dict[str, str]]
    initialised: bool


class MappingRegistry:
    """Registry of named spelling mapping tables.

    Built-in tables are registered on first use; hosts may add their own
    (e.g. pinyin initials) with ``register``.
    """

    _tables: ClassVar[dict[str, dict[str, str]]] = {}
    _initialised: ClassVar[bool] = False

    @classmethod
    def _ensure_initialised(cls) -> None:
        """Ensure built-in tables are registered (called once)."""
        if not cls._initialised:
            cls._tables.setdefault("latin", _build_latin_table())
            cls._initialised = True

    @classmethod
    def register(cls, name: str, table: Mapping[str, str]) -> None:
        """Register or replace a mapping table.

        Args:
            name: Name used in ``JumpOptions.match_mappings``
            table: Character to string of equivalent characters

        Raises:
            ValueError: If a key is not exactly one character

        """
        for key in table:
            if len(key) != 1:
                raise ValueError(
                    f"Mapping keys must be single characters, got {key!r} in {name!r}"
                )

        cls._ensure_initialised()
        cls._tables[name] = dict(table)
        logger.debug(f"Registered spelling mapping: {name} ({len(table)} entries)")

    @classmethod
    def get(cls, name: str) -> dict[str, str]:
        """Get a registered table by name.

        Raises:
            UnknownMappingError: If no table is registered under ``name``

        """
        cls._ensure_initialised()
        try:
            return cls._tables[name]
        except KeyError:
            raise UnknownMappingError(
                f"Unknown spelling mapping {name!r}. Available: {sorted(cls._tables)}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered tables, sorted."""
        cls._ensure_initialised()
        return sorted(cls._tables)

    @classmethod
    def clear(cls) -> None:
        """Drop every table (primarily for testing); built-ins return on next use."""
        cls._tables.clear()
        cls._initialised = False

    @classmethod
    def snapshot_state(cls) -> MappingRegistryState:
        """Capture current registry state for later restoration."""
        return {
            "tables": {name: table.copy() for name, table in cls._tables.items()},
            "initialised": cls._initialised,
        }

    @classmethod
    def restore_state(cls, state: MappingRegistryState) -> None:
        """Restore registry state from a previously captured snapshot."""
        cls._tables = {name: table.copy() for name, table in state["tables"].items()}
        cls._initialised = state["initialised"]


def checkout(pattern: str, options: JumpOptions) -> str:
    """Build the alternate-spellings fragment for ``pattern``.

    Each character with alternatives in any selected table becomes a character
    class of itself plus its alternatives; other characters are escaped.

    Args:
        pattern: Raw user pattern
        options: Options selecting the mapping tables

    Returns:
        Regex fragment, or an empty string if nothing in ``pattern`` maps.

    Raises:
        UnknownMappingError: If a selected table is not registered

    """
    if not pattern or not options.match_mappings:
        return ""

    tables = [MappingRegistry.get(name) for name in options.match_mappings]

    parts: list[str] = []
    mapped = False
    for char in pattern:
        alternatives = "".join(table.get(char, "") for table in tables)
        if alternatives:
            mapped = True
            parts.append(f"[{re.escape(char + alternatives)}]")
        else:
            parts.append(re.escape(char))

    return "".join(parts) if mapped else ""


class RegistryMappings:
    """SpellingMappings backed by the global MappingRegistry."""

    def alternate_spellings(self, pattern: str, options: JumpOptions) -> str:
        """Delegate to ``checkout``."""
        return checkout(pattern, options)


DEFAULT_MAPPINGS: SpellingMappings = RegistryMappings()
