"""Host settings for matcher construction.

Settings the editor owns globally (rather than per jump) live here. They are
passed explicitly to the compiler and the matcher constructors instead of
being read from ambient state.
"""

from __future__ import annotations

import os
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

_TRUTHY = ("true", "1", "yes", "on")


class MatcherSettings(BaseModel):
    """Editor-wide settings consulted when matchers are built.

    Attributes:
        smart_case: Ignore case unless the pattern starts with an uppercase letter
        tabstop: Display width of a tab stop, used to map screen cells to characters

    Example:
        ```python
        # Explicit configuration
        settings = MatcherSettings(smart_case=True)

        # Zero-config (reads JUMPMATCH_SMART_CASE / JUMPMATCH_TABSTOP)
        settings = MatcherSettings.from_properties({})
        ```

    """

    model_config = ConfigDict(
        # Immutable - settings cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    smart_case: bool = Field(
        default=False,
        description="Case-insensitive unless the pattern starts with an uppercase letter",
    )
    tabstop: int = Field(
        default=8,
        ge=1,
        le=32,
        description="Display cells per tab stop",
    )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create settings from properties with environment fallback.

        Layering:
        1. Explicit properties (highest priority)
        2. Environment variables (fallback)
        3. Defaults (lowest priority)

        Environment variables used:
        - JUMPMATCH_SMART_CASE: Enable smart-case ("true"/"1"/"yes"/"on")
        - JUMPMATCH_TABSTOP: Tab stop width

        Args:
            properties: Settings properties dictionary

        Returns:
            Validated settings instance

        Raises:
            ValidationError: If settings are invalid

        """
        config_data = properties.copy()

        if "smart_case" not in config_data:
            smart_case_env = os.getenv("JUMPMATCH_SMART_CASE", "")
            config_data["smart_case"] = smart_case_env.lower() in _TRUTHY

        if "tabstop" not in config_data:
            tabstop_env = os.getenv("JUMPMATCH_TABSTOP")
            if tabstop_env:
                config_data["tabstop"] = tabstop_env

        return cls.model_validate(config_data)
