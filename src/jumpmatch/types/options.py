"""Per-jump options."""

from pydantic import BaseModel, ConfigDict, Field


class JumpOptions(BaseModel):
    """Strongly typed options for a single jump invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    case_insensitive: bool = Field(
        default=True,
        description="Ignore case in user patterns (overridden by smart-case)",
    )

    match_mappings: tuple[str, ...] = Field(
        default=(),
        description="Names of spelling mapping tables merged into user patterns",
    )
