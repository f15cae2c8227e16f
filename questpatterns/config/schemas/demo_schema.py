"""Demo configuration schemas."""

from pydantic import BaseModel, Field, field_validator

# Catalogue order used when running every demo
DEMO_NAMES = ("adapter", "composite", "singleton", "strategy")


class CompositeConfig(BaseModel):
    """Layout of the inventory tree description."""

    marker: str = Field("--", description="Prefix placed before each child")
    indent_step: str = Field("  ", description="Indent added per nesting level")

    @field_validator("indent_step")
    @classmethod
    def validate_indent_step(cls, v: str) -> str:
        """Indent must be non-empty whitespace."""
        if not v or v.strip():
            raise ValueError("Indent step must be non-empty whitespace")
        return v


class StrategyConfig(BaseModel):
    """Strategy demo settings."""

    rescue_reaction: str = Field(
        "fight", description="Reaction Ernie switches to when Lucy is in danger"
    )
