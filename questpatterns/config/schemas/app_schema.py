"""Main application configuration schema."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from .demo_schema import DEMO_NAMES, CompositeConfig, StrategyConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    composite: CompositeConfig = Field(default_factory=lambda: CompositeConfig())
    strategy: StrategyConfig = Field(default_factory=lambda: StrategyConfig())
    demos: List[str] = Field(
        default_factory=lambda: list(DEMO_NAMES), description="Demos run by 'all'"
    )

    @field_validator("demos")
    @classmethod
    def validate_demos(cls, v: List[str]) -> List[str]:
        """
        Validate demo names.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If a demo name is unknown
        """
        unknown = [name for name in v if name not in DEMO_NAMES]
        if unknown:
            raise ValueError(f"Unknown demos {unknown}, expected any of {list(DEMO_NAMES)}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)


def validate_config(data: Dict[str, Any]) -> List[str]:
    """Validate raw configuration, returning a list of error messages."""
    from pydantic import ValidationError

    try:
        AppConfig.model_validate(data)
    except ValidationError as e:
        return [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
    return []
