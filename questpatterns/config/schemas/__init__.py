"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .demo_schema import DEMO_NAMES, CompositeConfig, StrategyConfig
from .logging_schema import LoggingConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Logging configuration
    "LoggingConfig",
    # Demo configurations
    "CompositeConfig",
    "StrategyConfig",
    "DEMO_NAMES",
]
