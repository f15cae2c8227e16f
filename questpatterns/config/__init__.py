"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    DEMO_NAMES,
    AppConfig,
    CompositeConfig,
    LoggingConfig,
    StrategyConfig,
    validate_config,
)

# Configuration management
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Specific configurations
    "LoggingConfig",
    "CompositeConfig",
    "StrategyConfig",
    "DEMO_NAMES",
    # Management
    "ConfigurationManager",
    "get_config_manager",
]
