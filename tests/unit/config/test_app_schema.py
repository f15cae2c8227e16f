"""Tests for configuration schemas."""

import pytest
from pydantic import ValidationError

from questpatterns.config.schemas import (
    DEMO_NAMES,
    AppConfig,
    CompositeConfig,
    LoggingConfig,
    validate_config,
)


class TestAppConfig:
    """Test application configuration schema."""

    def test_defaults(self):
        config = AppConfig()

        assert config.logging.level == "WARNING"
        assert config.logging.format == "console"
        assert config.composite.marker == "--"
        assert config.composite.indent_step == "  "
        assert config.strategy.rescue_reaction == "fight"
        assert config.demos == list(DEMO_NAMES)

    def test_from_dict_nested(self):
        config = AppConfig.from_dict(
            {"logging": {"level": "debug"}, "demos": ["strategy", "adapter"]}
        )

        assert config.logging.level == "DEBUG"
        assert config.demos == ["strategy", "adapter"]

    def test_unknown_demo_rejected(self):
        with pytest.raises(ValidationError, match="Unknown demos"):
            AppConfig(demos=["adapter", "observer"])

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Log level must be one of"):
            LoggingConfig(level="LOUD")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError, match="Log format must be one of"):
            LoggingConfig(format="xml")

    @pytest.mark.parametrize("indent_step", ["", "ab", " x "])
    def test_indent_step_must_be_whitespace(self, indent_step):
        with pytest.raises(ValidationError):
            CompositeConfig(indent_step=indent_step)

    def test_validate_config_reports_errors(self):
        errors = validate_config({"logging": {"level": "LOUD"}, "demos": ["observer"]})

        assert len(errors) == 2
        assert any(error.startswith("logging.level") for error in errors)
        assert any(error.startswith("demos") for error in errors)

    def test_validate_config_accepts_valid(self):
        assert validate_config({"composite": {"marker": "> "}}) == []
