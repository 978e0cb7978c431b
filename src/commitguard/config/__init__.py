"""Configuration management."""

from commitguard.config.loader import load_config
from commitguard.config.settings import ConfigurationError, ValidatorConfig

__all__ = ["ConfigurationError", "ValidatorConfig", "load_config"]
