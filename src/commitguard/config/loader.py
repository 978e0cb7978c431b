"""Configuration file loading."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from commitguard.config.settings import ConfigurationError, ValidatorConfig

CONFIG_FILENAMES = [
  ".commitguard.yaml",
  ".commitguard.yml",
  "commitguard.yaml",
  "commitguard.yml",
]

logger = logging.getLogger(__name__)


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    if not config_path.exists():
      raise ConfigurationError(f"Config file not found: {config_path}")
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> ValidatorConfig:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path)
  if path:
    logger.debug("Loading configuration from %s", path)
    return _load_from_file(path)
  logger.debug("No configuration file found, using defaults")
  return ValidatorConfig()


def _load_from_file(path: Path) -> ValidatorConfig:
  """Load settings from a YAML file."""
  try:
    with open(path, encoding="utf-8") as f:
      data = yaml.safe_load(f) or {}
  except (OSError, yaml.YAMLError) as e:
    raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

  if not isinstance(data, dict):
    raise ConfigurationError(f"Config file {path} must contain a mapping")

  return _parse_config(data)


def _parse_config(data: dict) -> ValidatorConfig:
  """Parse config dict into ValidatorConfig."""
  try:
    config = ValidatorConfig(**data)
  except ValidationError as e:
    raise ConfigurationError(f"Invalid configuration: {e}") from e

  config.check()
  return config
