"""Structural linter for commit messages."""

__version__ = "0.1.0"

from commitguard.config import ConfigurationError, ValidatorConfig  # noqa: E402
from commitguard.models import (  # noqa: E402
  CommitMessage,
  RuleId,
  RuleViolation,
  Severity,
  ValidationResult,
)
from commitguard.rules import CommitMessageValidator, validate  # noqa: E402

__all__ = [
  "CommitMessage",
  "CommitMessageValidator",
  "ConfigurationError",
  "RuleId",
  "RuleViolation",
  "Severity",
  "ValidationResult",
  "ValidatorConfig",
  "validate",
]
