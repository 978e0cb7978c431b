"""Pytest fixtures."""

import pytest
from commitguard.config import ValidatorConfig
from commitguard.models import RuleId, RuleViolation, Severity, ValidationResult
from commitguard.rules import CommitMessageValidator


@pytest.fixture
def config() -> ValidatorConfig:
  return ValidatorConfig()


@pytest.fixture
def validator(config: ValidatorConfig) -> CommitMessageValidator:
  return CommitMessageValidator(config)


@pytest.fixture
def valid_message() -> str:
  return "HLDTDOR- feat(kurumsal-vob): add vob position calculation"


@pytest.fixture
def failing_result() -> ValidationResult:
  return ValidationResult(violations=(
    RuleViolation(
      rule_id=RuleId.MISSING_SCOPE,
      message="Scope is missing",
      severity=Severity.ERROR,
      line=1,
      suggestion="Name the affected module, e.g. 'feat(auth): ...'",
    ),
    RuleViolation(
      rule_id=RuleId.VAGUE_SUBJECT,
      message="Subject 'fix bug' is too vague",
      severity=Severity.WARNING,
      line=1,
    ),
  ))
