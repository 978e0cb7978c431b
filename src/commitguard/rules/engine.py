"""Validator that composes and executes rules."""

import logging

from commitguard.config.settings import ConfigurationError, ValidatorConfig
from commitguard.models import (
  RuleId,
  RuleTarget,
  RuleViolation,
  Severity,
  ValidationResult,
)
from commitguard.parser import parse_message
from commitguard.rules.base import Rule
from commitguard.rules.registry import RuleRegistry, get_all_rules

logger = logging.getLogger(__name__)


class CommitMessageValidator:
  """Checks commit messages against the configured conventions.

  This is the main entry point for validation. It parses the message,
  runs every applicable rule in a fixed order and collects all
  violations instead of stopping at the first one.

  Example:
    validator = CommitMessageValidator(ValidatorConfig())
    result = validator.validate("HLDTDOR- feat(auth): add login")
  """

  def __init__(self, config: ValidatorConfig, rules: list[Rule] | None = None):
    """Initialize the validator.

    Args:
      config: Conventions to enforce. Checked immediately.
      rules: Optional list of rules to use. If None, every registered
             rule is built from the config.

    Raises:
      ConfigurationError: If the config is missing or inconsistent.
    """
    if not isinstance(config, ValidatorConfig):
      raise ConfigurationError(
        f"Expected a ValidatorConfig, got {type(config).__name__}"
      )
    config.check()
    self._config = config

    if rules is None:
      RuleRegistry.load_all()
      rules = get_all_rules(config)
    self._rules = tuple(rules)

  @property
  def rules(self) -> tuple[Rule, ...]:
    return self._rules

  def validate(self, text: str) -> ValidationResult:
    """Validate one commit message.

    Never raises for malformed content; every problem is reported as a
    RuleViolation in the result.
    """
    config = self._config

    if len(text) > config.max_message_length:
      return ValidationResult(violations=(RuleViolation(
        rule_id=RuleId.INPUT_TOO_LARGE,
        message=(
          f"Commit message exceeds {config.max_message_length} characters ({len(text)})"
        ),
        severity=Severity.ERROR,
      ),))

    if text == config.empty_commit_message:
      return ValidationResult()

    violations: list[RuleViolation] = []
    message = parse_message(text, config.prefix)

    if not message.subject_line.strip():
      violations.append(RuleViolation(
        rule_id=RuleId.MALFORMED_SUBJECT,
        message="Subject line is empty",
        severity=Severity.ERROR,
        line=1,
        suggestion=f"Use '{config.empty_commit_message}' when there is nothing to describe",
      ))
    elif not message.well_formed:
      violations.append(RuleViolation(
        rule_id=RuleId.MALFORMED_SUBJECT,
        message=f"Subject line does not match '{config.prefix}- <type>(<scope>): <subject>'",
        severity=Severity.ERROR,
        line=1,
      ))

    for rule in self._rules:
      if rule.target == RuleTarget.HEADER and not message.well_formed:
        continue
      if rule.target == RuleTarget.BODY and not message.has_body:
        continue

      logger.debug("Running rule %s", rule.name)
      for match in rule.check(message):
        violations.append(RuleViolation(
          rule_id=rule.id,
          message=match.message,
          severity=rule.severity,
          line=match.line,
          suggestion=match.suggestion,
        ))

    return ValidationResult(violations=tuple(violations))


def validate(text: str, config: ValidatorConfig) -> ValidationResult:
  """Validate `text` against `config`.

  Raises:
    ConfigurationError: If the config is missing or inconsistent.
  """
  return CommitMessageValidator(config).validate(text)
