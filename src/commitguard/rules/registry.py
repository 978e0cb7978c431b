"""Rule registration and discovery."""

from typing import Callable

from commitguard.config.settings import ValidatorConfig
from commitguard.models import RuleId
from commitguard.rules.base import Rule

RuleFactory = Callable[[ValidatorConfig], Rule]

# Violations are always reported in this order.
RULE_ORDER: tuple[RuleId, ...] = (
  RuleId.INVALID_PREFIX,
  RuleId.INVALID_TYPE,
  RuleId.MISSING_SCOPE,
  RuleId.SUBJECT_NOT_LOWERCASE,
  RuleId.SUBJECT_TOO_LONG,
  RuleId.SUBJECT_TRAILING_PERIOD,
  RuleId.VAGUE_SUBJECT,
  RuleId.BODY_SEPARATOR,
  RuleId.BODY_LINE_TOO_LONG,
)

_rules: dict[RuleId, RuleFactory] = {}


def register_rule(rule_id: RuleId, factory: RuleFactory) -> None:
  """Register a rule factory.

  Args:
    rule_id: Identifier of the rule; must appear in RULE_ORDER.
    factory: Callable that builds a Rule from a ValidatorConfig.
  """
  if rule_id not in RULE_ORDER:
    raise ValueError(f"Rule {rule_id.value} has no position in RULE_ORDER")
  _rules[rule_id] = factory


def get_all_rules(config: ValidatorConfig) -> list[Rule]:
  """Get instances of all registered rules, in check order."""
  return [_rules[rule_id](config) for rule_id in RULE_ORDER if rule_id in _rules]


def list_rules() -> list[RuleId]:
  """List registered rule ids in check order."""
  return [rule_id for rule_id in RULE_ORDER if rule_id in _rules]


class RuleRegistry:
  """Registry for lazy rule loading."""

  @staticmethod
  def load_all() -> None:
    """Load all rule modules to trigger registration.

    Call this before using get_all_rules() to ensure all rules are
    registered.
    """
    # Each module registers its rules at import time
    from commitguard.rules.body import line_length, separator  # noqa: F401
    from commitguard.rules.header import (  # noqa: F401
      casing,
      commit_type,
      prefix,
      punctuation,
      scope,
      subject_length,
      vague,
    )
