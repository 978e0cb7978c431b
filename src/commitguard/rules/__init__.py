"""Rule-based commit message validation."""

from commitguard.rules.base import Rule, RuleMatch
from commitguard.rules.engine import CommitMessageValidator, validate
from commitguard.rules.registry import RuleRegistry, get_all_rules, list_rules

__all__ = [
  "CommitMessageValidator",
  "Rule",
  "RuleMatch",
  "RuleRegistry",
  "get_all_rules",
  "list_rules",
  "validate",
]
