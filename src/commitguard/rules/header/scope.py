"""MissingScope: every commit names the module it touches."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class ScopeRule:
  """Requires a non-empty parenthesized scope after the type.

  Catches both `fix: ...` (no parentheses) and `fix(): ...` or
  `fix(  ): ...` (empty scope), whatever the type is.
  """

  @property
  def id(self) -> RuleId:
    return RuleId.MISSING_SCOPE

  @property
  def name(self) -> str:
    return "missing-scope"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.HEADER

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    if message.scope is not None and message.scope.strip():
      return []

    text = "Scope is missing" if message.scope is None else "Scope is empty"
    return [RuleMatch(
      message=text,
      line=1,
      suggestion="Name the affected module, e.g. 'feat(auth): ...'",
    )]


def _create_scope(config: ValidatorConfig) -> ScopeRule:
  return ScopeRule()


register_rule(RuleId.MISSING_SCOPE, _create_scope)
