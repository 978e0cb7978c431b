"""InvalidType: the commit type must come from the allowed set."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class CommitTypeRule:
  """Checks the type token against a closed set.

  Matching is exact and case-sensitive. `Feat` or `feature` is a
  violation even though `feat` is allowed.
  """

  def __init__(self, allowed_types: list[str]):
    self._allowed = tuple(allowed_types)

  @property
  def id(self) -> RuleId:
    return RuleId.INVALID_TYPE

  @property
  def name(self) -> str:
    return "invalid-type"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.HEADER

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    commit_type = message.commit_type or ""
    if commit_type in self._allowed:
      return []

    allowed = ", ".join(self._allowed)
    if not commit_type:
      text = "Commit type is missing"
    else:
      text = f"Unknown commit type '{commit_type}'"

    return [RuleMatch(
      message=text,
      line=1,
      suggestion=f"Use one of: {allowed}",
    )]


def _create_commit_type(config: ValidatorConfig) -> CommitTypeRule:
  return CommitTypeRule(config.allowed_types)


register_rule(RuleId.INVALID_TYPE, _create_commit_type)
