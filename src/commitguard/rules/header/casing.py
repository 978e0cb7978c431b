"""SubjectNotLowercase: the subject starts with a lowercase letter."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class SubjectCasingRule:
  """Flags subjects whose first character is uppercase or whitespace.

  Digits and punctuation are accepted as a first character so that
  subjects like `2fa support` or `` `--dry-run` flag`` pass.
  """

  @property
  def id(self) -> RuleId:
    return RuleId.SUBJECT_NOT_LOWERCASE

  @property
  def name(self) -> str:
    return "subject-not-lowercase"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.HEADER

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    first = (message.subject or "")[:1]
    if not first or not (first.isupper() or first.isspace()):
      return []

    return [RuleMatch(
      message="Subject must start with a lowercase letter",
      line=1,
      suggestion=f"Write '{first.lower()}' instead of '{first}'" if first.isupper() else None,
    )]


def _create_casing(config: ValidatorConfig) -> SubjectCasingRule:
  return SubjectCasingRule()


register_rule(RuleId.SUBJECT_NOT_LOWERCASE, _create_casing)
