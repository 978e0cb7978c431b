"""SubjectTrailingPeriod: no period at the end of the subject."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class TrailingPeriodRule:
  """Flags subjects ending with `.`."""

  @property
  def id(self) -> RuleId:
    return RuleId.SUBJECT_TRAILING_PERIOD

  @property
  def name(self) -> str:
    return "subject-trailing-period"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.HEADER

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    if not (message.subject or "").endswith("."):
      return []

    return [RuleMatch(
      message="Subject must not end with a period",
      line=1,
      suggestion="Remove the trailing '.'",
    )]


def _create_trailing_period(config: ValidatorConfig) -> TrailingPeriodRule:
  return TrailingPeriodRule()


register_rule(RuleId.SUBJECT_TRAILING_PERIOD, _create_trailing_period)
