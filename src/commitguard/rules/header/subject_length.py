"""SubjectTooLong: the subject stays within the length limit."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class SubjectLengthRule:
  """Limits the subject, the text after `type(scope): `.

  The limit is inclusive: a subject of exactly `max_length` characters
  passes. The prefix, type and scope do not count against it.
  """

  DEFAULT_MAX_LENGTH = 72

  def __init__(self, max_length: int = DEFAULT_MAX_LENGTH):
    self._max_length = max_length

  @property
  def id(self) -> RuleId:
    return RuleId.SUBJECT_TOO_LONG

  @property
  def name(self) -> str:
    return "subject-too-long"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.HEADER

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    length = len(message.subject or "")
    if length <= self._max_length:
      return []

    return [RuleMatch(
      message=f"Subject exceeds {self._max_length} characters ({length})",
      line=1,
      suggestion="Move details into the body",
    )]


def _create_subject_length(config: ValidatorConfig) -> SubjectLengthRule:
  return SubjectLengthRule(config.max_subject_length)


register_rule(RuleId.SUBJECT_TOO_LONG, _create_subject_length)
