"""BodyLineTooLong: detection of overly long body lines."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class BodyLineLengthRule:
  """Reports every body line longer than the configured width.

  Line numbers count the subject line as line 1.
  """

  DEFAULT_MAX_LENGTH = 100

  def __init__(self, max_length: int = DEFAULT_MAX_LENGTH):
    self._max_length = max_length

  @property
  def id(self) -> RuleId:
    return RuleId.BODY_LINE_TOO_LONG

  @property
  def name(self) -> str:
    return "body-line-too-long"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.BODY

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(message.body_lines, start=2):
      length = len(line)
      if length > self._max_length:
        matches.append(RuleMatch(
          message=f"Body line exceeds {self._max_length} characters ({length})",
          line=i,
          suggestion="Wrap the paragraph",
        ))

    return matches


def _create_body_line_length(config: ValidatorConfig) -> BodyLineLengthRule:
  return BodyLineLengthRule(config.max_body_line_length)


register_rule(RuleId.BODY_LINE_TOO_LONG, _create_body_line_length)
