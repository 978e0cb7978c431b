"""BodySeparator: exactly one blank line between subject and body."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class BodySeparatorRule:
  """Checks the blank line that separates the body from the subject.

  Lines containing only whitespace count as blank.
  """

  @property
  def id(self) -> RuleId:
    return RuleId.BODY_SEPARATOR

  @property
  def name(self) -> str:
    return "body-separator"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.BODY

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    blank = 0
    for line in message.body_lines:
      if line.strip():
        break
      blank += 1

    if blank == 1:
      return []

    if blank == 0:
      text = "Missing blank line between subject and body"
    else:
      text = f"Expected exactly one blank line between subject and body, found {blank}"

    return [RuleMatch(
      message=text,
      line=2,
      suggestion="Leave exactly one blank line after the subject line",
    )]


def _create_separator(config: ValidatorConfig) -> BodySeparatorRule:
  return BodySeparatorRule()


register_rule(RuleId.BODY_SEPARATOR, _create_separator)
