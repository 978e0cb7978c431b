"""InvalidPrefix: the subject line must start with the issue prefix."""

from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule


class PrefixRule:
  """Requires the configured prefix literal, verbatim, before `- `.

  The comparison is case-sensitive: `hldtdor- feat(x): y` fails when the
  configured prefix is `HLDTDOR`.
  """

  def __init__(self, prefix: str):
    self._prefix = prefix

  @property
  def id(self) -> RuleId:
    return RuleId.INVALID_PREFIX

  @property
  def name(self) -> str:
    return "invalid-prefix"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.HEADER

  @property
  def severity(self) -> Severity:
    return Severity.ERROR

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    if message.issue_prefix == self._prefix and message.prefix_separated:
      return []

    if message.issue_prefix is None:
      text = f"Subject line must start with '{self._prefix}- '"
    elif not message.prefix_separated:
      text = f"Prefix '{self._prefix}' must be followed by '- '"
    else:
      text = f"Expected prefix '{self._prefix}', got '{message.issue_prefix}'"

    return [RuleMatch(
      message=text,
      line=1,
      suggestion=f"Start the subject line with '{self._prefix}- '",
    )]


def _create_prefix(config: ValidatorConfig) -> PrefixRule:
  return PrefixRule(config.prefix)


register_rule(RuleId.INVALID_PREFIX, _create_prefix)
