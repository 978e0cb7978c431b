"""VagueSubject: detection of subjects that say nothing."""

import re
from typing import Sequence

from commitguard.config.settings import ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules.base import RuleMatch
from commitguard.rules.registry import register_rule

_WHITESPACE = re.compile(r"\s+")


def _normalize(text: str) -> str:
  return _WHITESPACE.sub(" ", text.strip().rstrip(".").strip().lower())


class VagueSubjectRule:
  """Flags subjects that are nothing more than a denylisted phrase.

  The whole subject is compared, ignoring case, surrounding whitespace
  and a trailing period. `fix bug` is vague; `fix bug in order matching`
  is not.
  """

  def __init__(self, phrases: list[str]):
    self._phrases = frozenset(_normalize(p) for p in phrases if p.strip())

  @property
  def id(self) -> RuleId:
    return RuleId.VAGUE_SUBJECT

  @property
  def name(self) -> str:
    return "vague-subject"

  @property
  def target(self) -> RuleTarget:
    return RuleTarget.HEADER

  @property
  def severity(self) -> Severity:
    return Severity.WARNING

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    subject = message.subject or ""
    if _normalize(subject) not in self._phrases:
      return []

    return [RuleMatch(
      message=f"Subject '{subject}' is too vague",
      line=1,
      suggestion="Say what changed and where",
    )]


def _create_vague(config: ValidatorConfig) -> VagueSubjectRule:
  return VagueSubjectRule(config.vague_phrases)


register_rule(RuleId.VAGUE_SUBJECT, _create_vague)
