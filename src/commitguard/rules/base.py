"""Rule abstractions for commit message validation."""

from dataclasses import dataclass
from typing import Protocol, Sequence

from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity


@dataclass(frozen=True)
class RuleMatch:
  """A single rule match found during validation.

  This is an intermediate representation that gets converted to
  RuleViolation by the validator, which attaches the rule's id and
  severity. Keeping it separate lets rules stay decoupled from the
  output model.
  """

  message: str
  line: int | None = None
  suggestion: str | None = None


class Rule(Protocol):
  """Protocol for commit message rules.

  Each rule checks exactly one structural convention. Rules are
  stateless apart from the configuration they are built with.

  Example:
    class MyRule:
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
        return []
  """

  @property
  def id(self) -> RuleId:
    """Identifier reported on every violation of this rule."""
    ...

  @property
  def name(self) -> str:
    """Human-readable rule name (e.g., 'missing-scope')."""
    ...

  @property
  def target(self) -> RuleTarget:
    """Part of the message the rule inspects."""
    ...

  @property
  def severity(self) -> Severity:
    """Severity of violations produced by this rule."""
    ...

  def check(self, message: CommitMessage) -> Sequence[RuleMatch]:
    """Check a parsed message.

    Header rules are only called for well-formed messages, body rules
    only for messages that have a body.

    Returns:
      Sequence of RuleMatch objects. Empty if the message conforms.
    """
    ...
