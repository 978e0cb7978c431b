"""Core domain models for commit message linting."""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Severity(Enum):
  """Violation severity levels."""

  ERROR = "error"
  WARNING = "warning"
  INFO = "info"


class RuleTarget(Enum):
  """Part of the commit message a rule inspects."""

  HEADER = "header"
  BODY = "body"


class RuleId(Enum):
  """Identifiers for every violation the validator can report."""

  INPUT_TOO_LARGE = "InputTooLarge"
  MALFORMED_SUBJECT = "MalformedSubject"
  INVALID_PREFIX = "InvalidPrefix"
  INVALID_TYPE = "InvalidType"
  MISSING_SCOPE = "MissingScope"
  SUBJECT_NOT_LOWERCASE = "SubjectNotLowercase"
  SUBJECT_TOO_LONG = "SubjectTooLong"
  SUBJECT_TRAILING_PERIOD = "SubjectTrailingPeriod"
  VAGUE_SUBJECT = "VagueSubject"
  BODY_SEPARATOR = "BodySeparator"
  BODY_LINE_TOO_LONG = "BodyLineTooLong"


@dataclass(frozen=True)
class CommitMessage:
  """A commit message split into its subject line and body.

  The header parts are None when the subject line does not contain them.
  `prefix_separated` is False when the prefix is glued to the type
  without the `- ` separator. `well_formed` is False when the subject
  line does not match the header grammar at all, in which case every
  header part is None.
  """

  raw: str
  subject_line: str
  body_lines: tuple[str, ...] = ()
  issue_prefix: str | None = None
  prefix_separated: bool = True
  commit_type: str | None = None
  scope: str | None = None
  subject: str | None = None
  well_formed: bool = False

  @property
  def has_body(self) -> bool:
    return any(line.strip() for line in self.body_lines)

  @property
  def body(self) -> tuple[str, ...]:
    """Body paragraphs, in order, each joined with newlines."""
    paragraphs: list[str] = []
    current: list[str] = []
    for line in self.body_lines:
      if line.strip():
        current.append(line)
      elif current:
        paragraphs.append("\n".join(current))
        current = []
    if current:
      paragraphs.append("\n".join(current))
    return tuple(paragraphs)


@dataclass(frozen=True)
class RuleViolation:
  """A single structural non-conformance."""

  rule_id: RuleId
  message: str
  severity: Severity
  line: int | None = None
  suggestion: str | None = None


@dataclass(frozen=True)
class ValidationResult:
  """Outcome of validating one commit message."""

  violations: Sequence[RuleViolation] = ()

  @property
  def is_valid(self) -> bool:
    return not self.violations

  @property
  def summary(self) -> str:
    if not self.violations:
      return "Commit message OK."

    by_severity: dict[str, int] = {}
    for violation in self.violations:
      sev = violation.severity.value
      by_severity[sev] = by_severity.get(sev, 0) + 1

    parts = []
    for sev_enum in Severity:
      sev = sev_enum.value
      if sev in by_severity:
        parts.append(f"{by_severity[sev]} {sev}")

    count = len(self.violations)
    return f"Found {count} violation{'s' if count != 1 else ''}: {', '.join(parts)}."
