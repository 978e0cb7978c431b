"""Validator configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ALLOWED_TYPES = [
  "feat",
  "fix",
  "refactor",
  "perf",
  "test",
  "docs",
  "chore",
  "revert",
]

DEFAULT_VAGUE_PHRASES = [
  "update",
  "update code",
  "update files",
  "changes",
  "some changes",
  "minor changes",
  "small changes",
  "misc",
  "misc changes",
  "fix",
  "fix bug",
  "fix bugs",
  "fix issue",
  "fix issues",
  "fix stuff",
  "minor fix",
  "minor fixes",
  "various fixes",
  "refactor code",
  "cleanup",
  "improvements",
  "wip",
]


class ConfigurationError(Exception):
  """Validator configuration is missing or internally inconsistent."""


class ValidatorConfig(BaseModel):
  """Standing conventions every commit message is checked against."""

  model_config = ConfigDict(frozen=True)

  prefix: str = "HLDTDOR"
  allowed_types: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_TYPES))
  max_subject_length: int = 72
  max_body_line_length: int = 100
  max_message_length: int = 10_000
  vague_phrases: list[str] = Field(default_factory=lambda: list(DEFAULT_VAGUE_PHRASES))
  empty_commit_subject: str = "chore: empty commit"

  @property
  def empty_commit_message(self) -> str:
    """The only message accepted when there is no change to describe."""
    return f"{self.prefix}- {self.empty_commit_subject}"

  def check(self) -> None:
    """Raise ConfigurationError unless the settings are usable."""
    problems = []

    if not self.prefix.strip():
      problems.append("prefix must not be empty")
    elif self.prefix != self.prefix.strip():
      problems.append("prefix must not have surrounding whitespace")

    if not self.allowed_types:
      problems.append("allowed_types must not be empty")
    elif any(not t.strip() for t in self.allowed_types):
      problems.append("allowed_types must not contain empty entries")

    for name in ("max_subject_length", "max_body_line_length", "max_message_length"):
      if getattr(self, name) <= 0:
        problems.append(f"{name} must be positive")

    if not self.empty_commit_subject.strip():
      problems.append("empty_commit_subject must not be empty")

    if problems:
      raise ConfigurationError(f"Invalid configuration: {'; '.join(problems)}")
