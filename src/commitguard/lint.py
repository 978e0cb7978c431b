"""Core lint orchestration."""

import logging
import sys
from pathlib import Path

from commitguard.config import ValidatorConfig, load_config
from commitguard.models import ValidationResult
from commitguard.rules import CommitMessageValidator
from commitguard.source import clean_message, read_commit_message, read_message_file

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


class LintOrchestrator:
  """Reads commit messages from their source and validates them."""

  def __init__(self, config: ValidatorConfig | None = None):
    self.config = config or ValidatorConfig()
    self._validator = CommitMessageValidator(self.config)

  def lint_text(self, text: str) -> ValidationResult:
    """Lint a literal message, exactly as given."""
    return self._validator.validate(text)

  def lint_file(self, path: str) -> ValidationResult:
    """Lint a commit message file, or stdin when path is '-'."""
    if path == STDIN_MARKER:
      logger.debug("Reading commit message from stdin")
      return self._validator.validate(clean_message(sys.stdin.read()))
    return self._validator.validate(read_message_file(Path(path)))

  def lint_ref(self, ref: str = "HEAD", cwd: Path | None = None) -> ValidationResult:
    """Lint the message of an existing commit."""
    return self._validator.validate(read_commit_message(ref, cwd))


def run_lint(
  message: str | None = None,
  message_file: str | None = None,
  ref: str | None = None,
  prefix: str | None = None,
  config_path: Path | None = None,
) -> ValidationResult:
  """Run the linter with the given options.

  At most one of `message`, `message_file` and `ref` should be given.
  With none of them, the message of HEAD is linted.
  """
  config = load_config(config_path)
  if prefix:
    config = config.model_copy(update={"prefix": prefix})

  orchestrator = LintOrchestrator(config)

  if message is not None:
    return orchestrator.lint_text(message)
  if message_file:
    return orchestrator.lint_file(message_file)
  return orchestrator.lint_ref(ref or "HEAD")
