"""Commit message sources: hook files, stdin and git history."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# Everything below this line is dropped by `git commit --cleanup=scissors`
SCISSORS_LINE = "# ------------------------ >8 ------------------------"


class GitError(Exception):
  """Git command failed."""


class MessageSourceError(Exception):
  """Commit message could not be read."""


def _sanitize_error(stderr: str) -> str:
  """Remove potentially sensitive path information from error messages."""
  lines = stderr.strip().split("\n")
  sanitized = []
  for line in lines:
    if "fatal:" in line or "error:" in line:
      sanitized.append(line.split("/")[-1] if "/" in line else line)
    else:
      sanitized.append(line)
  return "\n".join(sanitized)


def run_git(*args: str, cwd: Path | None = None) -> str:
  """Run a git command and return stdout."""
  try:
    result = subprocess.run(
      ["git", *args],
      capture_output=True,
      text=True,
      check=True,
      cwd=cwd,
    )
    return result.stdout
  except FileNotFoundError as e:
    raise GitError("git executable not found") from e
  except subprocess.CalledProcessError as e:
    sanitized = _sanitize_error(e.stderr)
    raise GitError(f"git {' '.join(args)} failed: {sanitized}") from e


def read_commit_message(ref: str = "HEAD", cwd: Path | None = None) -> str:
  """Read the full message of an existing commit."""
  logger.debug("Reading commit message of %s", ref)
  return clean_message(run_git("log", "-1", "--format=%B", ref, "--", cwd=cwd))


def read_message_file(path: Path) -> str:
  """Read a commit message file such as .git/COMMIT_EDITMSG."""
  logger.debug("Reading commit message from %s", path)
  try:
    return clean_message(path.read_text(encoding="utf-8"))
  except FileNotFoundError as e:
    raise MessageSourceError(f"Commit message file not found: {path}") from e
  except (OSError, UnicodeDecodeError) as e:
    raise MessageSourceError(f"Cannot read commit message file {path}: {e}") from e


def clean_message(text: str) -> str:
  """Apply git's default `strip` cleanup to a commit message.

  Drops the scissors section and `#` comment lines, removes trailing
  whitespace from each line and strips leading and trailing blank lines.
  Blank lines inside the message are kept as they are, so separator
  problems are still visible to the validator.
  """
  lines: list[str] = []
  for line in text.replace("\r\n", "\n").split("\n"):
    if line == SCISSORS_LINE:
      break
    if line.startswith("#"):
      continue
    lines.append(line.rstrip())

  while lines and not lines[0]:
    lines.pop(0)
  while lines and not lines[-1]:
    lines.pop()

  return "\n".join(lines)
