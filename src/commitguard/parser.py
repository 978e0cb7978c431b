"""Commit message parsing."""

import re
from functools import lru_cache

from commitguard.models import CommitMessage

# Any other `<token>- ` in front of the type is captured as a foreign prefix
_OTHER_PREFIX = r"[^\s():]+"


@lru_cache(maxsize=32)
def header_pattern(prefix: str | None = None) -> re.Pattern[str]:
  """Build the header grammar `<prefix>- <type>(<scope>): <subject>`.

  The configured prefix is matched literally, so it may contain
  characters the type and scope cannot. Prefix and scope are optional
  here so their absence is reported by the prefix and scope rules
  rather than as a malformed subject line. `<prefix>-` glued to the type
  is captured separately so the type token never absorbs the prefix.
  """
  if prefix:
    literal = re.escape(prefix)
    lead = (
      rf"(?:(?P<prefix>{literal}|{_OTHER_PREFIX})- "
      rf"|(?P<glued>{literal})-(?=\S))?"
    )
  else:
    lead = rf"(?:(?P<prefix>{_OTHER_PREFIX})- )?"

  return re.compile(
    rf"^{lead}"
    r"(?P<type>[^\s():]*)"
    r"(?:\((?P<scope>[^)]*)\))?"
    r": (?P<subject>.+)$"
  )


def parse_message(text: str, prefix: str | None = None) -> CommitMessage:
  """Split a commit message into subject line, header parts and body.

  Never raises: a subject line that does not match the header grammar
  yields a CommitMessage with `well_formed=False`.
  """
  lines = text.replace("\r\n", "\n").split("\n")
  subject_line = lines[0]
  body_lines = tuple(lines[1:])

  match = header_pattern(prefix).match(subject_line)
  if not match:
    return CommitMessage(raw=text, subject_line=subject_line, body_lines=body_lines)

  groups = match.groupdict()
  glued = groups.get("glued")

  return CommitMessage(
    raw=text,
    subject_line=subject_line,
    body_lines=body_lines,
    issue_prefix=glued if glued is not None else groups["prefix"],
    prefix_separated=glued is None,
    commit_type=groups["type"],
    scope=groups["scope"],
    subject=groups["subject"],
    well_formed=True,
  )
