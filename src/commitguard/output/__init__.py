"""Output formatting."""

from commitguard.output.formatter import (
  GitHubFormatter,
  JsonFormatter,
  OutputFormatter,
  TerminalFormatter,
  get_formatter,
)

__all__ = [
  "OutputFormatter",
  "TerminalFormatter",
  "JsonFormatter",
  "GitHubFormatter",
  "get_formatter",
]
