"""Output formatting for validation results."""

import json
from abc import ABC, abstractmethod

from rich.console import Console
from rich.text import Text

from commitguard.models import Severity, ValidationResult


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, result: ValidationResult) -> str:
    """Format validation result for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "dim",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, result: ValidationResult) -> str:
    if result.is_valid:
      self.console.print("[green]✓[/green] Commit message OK")
      return ""

    for violation in result.violations:
      style = self.SEVERITY_STYLES.get(violation.severity, "")
      line = Text.assemble(
        ("✗ ", style),
        (violation.rule_id.value, "bold"),
        f" (line {violation.line})" if violation.line else "",
        f": {violation.message}",
      )
      self.console.print(line)
      if violation.suggestion:
        self.console.print(Text(f"  {violation.suggestion}", style="dim"))

    self.console.print(Text(result.summary, style="bold red"))
    return ""


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, result: ValidationResult) -> str:
    data = {
      "valid": result.is_valid,
      "summary": result.summary,
      "violations": [
        {
          "rule_id": v.rule_id.value,
          "severity": v.severity.value,
          "message": v.message,
          "line": v.line,
          "suggestion": v.suggestion,
        }
        for v in result.violations
      ],
    }
    return json.dumps(data, indent=2)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter."""

  def format(self, result: ValidationResult) -> str:
    lines = []
    for violation in result.violations:
      level = self._severity_to_level(violation.severity)
      message = (
        violation.message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
      )
      lines.append(f"::{level} title={violation.rule_id.value}::{message}")
    return "\n".join(lines)

  def _severity_to_level(self, severity: Severity) -> str:
    if severity == Severity.ERROR:
      return "error"
    if severity == Severity.WARNING:
      return "warning"
    return "notice"


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "github": GitHubFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
