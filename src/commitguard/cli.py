"""CLI interface using Typer."""

import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from commitguard import __version__
from commitguard.config import ConfigurationError, load_config
from commitguard.lint import run_lint
from commitguard.log import configure_logging
from commitguard.output import get_formatter
from commitguard.rules import CommitMessageValidator
from commitguard.source import GitError, MessageSourceError

EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

app = typer.Typer(
  name="commitguard",
  help="Structural linter for commit messages",
  no_args_is_help=False,
)

console = Console()


def _is_debug() -> bool:
  return os.environ.get("COMMITGUARD_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"commitguard {__version__}")
    raise typer.Exit()


@app.command()
def main(
  message_file: Optional[str] = typer.Argument(
    None,
    help="Commit message file (as passed by a commit-msg hook), or '-' for stdin",
  ),
  message: str = typer.Option(None, "--message", "-m", help="Lint this message text as-is"),
  ref: str = typer.Option(None, "--ref", "-r", help="Lint the message of an existing commit"),
  prefix: str = typer.Option(None, "--prefix", help="Required subject prefix (overrides config)"),
  format_type: str = typer.Option(
    "terminal", "--format", help="Output format: terminal, json, github"
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  list_rules: bool = typer.Option(False, "--list-rules", help="List rules in check order and exit"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logs and full tracebacks"),
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Check a commit message against the commit conventions.

  With no arguments, lints the message of HEAD. Exits 1 and prints every
  violation when the message does not conform.
  """
  show_traceback = debug or _is_debug()
  configure_logging(show_traceback)

  sources = [s for s in (message_file, message, ref) if s is not None]
  if len(sources) > 1:
    console.print("[red]Error:[/red] Use only one of MESSAGE_FILE, --message and --ref")
    raise typer.Exit(EXIT_ERROR)

  try:
    if list_rules:
      _print_rules(config)
      return

    result = run_lint(
      message=message,
      message_file=message_file,
      ref=ref,
      prefix=prefix,
      config_path=config,
    )

    formatter = get_formatter(format_type)
    output = formatter.format(result)
    if output:
      console.print(output, markup=False, highlight=False, soft_wrap=True)

  except ConfigurationError as e:
    console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
    raise typer.Exit(EXIT_ERROR) from None
  except (GitError, MessageSourceError) as e:
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    raise typer.Exit(EXIT_ERROR) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc(), markup=False)
    raise typer.Exit(EXIT_ERROR) from None

  if not result.is_valid:
    raise typer.Exit(EXIT_VIOLATIONS)


def _print_rules(config_path: Path | None) -> None:
  """Print the active rules in the order they are checked."""
  validator = CommitMessageValidator(load_config(config_path))

  table = Table(show_header=True, header_style="bold")
  table.add_column("Rule", no_wrap=True)
  table.add_column("Name", no_wrap=True)
  table.add_column("Target")
  table.add_column("Severity")

  for rule in validator.rules:
    table.add_row(rule.id.value, rule.name, rule.target.value, rule.severity.value)

  console.print(table)


if __name__ == "__main__":
  app()
