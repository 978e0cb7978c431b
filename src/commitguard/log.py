"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "commitguard"


def configure_logging(debug: bool = False) -> logging.Logger:
  """Route commitguard log records to stderr through rich.

  Safe to call more than once; the handler is replaced, not stacked.
  """
  logger = logging.getLogger(LOGGER_NAME)
  logger.setLevel(logging.DEBUG if debug else logging.WARNING)

  for handler in list(logger.handlers):
    if isinstance(handler, RichHandler):
      logger.removeHandler(handler)

  logger.addHandler(RichHandler(
    console=Console(stderr=True),
    show_time=False,
    show_path=debug,
    markup=False,
  ))
  logger.propagate = False
  return logger
