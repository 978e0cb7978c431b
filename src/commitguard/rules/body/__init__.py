"""Commit body rules."""

from commitguard.rules.body.line_length import BodyLineLengthRule
from commitguard.rules.body.separator import BodySeparatorRule

__all__ = [
  "BodyLineLengthRule",
  "BodySeparatorRule",
]
