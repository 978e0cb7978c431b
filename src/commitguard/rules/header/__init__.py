"""Subject line rules."""

from commitguard.rules.header.casing import SubjectCasingRule
from commitguard.rules.header.commit_type import CommitTypeRule
from commitguard.rules.header.prefix import PrefixRule
from commitguard.rules.header.punctuation import TrailingPeriodRule
from commitguard.rules.header.scope import ScopeRule
from commitguard.rules.header.subject_length import SubjectLengthRule
from commitguard.rules.header.vague import VagueSubjectRule

__all__ = [
  "CommitTypeRule",
  "PrefixRule",
  "ScopeRule",
  "SubjectCasingRule",
  "SubjectLengthRule",
  "TrailingPeriodRule",
  "VagueSubjectRule",
]
