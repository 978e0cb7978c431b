"""Tests for the commit message validator."""

import pytest
from commitguard import validate
from commitguard.config import ConfigurationError, ValidatorConfig
from commitguard.models import CommitMessage, RuleId, RuleTarget, Severity
from commitguard.rules import CommitMessageValidator, RuleMatch

PREFIX = "HLDTDOR- "


def _ids(result) -> list[RuleId]:
  return [v.rule_id for v in result.violations]


class MockRule:
  """Mock rule for testing."""

  def __init__(self, target: RuleTarget = RuleTarget.HEADER, matches: list[RuleMatch] | None = None):
    self._target = target
    self._matches = matches or []
    self.calls = 0

  @property
  def id(self) -> RuleId:
    return RuleId.MISSING_SCOPE

  @property
  def name(self) -> str:
    return "mock-rule"

  @property
  def target(self) -> RuleTarget:
    return self._target

  @property
  def severity(self) -> Severity:
    return Severity.INFO

  def check(self, message: CommitMessage) -> list[RuleMatch]:
    self.calls += 1
    return self._matches


class TestScenarios:
  def test_conforming_message_is_valid(
    self, validator: CommitMessageValidator, valid_message: str
  ) -> None:
    result = validator.validate(valid_message)

    assert result.is_valid
    assert list(result.violations) == []

  def test_missing_scope_reports_exactly_one_violation(
    self, validator: CommitMessageValidator
  ) -> None:
    result = validator.validate("HLDTDOR- fix: handle race condition")

    assert _ids(result) == [RuleId.MISSING_SCOPE]

  def test_capitalized_subject_with_period(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("HLDTDOR- feat(auth): Add login support.")

    assert _ids(result) == [RuleId.SUBJECT_NOT_LOWERCASE, RuleId.SUBJECT_TRAILING_PERIOD]

  def test_empty_string_is_malformed(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("")

    assert _ids(result) == [RuleId.MALFORMED_SUBJECT]

  def test_whitespace_only_is_malformed(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("   ")

    assert _ids(result) == [RuleId.MALFORMED_SUBJECT]

  def test_empty_commit_sentinel_is_valid(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("HLDTDOR- chore: empty commit")

    assert result.is_valid

  def test_sentinel_variant_is_not_exempt(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("HLDTDOR- chore: empty commit\n")

    assert _ids(result) == [RuleId.MISSING_SCOPE]

  def test_long_body_line(self, validator: CommitMessageValidator, valid_message: str) -> None:
    result = validator.validate(f"{valid_message}\n\n{'x' * 120}")

    assert _ids(result) == [RuleId.BODY_LINE_TOO_LONG]
    assert result.violations[0].line == 3
    assert "120" in result.violations[0].message


class TestSubjectBoundaries:
  def test_subject_of_72_characters_passes(self, validator: CommitMessageValidator) -> None:
    subject = "a" * 72
    result = validator.validate(f"{PREFIX}feat(core): {subject}")

    assert result.is_valid

  def test_subject_of_73_characters_fails(self, validator: CommitMessageValidator) -> None:
    subject = "a" * 73
    result = validator.validate(f"{PREFIX}feat(core): {subject}")

    assert _ids(result) == [RuleId.SUBJECT_TOO_LONG]

  def test_whitespace_scope_is_empty(self, validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{PREFIX}feat(   ): add things to core")

    assert _ids(result) == [RuleId.MISSING_SCOPE]

  def test_empty_parentheses_scope(self, validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{PREFIX}feat(): add things to core")

    assert _ids(result) == [RuleId.MISSING_SCOPE]

  def test_type_is_case_sensitive(self, validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{PREFIX}Feat(core): add things to core")

    assert _ids(result) == [RuleId.INVALID_TYPE]

  def test_unknown_type(self, validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{PREFIX}feature(core): add things to core")

    assert _ids(result) == [RuleId.INVALID_TYPE]

  def test_missing_prefix(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("feat(core): add things to core")

    assert _ids(result) == [RuleId.INVALID_PREFIX]

  def test_wrong_prefix(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("PROJ-42- feat(core): add things to core")

    assert _ids(result) == [RuleId.INVALID_PREFIX]
    assert "PROJ-42" in result.violations[0].message

  def test_prefix_glued_to_type(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("HLDTDOR-feat(core): add thing")

    assert _ids(result) == [RuleId.INVALID_PREFIX]
    assert "must be followed by" in result.violations[0].message

  def test_vague_subject(self, validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{PREFIX}fix(core): fix bug")

    assert _ids(result) == [RuleId.VAGUE_SUBJECT]
    assert result.violations[0].severity == Severity.WARNING


class TestMalformedSubject:
  @pytest.mark.parametrize("text", [
    "just some words",
    f"{PREFIX}feat(core):add things",
    f"{PREFIX}feat(core): ",
    f"{PREFIX}feat (core): add things",
    f"{PREFIX}feat(core)x: add things",
  ])
  def test_unparseable_subject_line(self, validator: CommitMessageValidator, text: str) -> None:
    result = validator.validate(text)

    assert _ids(result) == [RuleId.MALFORMED_SUBJECT]

  def test_malformed_subject_skips_header_rules(self, validator: CommitMessageValidator) -> None:
    # Lowercase, period and length problems would all fire on a parsed header
    result = validator.validate("This Is Not A Commit Header." + "x" * 80)

    assert _ids(result) == [RuleId.MALFORMED_SUBJECT]

  def test_body_rules_still_run(self, validator: CommitMessageValidator) -> None:
    result = validator.validate(f"nonsense\n\n{'y' * 101}")

    assert _ids(result) == [RuleId.MALFORMED_SUBJECT, RuleId.BODY_LINE_TOO_LONG]


class TestBody:
  def test_valid_body(self, validator: CommitMessageValidator, valid_message: str) -> None:
    text = f"{valid_message}\n\nFirst paragraph.\n\nSecond paragraph\nwith two lines."

    assert validator.validate(text).is_valid

  def test_missing_blank_line(self, validator: CommitMessageValidator, valid_message: str) -> None:
    result = validator.validate(f"{valid_message}\nbody right away")

    assert _ids(result) == [RuleId.BODY_SEPARATOR]
    assert result.violations[0].line == 2

  def test_two_blank_lines(self, validator: CommitMessageValidator, valid_message: str) -> None:
    result = validator.validate(f"{valid_message}\n\n\nbody")

    assert _ids(result) == [RuleId.BODY_SEPARATOR]
    assert "found 2" in result.violations[0].message

  def test_trailing_blank_lines_are_not_a_body(
    self, validator: CommitMessageValidator, valid_message: str
  ) -> None:
    assert validator.validate(f"{valid_message}\n\n").is_valid

  def test_body_line_at_limit_passes(
    self, validator: CommitMessageValidator, valid_message: str
  ) -> None:
    assert validator.validate(f"{valid_message}\n\n{'x' * 100}").is_valid

  def test_every_long_line_reported(
    self, validator: CommitMessageValidator, valid_message: str
  ) -> None:
    text = f"{valid_message}\n\n{'x' * 101}\nshort\n{'z' * 130}"
    result = validator.validate(text)

    assert _ids(result) == [RuleId.BODY_LINE_TOO_LONG, RuleId.BODY_LINE_TOO_LONG]
    assert [v.line for v in result.violations] == [3, 5]

  def test_crlf_line_endings(self, validator: CommitMessageValidator, valid_message: str) -> None:
    assert validator.validate(f"{valid_message}\r\n\r\nbody text").is_valid


class TestOrderingAndDeterminism:
  MESSY = "hldtdor- Feature(): Update " + "a" * 70 + ".\nbody"

  def test_all_rules_reported_in_fixed_order(self, validator: CommitMessageValidator) -> None:
    result = validator.validate(self.MESSY)

    assert _ids(result) == [
      RuleId.INVALID_PREFIX,
      RuleId.INVALID_TYPE,
      RuleId.MISSING_SCOPE,
      RuleId.SUBJECT_NOT_LOWERCASE,
      RuleId.SUBJECT_TOO_LONG,
      RuleId.SUBJECT_TRAILING_PERIOD,
      RuleId.BODY_SEPARATOR,
    ]

  def test_repeated_calls_are_equal(self, validator: CommitMessageValidator) -> None:
    first = validator.validate(self.MESSY)
    second = validator.validate(self.MESSY)

    assert first == second

  def test_function_and_class_agree(self, config: ValidatorConfig) -> None:
    assert validate(self.MESSY, config) == CommitMessageValidator(config).validate(self.MESSY)


class TestInputTooLarge:
  def test_oversized_input_fails_fast(self, validator: CommitMessageValidator) -> None:
    result = validator.validate("x" * 10_001)

    assert _ids(result) == [RuleId.INPUT_TOO_LARGE]

  def test_limit_is_inclusive(self) -> None:
    config = ValidatorConfig(max_message_length=80)
    text = "HLDTDOR- feat(core): " + "a" * 59

    assert len(text) == 80
    assert validate(text, config).is_valid


class TestConfiguration:
  def test_empty_prefix_is_rejected(self) -> None:
    with pytest.raises(ConfigurationError, match="prefix"):
      validate("anything", ValidatorConfig(prefix=""))

  def test_empty_type_set_is_rejected(self) -> None:
    with pytest.raises(ConfigurationError, match="allowed_types"):
      CommitMessageValidator(ValidatorConfig(allowed_types=[]))

  def test_zero_limit_is_rejected(self) -> None:
    with pytest.raises(ConfigurationError, match="max_subject_length"):
      CommitMessageValidator(ValidatorConfig(max_subject_length=0))

  def test_custom_prefix_and_types(self) -> None:
    config = ValidatorConfig(prefix="ABC", allowed_types=["build"])

    assert validate("ABC- build(ci): pin the runner image", config).is_valid
    assert validate("ABC- chore: empty commit", config).is_valid
    assert _ids(validate("ABC- feat(ci): pin the runner image", config)) == [RuleId.INVALID_TYPE]

  @pytest.mark.parametrize("prefix", ["PROJ 42", "JIRA:42", "T(1)"])
  def test_prefix_with_header_punctuation(self, prefix: str) -> None:
    config = ValidatorConfig(prefix=prefix)

    assert validate(f"{prefix}- feat(core): add thing", config).is_valid
    assert _ids(validate("OTHER- feat(core): add thing", config)) == [RuleId.INVALID_PREFIX]

  def test_missing_config_is_rejected(self) -> None:
    with pytest.raises(ConfigurationError, match="ValidatorConfig"):
      validate("HLDTDOR- feat(core): add thing", None)  # type: ignore[arg-type]


class TestInjectedRules:
  def test_header_rules_skipped_for_malformed_subject(self, config: ValidatorConfig) -> None:
    rule = MockRule(target=RuleTarget.HEADER, matches=[RuleMatch(message="seen")])
    validator = CommitMessageValidator(config, rules=[rule])

    validator.validate("not a header")

    assert rule.calls == 0

  def test_body_rules_skipped_without_body(
    self, config: ValidatorConfig, valid_message: str
  ) -> None:
    rule = MockRule(target=RuleTarget.BODY)
    validator = CommitMessageValidator(config, rules=[rule])

    validator.validate(valid_message)

    assert rule.calls == 0

  def test_matches_become_violations(self, config: ValidatorConfig, valid_message: str) -> None:
    rule = MockRule(matches=[RuleMatch(message="seen", line=1, suggestion="do it")])
    validator = CommitMessageValidator(config, rules=[rule])

    result = validator.validate(valid_message)

    assert len(result.violations) == 1
    violation = result.violations[0]
    assert violation.rule_id == RuleId.MISSING_SCOPE
    assert violation.severity == Severity.INFO
    assert violation.suggestion == "do it"
