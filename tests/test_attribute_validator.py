"""Tests for AttributeValidator rule evaluation."""

from __future__ import annotations

import re
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pydantic
import pytest

from record_validations import (
    AttributeRules,
    AttributeValidator,
    CoercerSignatureError,
    FailureRecord,
    InvalidSizeQuantityError,
    Rule,
    UnknownCoercionTypeError,
    ValidatedRecord,
    ValidationConfigurationError,
)


def run(rules: dict[Any, Any], name: str = "value", **attributes: Any) -> ValidatedRecord:
    """Validate one attribute of a fresh record and return the record."""
    record = ValidatedRecord(attributes)
    AttributeValidator(record, name, rules).validate()
    return record


def failed_rules(record: ValidatedRecord, name: str = "value") -> list[Rule]:
    return record.errors.rules_for(name)


class Money:
    def __init__(self, amount: Any) -> None:
        self.amount = round(float(amount), 2)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Money) and other.amount == self.amount


class Range2D:
    def __init__(self, low: Any, high: Any) -> None:
        self.low, self.high = low, high


# =============================================================================
# Scenarios
# =============================================================================


class TestScenarios:
    def test_age_coerced_and_sized(self) -> None:
        record = run({"type": "Integer", "size": range(0, 121)}, name="age", age="42")
        assert record.errors.is_empty()
        assert record.attributes["age"] == 42

    def test_password_confirmation_mismatch(self) -> None:
        record = run(
            {"confirmation": True},
            name="password",
            password="x",
            password_confirmation="y",
        )
        assert list(record.errors) == [
            FailureRecord("password", Rule.CONFIRMATION, True, "x"),
        ]

    def test_missing_email_fails_presence_only(self) -> None:
        record = run(
            {"presence": True, "format": r"@", "size": 3, "inclusion": ["a@b.c"]},
            name="email",
            email=None,
        )
        assert failed_rules(record, "email") == [Rule.PRESENCE]

    def test_role_not_included(self) -> None:
        record = run({"inclusion": ["admin", "user"]}, name="role", role="guest")
        (failure,) = record.errors
        assert failure.rule is Rule.INCLUSION
        assert failure.expected == ["admin", "user"]
        assert failure.actual == "guest"


# =============================================================================
# Presence and acceptance
# =============================================================================


class TestPresence:
    @pytest.mark.parametrize("value", [None, "", [], {}, (), set()])
    def test_blank_values_fail(self, value: Any) -> None:
        assert failed_rules(run({"presence": True}, value=value)) == [Rule.PRESENCE]

    @pytest.mark.parametrize("value", [" ", "x", [None], 0, False, object()])
    def test_present_values_pass(self, value: Any) -> None:
        assert failed_rules(run({"presence": True}, value=value)) == []

    def test_missing_key_is_blank(self) -> None:
        assert failed_rules(run({"presence": True})) == [Rule.PRESENCE]

    def test_false_argument_is_not_requested(self) -> None:
        assert failed_rules(run({"presence": False}, value=None)) == []


class TestAcceptance:
    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "0"])
    def test_falsey_values_fail(self, value: Any) -> None:
        assert failed_rules(run({"acceptance": True}, value=value)) == [Rule.ACCEPTANCE]

    @pytest.mark.parametrize("value", [True, 1, "1", "yes", "false", object(), 2])
    def test_truthy_values_pass(self, value: Any) -> None:
        assert failed_rules(run({"acceptance": True}, value=value)) == []

    def test_acceptance_runs_for_missing_values(self) -> None:
        record = run({"presence": True, "acceptance": True}, value=None)
        assert failed_rules(record) == [Rule.PRESENCE, Rule.ACCEPTANCE]


# =============================================================================
# Skip gate
# =============================================================================


class TestSkipGate:
    def test_none_skips_remaining_rules(self) -> None:
        rules = {
            "format": r"\d",
            "type": "integer",
            "inclusion": [1],
            "exclusion": [None],
            "size": 2,
            "confirmation": True,
        }
        record = run(rules, value=None, value_confirmation="other")
        assert record.errors.is_empty()

    def test_none_skips_malformed_size(self) -> None:
        record = run({"size": "ten"}, value=None)
        assert record.errors.is_empty()

    def test_empty_string_is_not_skipped(self) -> None:
        record = run({"presence": True, "format": r"x", "size": 1}, value="")
        assert failed_rules(record) == [Rule.PRESENCE, Rule.FORMAT, Rule.SIZE]


# =============================================================================
# Format
# =============================================================================


class TestFormat:
    def test_match_passes(self) -> None:
        assert failed_rules(run({"format": r"\A\w+@\w+\.\w+\Z"}, value="a@b.io")) == []

    def test_mismatch_fails(self) -> None:
        record = run({"format": r"\A\d+\Z"}, value="12a")
        (failure,) = record.errors
        assert failure.rule is Rule.FORMAT
        assert failure.expected == r"\A\d+\Z"

    def test_value_is_matched_as_text(self) -> None:
        assert failed_rules(run({"format": r"\A\d+\Z"}, value=123)) == []

    def test_compiled_pattern(self) -> None:
        matcher = re.compile(r"^abc", re.IGNORECASE)
        assert failed_rules(run({"format": matcher}, value="ABCdef")) == []

    def test_compiled_pattern_reported_as_declared(self) -> None:
        matcher = re.compile(r"\Axyz")
        (failure,) = run({"format": matcher}, value="abc").errors
        assert failure.expected == matcher

    def test_invalid_pattern_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="invalid format pattern"):
            AttributeRules(format="(unclosed")


# =============================================================================
# Coercion
# =============================================================================


class TestCoercion:
    def test_coerced_value_written_back(self) -> None:
        record = ValidatedRecord(value="7")
        validator = AttributeValidator(record, "value", {"type": int})
        validator.validate()
        assert validator.value == 7
        assert record.attributes["value"] == 7

    def test_coerce_alias(self) -> None:
        assert run({"coerce": "float"}, value="1.5").attributes["value"] == 1.5

    def test_coerced_value_seen_by_inclusion(self) -> None:
        assert failed_rules(run({"type": int, "inclusion": [1, 2, 3]}, value="2")) == []

    def test_coerced_value_seen_by_exclusion(self) -> None:
        assert failed_rules(run({"type": int, "exclusion": [2]}, value="2")) == [Rule.EXCLUSION]

    def test_coerced_value_seen_by_confirmation(self) -> None:
        record = run({"type": int, "confirmation": True}, value="5", value_confirmation=5)
        assert record.errors.is_empty()

    def test_coerced_value_reported_in_failures(self) -> None:
        record = run({"type": int, "inclusion": [1]}, value="2")
        (failure,) = record.errors
        assert failure.actual == 2

    def test_failed_coercion_is_recorded(self) -> None:
        record = run({"type": "integer", "inclusion": [1, 2]}, value="abc")
        assert failed_rules(record) == [Rule.TYPE, Rule.INCLUSION]
        type_failure = record.errors.for_attribute("value")[0]
        assert type_failure.expected == "integer"
        assert type_failure.actual == "abc"
        assert record.attributes["value"] == "abc"

    def test_custom_single_argument_type(self) -> None:
        record = run({"type": Money}, value="9.999")
        assert record.attributes["value"] == Money(10)

    def test_custom_type_conversion_failure(self) -> None:
        assert failed_rules(run({"type": Money}, value="lots")) == [Rule.TYPE]

    def test_custom_type_with_wrong_arity_is_fatal(self) -> None:
        with pytest.raises(CoercerSignatureError):
            run({"type": Range2D}, value="1")

    def test_unknown_type_name_is_fatal(self) -> None:
        with pytest.raises(UnknownCoercionTypeError):
            run({"type": "roman_numeral"}, value="XII")


# =============================================================================
# Inclusion / exclusion
# =============================================================================


class TestInclusionExclusion:
    def test_inclusion_in_range(self) -> None:
        assert failed_rules(run({"inclusion": range(1, 11)}, value=10)) == []
        assert failed_rules(run({"inclusion": range(1, 11)}, value=11)) == [Rule.INCLUSION]

    def test_exclusion(self) -> None:
        assert failed_rules(run({"exclusion": {"root"}}, value="root")) == [Rule.EXCLUSION]
        assert failed_rules(run({"exclusion": {"root"}}, value="jane")) == []

    def test_complements(self) -> None:
        collection = ["a", "b"]
        for value in ("a", "z"):
            record = run({"inclusion": collection, "exclusion": collection}, value=value)
            assert len(record.errors) == 1


# =============================================================================
# Size
# =============================================================================


class TestSize:
    @pytest.mark.parametrize(("value", "passes"), [("abc", True), ("ab", False), ("abcd", False)])
    def test_exact_count(self, value: str, passes: bool) -> None:
        assert (failed_rules(run({"size": 3}, value=value)) == []) is passes

    @pytest.mark.parametrize(("length", "passes"), [(0, False), (1, True), (3, True), (4, False)])
    def test_range(self, length: int, passes: bool) -> None:
        record = run({"size": range(1, 4)}, value=["x"] * length)
        assert (failed_rules(record) == []) is passes

    def test_numbers_are_their_own_size(self) -> None:
        assert failed_rules(run({"size": range(0, 121)}, value=42)) == []
        assert failed_rules(run({"size": range(0, 121)}, value=121)) == [Rule.SIZE]

    @pytest.mark.parametrize("quantity", [Decimal(3), Fraction(3), 3.0])
    def test_other_numeric_counts(self, quantity: Any) -> None:
        assert failed_rules(run({"size": quantity}, value="abc")) == []
        assert failed_rules(run({"size": quantity}, value="abcd")) == [Rule.SIZE]

    @pytest.mark.parametrize("quantity", ["3", 3.5j, [1, 2], (1, 3), True])
    def test_other_quantities_are_fatal(self, quantity: Any) -> None:
        with pytest.raises(InvalidSizeQuantityError, match="must be a number or a range"):
            run({"size": quantity}, value="abc")

    def test_size_error_is_a_configuration_error(self) -> None:
        with pytest.raises(ValidationConfigurationError):
            run({"size": "3"}, value="abc")

    def test_unsized_value_is_a_defect(self) -> None:
        with pytest.raises(TypeError):
            run({"size": 1}, value=object())


# =============================================================================
# Confirmation
# =============================================================================


class TestConfirmation:
    def test_equal_values_pass(self) -> None:
        record = run({"confirmation": True}, value="s3cret", value_confirmation="s3cret")
        assert record.errors.is_empty()

    def test_missing_confirmation_fails(self) -> None:
        assert failed_rules(run({"confirmation": True}, value="s3cret")) == [Rule.CONFIRMATION]

    def test_comparison_is_strict(self) -> None:
        record = run({"confirmation": True}, value="1", value_confirmation=1)
        assert failed_rules(record) == [Rule.CONFIRMATION]

    @pytest.mark.parametrize(("value", "other"), [(1, 1.0), (True, 1), (0, False)])
    def test_equal_values_of_different_types_fail(self, value: Any, other: Any) -> None:
        record = run({"confirmation": True}, value=value, value_confirmation=other)
        assert failed_rules(record) == [Rule.CONFIRMATION]


# =============================================================================
# Declarations
# =============================================================================


class TestDeclarations:
    def test_undeclared_rules_never_run(self) -> None:
        assert run({}, value="anything").errors.is_empty()

    def test_rule_enum_keys(self) -> None:
        assert failed_rules(run({Rule.PRESENCE: True}, value="")) == [Rule.PRESENCE]

    def test_unknown_rule_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            AttributeValidator(ValidatedRecord(), "value", {"uniqueness": True})

    def test_accepts_attribute_rules(self) -> None:
        record = ValidatedRecord(value="")
        AttributeValidator(record, "value", AttributeRules(presence=True)).validate()
        assert failed_rules(record) == [Rule.PRESENCE]

    def test_failures_follow_rule_order(self) -> None:
        rules = {
            "confirmation": True,
            "size": 10,
            "exclusion": ["abc"],
            "inclusion": ["x"],
            "format": r"\d",
        }
        record = run(rules, value="abc")
        assert failed_rules(record) == [
            Rule.FORMAT,
            Rule.INCLUSION,
            Rule.EXCLUSION,
            Rule.SIZE,
            Rule.CONFIRMATION,
        ]

    def test_value_snapshot_taken_at_construction(self) -> None:
        record = ValidatedRecord(value=None)
        validator = AttributeValidator(record, "value", {"presence": True})
        record.attributes["value"] = "late"
        validator.validate()
        assert failed_rules(record) == [Rule.PRESENCE]
