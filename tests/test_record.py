"""Tests for record-level validation."""

from __future__ import annotations

import pytest
from abstract_validation_base import ValidatorPipelineBuilder

from record_validations import (
    AttributeSpec,
    RecordInvalidError,
    RecordValidator,
    Rule,
    ValidatedRecord,
    ValidationSettings,
    validate_attributes,
)


class Signup(ValidatedRecord):
    pass


Signup.attribute("email", presence=True, format=r"\A[^@\s]+@[^@\s]+\Z")
Signup.attribute("age", type="integer", size=range(18, 121))
Signup.attribute("password", presence=True, size=range(8, 65), confirmation=True)
Signup.attribute("terms", acceptance=True)


class AdminSignup(Signup):
    pass


AdminSignup.attribute("role", inclusion=["admin", "owner"])


def valid_signup(**overrides: object) -> Signup:
    attributes = {
        "email": "jane@example.com",
        "age": "30",
        "password": "correct horse",
        "password_confirmation": "correct horse",
        "terms": "1",
    }
    attributes.update(overrides)
    return Signup(attributes)


class TestValidatedRecord:
    def test_valid_record(self) -> None:
        signup = valid_signup()
        assert signup.validate() is True
        assert signup.age == 30

    def test_failures_grouped_by_attribute(self) -> None:
        signup = valid_signup(email="", age="12", terms="0", password_confirmation="nope")
        assert signup.validate() is False
        assert signup.errors.to_dict() == {
            "email": ["presence", "format"],
            "age": ["size"],
            "password": ["confirmation"],
            "terms": ["acceptance"],
        }

    def test_revalidation_discards_previous_failures(self) -> None:
        signup = valid_signup(terms="0")
        assert not signup.is_valid
        signup.attributes["terms"] = True
        assert signup.is_valid
        assert len(signup.errors) == 0

    def test_declarations_in_order(self) -> None:
        names = [spec.name for spec in Signup.defined_attributes()]
        assert names == ["email", "age", "password", "terms"]

    def test_subclass_extends_parent_declarations(self) -> None:
        assert [s.name for s in AdminSignup.defined_attributes()][-1] == "role"
        assert "role" not in [s.name for s in Signup.defined_attributes()]

    def test_subclass_validates_inherited_rules(self) -> None:
        admin = AdminSignup({**valid_signup().to_dict(), "role": "guest", "email": "x"})
        assert not admin.validate()
        assert admin.errors.attributes() == ["email", "role"]

    def test_validate_or_raise(self) -> None:
        signup = valid_signup(email=None)
        with pytest.raises(RecordInvalidError, match="email failed presence") as exc_info:
            signup.validate_or_raise()
        assert [f.rule for f in exc_info.value.errors()] == [Rule.PRESENCE]

    def test_validate_or_raise_passes(self) -> None:
        valid_signup().validate_or_raise()

    def test_unknown_attribute_access(self) -> None:
        with pytest.raises(AttributeError):
            _ = valid_signup().nickname

    def test_confirmation_template_setting(self) -> None:
        settings = ValidationSettings(confirmation_template="confirm_{name}")
        signup = Signup(
            valid_signup(password_confirmation=None).to_dict(),
            settings=settings,
            confirm_password="correct horse",
        )
        assert signup.validate()


class TestRecordValidator:
    def test_result_reports_failures(self) -> None:
        result = RecordValidator().validate(valid_signup(terms=0))
        assert not result.is_valid
        assert [e.field for e in result.errors] == ["terms"]

    def test_result_for_valid_record(self) -> None:
        result = RecordValidator().validate(valid_signup())
        assert result.is_valid
        assert list(result.errors) == []

    def test_in_pipeline(self) -> None:
        builder: ValidatorPipelineBuilder[ValidatedRecord] = ValidatorPipelineBuilder("signup")
        builder.add(RecordValidator())
        pipeline = builder.build()
        result = pipeline.validate(valid_signup(email="nobody"))
        assert [e.field for e in result.errors] == ["email"]


class TestValidateAttributes:
    def test_plain_mapping(self) -> None:
        attributes = {"age": "42", "role": "guest"}
        specs = [
            AttributeSpec(name="age", rules={"type": int, "size": range(0, 121)}),
            AttributeSpec(name="role", rules={"inclusion": ["admin", "user"]}),
        ]
        errors = validate_attributes(attributes, specs)
        assert attributes["age"] == 42
        assert errors.to_dict() == {"role": ["inclusion"]}

    def test_audit_log(self) -> None:
        errors = validate_attributes(
            {"name": ""},
            [AttributeSpec(name="name", rules={"presence": True})],
        )
        assert errors.audit_log(source="import") == [
            {
                "attribute": "name",
                "rule": "presence",
                "expected": True,
                "actual": "",
                "source": "import",
            }
        ]
        assert errors.summary() == {"presence": 1}
