"""Records with declared attribute rules.

ValidatedRecord is the enclosing validator: it keeps the attribute values of
one record, the rules declared for its class, and the failures of the last
validation run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, ClassVar

from abstract_validation_base import BaseValidator, ValidationResult

from record_validations.config import ValidationSettings
from record_validations.core.errors import RecordInvalidError
from record_validations.models import AttributeSpec, ValidationErrors
from record_validations.validation.attribute import AttributeValidator

logger = logging.getLogger(__name__)


class ValidatedRecord:
    """Base class for records validated attribute by attribute.

    Rules are declared per class and inherited by subclasses. Attributes are
    validated in declaration order.

    Example:
        class Signup(ValidatedRecord):
            pass

        Signup.attribute("email", presence=True, format=r".+@.+")
        Signup.attribute("password", presence=True, confirmation=True)

        signup = Signup(email="a@b.c", password="x", password_confirmation="y")
        signup.validate()          # False
        signup.errors.to_dict()    # {"password": ["confirmation"]}
    """

    _attribute_specs: ClassVar[dict[str, AttributeSpec]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Subclasses extend a copy of the parent's declarations
        cls._attribute_specs = dict(cls._attribute_specs)

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        *,
        settings: ValidationSettings | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the record.

        Args:
            attributes: Initial attribute values (optional).
            settings: Optional settings override for validation runs.
            **kwargs: Additional attribute values.
        """
        self._attributes: dict[str, Any] = {**(attributes or {}), **kwargs}
        self._errors = ValidationErrors()
        self._settings = settings

    @classmethod
    def attribute(cls, name: str, **rules: Any) -> AttributeSpec:
        """Declare the rules of an attribute.

        Redeclaring an attribute replaces its rules.

        Args:
            name: Attribute name.
            **rules: Rule arguments, e.g. ``presence=True, size=range(1, 33)``.

        Returns:
            The declared AttributeSpec.
        """
        spec = AttributeSpec(name=name, rules=rules)
        cls._attribute_specs[name] = spec
        return spec

    @classmethod
    def defined_attributes(cls) -> list[AttributeSpec]:
        """Get declared attributes, in declaration order."""
        return list(cls._attribute_specs.values())

    @property
    def attributes(self) -> MutableMapping[str, Any]:
        return self._attributes

    @property
    def errors(self) -> ValidationErrors:
        return self._errors

    def validate(self) -> bool:
        """Validate all declared attributes.

        Failures of previous runs are discarded first.

        Returns:
            True if no rule failed.

        Raises:
            ValidationConfigurationError: If a rule declaration is malformed.
        """
        self._errors.clear()
        for spec in self.defined_attributes():
            AttributeValidator(self, spec.name, spec.rules, settings=self._settings).validate()

        logger.debug("Validated %s: %d failure(s)", type(self).__name__, len(self._errors))
        return self._errors.is_empty()

    @property
    def is_valid(self) -> bool:
        """Run validations and report whether the record passed."""
        return self.validate()

    def validate_or_raise(self) -> None:
        """Validate and raise if any rule failed.

        Raises:
            RecordInvalidError: If any rule failed.
        """
        if not self.validate():
            raise RecordInvalidError(self._errors, {"record": type(self).__name__})

    def to_dict(self) -> dict[str, Any]:
        """Get a copy of the attribute values."""
        return dict(self._attributes)

    def __getattr__(self, name: str) -> Any:
        attributes = self.__dict__.get("_attributes")
        if attributes is not None and name in attributes:
            return attributes[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"


class RecordValidator(BaseValidator[ValidatedRecord]):
    """Validator adapter producing a ValidationResult for a record.

    Lets records take part in validator pipelines built with
    ValidatorPipelineBuilder.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "record_attributes"

    def validate(self, record: ValidatedRecord) -> ValidationResult:
        """Validate a record.

        Args:
            record: Record to validate.

        Returns:
            ValidationResult with one error per failed rule.
        """
        passed = record.validate()
        result = ValidationResult(is_valid=passed)
        for failure in record.errors:
            result.add_error(
                field=failure.attribute,
                message=str(failure),
                value=failure.actual,
            )
        return result


def validate_attributes(
    attributes: MutableMapping[str, Any],
    specs: Iterable[AttributeSpec],
    settings: ValidationSettings | None = None,
) -> ValidationErrors:
    """Validate a plain mapping against attribute specs.

    Coerced values are written back into ``attributes``.

    Args:
        attributes: Attribute values by name.
        specs: Declarations to validate, in order.
        settings: Optional settings override.

    Returns:
        ValidationErrors with the failures of all attributes.
    """
    record = _MappingRecord(attributes)
    for spec in specs:
        AttributeValidator(record, spec.name, spec.rules, settings=settings).validate()
    return record.errors


class _MappingRecord:
    """Record context over a caller-owned mapping."""

    def __init__(self, attributes: MutableMapping[str, Any]) -> None:
        self.attributes = attributes
        self.errors = ValidationErrors()
