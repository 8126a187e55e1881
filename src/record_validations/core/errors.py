"""Error classes with package identification.

Configuration errors are fatal and abort a validation run. Coercion errors
describe a single value that could not be converted and are turned into
recorded ``type`` failures by the attribute validator.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "record_validations"


class RecordValidationsError(PydanticCustomError):
    """Base error for record_validations.

    Inherits from PydanticCustomError so errors carry a type, a message
    template and a context dict, and can be raised from inside pydantic
    validators without being re-wrapped.
    """

    @classmethod
    def build(
        cls,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> RecordValidationsError:
        """Create an error with the package entry added to its context.

        Args:
            error_type: Type/category of the error.
            message: Error message (can include {placeholders} from context).
            context: Additional context dict (optional).

        Returns:
            Error instance of the calling class.
        """
        return cls(error_type, message, {"package": PACKAGE_NAME, **(context or {})})


class ValidationConfigurationError(RecordValidationsError):
    """A rule declaration is malformed.

    Raised while validating, never recorded as a field failure.
    """

    @classmethod
    def for_rule(
        cls,
        attribute: str,
        rule: str,
        message: str,
        argument: Any = None,
    ) -> ValidationConfigurationError:
        """Create a configuration error for one rule of one attribute."""
        return cls.build(  # type: ignore[return-value]
            "configuration_error",
            message,
            {"attribute": attribute, "rule": rule, "argument": repr(argument)},
        )


class InvalidSizeQuantityError(ValidationConfigurationError):
    """Size quantity is neither a count nor a range."""


class UnknownCoercionTypeError(ValidationConfigurationError):
    """Coercion type descriptor is not registered and cannot be registered."""


class CoercerSignatureError(ValidationConfigurationError):
    """Converter constructor does not accept exactly one value."""


class DuplicateCoercerError(ValidationConfigurationError):
    """Registry name already converts to a different class."""


class CoercionError(RecordValidationsError):
    """A value cannot be converted to the requested type."""

    @classmethod
    def for_value(cls, target: str, value: Any, reason: str = "") -> CoercionError:
        """Create a coercion error for ``value``.

        Args:
            target: Name of the coercion target.
            value: The value that failed to convert.
            reason: Optional detail from the underlying converter.

        Returns:
            CoercionError instance.
        """
        message = f"cannot coerce {value!r} to {target}"
        if reason:
            message = f"{message}: {reason}"
        return cls.build(  # type: ignore[return-value]
            "coercion_error",
            message,
            {"target": target, "value": repr(value)},
        )


class RecordInvalidError(Exception):
    """Raised when a validated record has recorded failures.

    Provides access to the collected failures while keeping a readable
    message.
    """

    def __init__(self, errors: Any, context: dict | None = None):
        """Initialize RecordInvalidError.

        Args:
            errors: The ValidationErrors collector of the record.
            context: Optional additional context to include.
        """
        self.errors_list = list(errors)
        self.context = {"package": PACKAGE_NAME, **(context or {})}
        messages = "; ".join(str(failure) for failure in self.errors_list)
        super().__init__(messages or "record is invalid")

    def errors(self) -> list:
        """Get the list of failure records."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"RecordInvalidError({self.errors_list!r}, context={self.context})"
