"""record_validations: declarative attribute validation for record-like objects.

This package provides:
- A per-attribute validator with a fixed rule order (presence, acceptance,
  format, type coercion, inclusion, exclusion, size, confirmation)
- Structured failure records collected per record
- A pluggable coercion registry
- A declarative record base class
- Pandas integration

Quick Start:
    >>> from record_validations import ValidatedRecord
    >>> class Person(ValidatedRecord):
    ...     pass
    >>> _ = Person.attribute("age", type="integer", size=range(0, 121))
    >>> person = Person(age="42")
    >>> person.validate()
    True
    >>> person.age
    42

    # Validate a single attribute of any record context
    >>> from record_validations import AttributeValidator
    >>> record = Person(role="guest")
    >>> AttributeValidator(record, "role", {"inclusion": ["admin", "user"]}).validate()
    >>> record.errors.to_dict()
    {'role': ['inclusion']}
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from record_validations.core import (
    PACKAGE_NAME,
    CoercerSignatureError,
    CoercionError,
    DuplicateCoercerError,
    InvalidSizeQuantityError,
    PluginFactory,
    RecordInvalidError,
    RecordValidationsError,
    UnknownCoercionTypeError,
    ValidationConfigurationError,
    is_blank,
    to_boolean,
)
from record_validations.config import ValidationSettings, get_settings
from record_validations.models import (
    AttributeRules,
    AttributeSpec,
    FailureRecord,
    Rule,
    ValidationErrors,
)
from record_validations.coercions import BaseCoercer, CoercerFactory, TypeCoercer, coerce
from record_validations.protocols import (
    CoercerProtocol,
    ErrorCollectorProtocol,
    RecordContextProtocol,
)
from record_validations.validation import (
    AttributeSlot,
    AttributeValidator,
    RecordValidator,
    ValidatedRecord,
    validate_attributes,
)
from record_validations.pandas_ext import failures_to_frame, validate_dataframe

__version__ = "0.1.0"

__all__ = [
    # Validation
    "AttributeValidator",
    "AttributeSlot",
    "ValidatedRecord",
    "RecordValidator",
    "validate_attributes",
    # Models
    "Rule",
    "AttributeRules",
    "AttributeSpec",
    "FailureRecord",
    "ValidationErrors",
    # Coercion
    "BaseCoercer",
    "TypeCoercer",
    "CoercerFactory",
    "coerce",
    # Protocols
    "CoercerProtocol",
    "ErrorCollectorProtocol",
    "RecordContextProtocol",
    # Errors
    "PACKAGE_NAME",
    "RecordValidationsError",
    "ValidationConfigurationError",
    "InvalidSizeQuantityError",
    "UnknownCoercionTypeError",
    "CoercerSignatureError",
    "DuplicateCoercerError",
    "CoercionError",
    "RecordInvalidError",
    # Predicates
    "to_boolean",
    "is_blank",
    # Plugin registry
    "PluginFactory",
    # Configuration
    "ValidationSettings",
    "get_settings",
    # Pandas
    "failures_to_frame",
    "validate_dataframe",
]
