"""record_validations core - errors, predicates and the plugin factory.

Usage:
    from record_validations.core import (
        # Errors
        RecordValidationsError,
        ValidationConfigurationError,
        CoercionError,
        # Predicates
        to_boolean,
        is_blank,
        # Factory
        PluginFactory,
    )
"""

from __future__ import annotations

from record_validations.core.errors import (
    PACKAGE_NAME,
    CoercerSignatureError,
    CoercionError,
    DuplicateCoercerError,
    InvalidSizeQuantityError,
    RecordInvalidError,
    RecordValidationsError,
    UnknownCoercionTypeError,
    ValidationConfigurationError,
)
from record_validations.core.factory import PluginFactory
from record_validations.core.kernel import (
    is_blank,
    is_count,
    size_of,
    strictly_equal,
    to_boolean,
)

__all__ = [
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
    "size_of",
    "is_count",
    "strictly_equal",
    # Factory
    "PluginFactory",
]
