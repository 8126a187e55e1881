"""Attribute validation.

This module provides the per-attribute validator and the record-level
validators built on it.
"""

from record_validations.validation.attribute import AttributeSlot, AttributeValidator
from record_validations.validation.record import (
    RecordValidator,
    ValidatedRecord,
    validate_attributes,
)

__all__ = [
    "AttributeSlot",
    "AttributeValidator",
    "RecordValidator",
    "ValidatedRecord",
    "validate_attributes",
]
