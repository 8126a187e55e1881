"""Data models for attribute validation.

This module contains rule declarations, failure records and the failure
collector.
"""

from record_validations.models.enums import Rule
from record_validations.models.results import FailureRecord, ValidationErrors
from record_validations.models.rules import AttributeRules, AttributeSpec

__all__ = [
    "Rule",
    "AttributeRules",
    "AttributeSpec",
    "FailureRecord",
    "ValidationErrors",
]
