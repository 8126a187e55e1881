"""Per-attribute rule declarations.

A rule is requested when its key is present with an argument other than
``None`` or ``False``. Requested rules are the only ones ever evaluated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from record_validations.models.enums import Rule


class AttributeRules(BaseModel):
    """Rule mapping for one attribute.

    Example:
        >>> rules = AttributeRules(presence=True, size=range(3, 65))
        >>> rules.is_requested(Rule.SIZE)
        True
        >>> AttributeRules.model_validate({"coerce": "integer"}).argument(Rule.TYPE)
        'integer'
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    presence: bool | None = None
    acceptance: bool | None = None
    format: str | re.Pattern[str] | None = None
    coercion: Any = Field(
        default=None,
        validation_alias=AliasChoices("type", "coerce", "coercion"),
    )
    inclusion: Any = None
    exclusion: Any = None
    size: Any = None
    confirmation: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        """Accept Rule members as keys."""
        if isinstance(data, Mapping):
            return {(k.value if isinstance(k, Rule) else k): v for k, v in data.items()}
        return data

    @field_validator("format")
    @classmethod
    def _check_pattern(cls, value: str | re.Pattern[str] | None) -> str | re.Pattern[str] | None:
        """Reject patterns that don't compile, keeping the declared form."""
        if isinstance(value, str):
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"invalid format pattern {value!r}: {e}") from e
        return value

    def argument(self, rule: Rule) -> Any:
        """Get the declared argument for ``rule`` (None if not declared)."""
        if rule is Rule.TYPE:
            return self.coercion
        return getattr(self, rule.value)

    def is_requested(self, rule: Rule) -> bool:
        """Check if ``rule`` should be evaluated."""
        argument = self.argument(rule)
        return argument is not None and argument is not False


class AttributeSpec(BaseModel):
    """Immutable declaration of one attribute and its rules."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    rules: AttributeRules = Field(default_factory=AttributeRules)

