"""Validator for a single attribute.

Rules run in a fixed order. Presence and acceptance always run; the rest
only run when the attribute holds a value:

    presence, acceptance, [skip if None], format, type, inclusion,
    exclusion, size, confirmation

Only requested rules are evaluated, and each failed one appends a
FailureRecord to the record's error collector. A successful ``type``
coercion replaces the value, both for the rules that follow and in the
record itself.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from record_validations.coercions import CoercerFactory
from record_validations.config import ValidationSettings, get_settings
from record_validations.core.errors import (
    CoercionError,
    InvalidSizeQuantityError,
)
from record_validations.core.kernel import (
    is_blank,
    is_count,
    size_of,
    strictly_equal,
    to_boolean,
)
from record_validations.models import AttributeRules, FailureRecord, Rule
from record_validations.protocols import RecordContextProtocol

logger = logging.getLogger(__name__)


class AttributeSlot:
    """Read/write handle on one entry of a record's attribute mapping.

    Writes go straight through to the mapping.
    """

    def __init__(self, attributes: MutableMapping[str, Any], name: str) -> None:
        self._attributes = attributes
        self.name = name

    def get(self) -> Any:
        return self._attributes.get(self.name)

    def set(self, value: Any) -> None:
        self._attributes[self.name] = value

    def sibling(self, name: str) -> Any:
        """Read another attribute of the same record."""
        return self._attributes.get(name)


class AttributeValidator:
    """Validate one attribute of a record.

    An instance is bound to a single attribute and used for a single run.

    Example:
        >>> record = ValidatedRecord(age="42")
        >>> AttributeValidator(record, "age", {"type": int, "size": range(0, 121)}).validate()
        >>> record.attributes["age"]
        42
    """

    def __init__(
        self,
        record: RecordContextProtocol,
        name: str,
        rules: AttributeRules | Mapping[Any, Any],
        settings: ValidationSettings | None = None,
    ) -> None:
        """Initialize the validator and snapshot the attribute's value.

        Args:
            record: Record holding the attribute values and error collector.
            name: Name of the attribute to validate.
            rules: Rule declarations for the attribute.
            settings: Optional settings override.
        """
        self._record = record
        self._name = name
        if not isinstance(rules, AttributeRules):
            rules = AttributeRules.model_validate(rules)
        self._rules = rules
        self._settings = settings or get_settings()
        self._slot = AttributeSlot(record.attributes, name)
        self._value = self._slot.get()

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        """Current value, coerced if a coercion succeeded."""
        return self._value

    def validate(self) -> None:
        """Run the requested rules and record failures.

        Raises:
            ValidationConfigurationError: If a rule declaration is malformed.
        """
        self._presence()
        self._acceptance()

        if self._skip():
            return

        self._format()
        self._coerce()
        self._inclusion()
        self._exclusion()
        self._size()
        self._confirmation()

    def _skip(self) -> bool:
        return self._value is None

    def _presence(self) -> None:
        self._check(Rule.PRESENCE, lambda _: not is_blank(self._value))

    def _acceptance(self) -> None:
        self._check(Rule.ACCEPTANCE, lambda _: to_boolean(self._value))

    def _format(self) -> None:
        self._check(
            Rule.FORMAT,
            lambda pattern: re.compile(pattern).search(str(self._value)) is not None,
        )

    def _coerce(self) -> None:
        if not self._rules.is_requested(Rule.TYPE):
            return

        coercer = CoercerFactory.resolve(self._rules.coercion)
        try:
            coerced = coercer.coerce(self._value)
        except CoercionError:
            self._fail(Rule.TYPE)
            return

        self._value = coerced
        self._slot.set(coerced)

    def _inclusion(self) -> None:
        self._check(Rule.INCLUSION, lambda collection: self._value in collection)

    def _exclusion(self) -> None:
        self._check(Rule.EXCLUSION, lambda collection: self._value not in collection)

    def _size(self) -> None:
        def matches(quantity: Any) -> bool:
            if is_count(quantity):
                return size_of(self._value) == quantity
            if isinstance(quantity, range):
                return size_of(self._value) in quantity
            raise InvalidSizeQuantityError.for_rule(
                self._name,
                Rule.SIZE.value,
                f"Size validator must be a number or a range, it was: {quantity!r}",
                quantity,
            )

        self._check(Rule.SIZE, matches)

    def _confirmation(self) -> None:
        confirmation_name = self._settings.confirmation_name(self._name)
        self._check(
            Rule.CONFIRMATION,
            lambda _: strictly_equal(self._value, self._slot.sibling(confirmation_name)),
        )

    def _check(self, rule: Rule, predicate: Callable[[Any], bool]) -> None:
        """Evaluate ``predicate`` with the rule argument if the rule is requested."""
        if self._rules.is_requested(rule) and not predicate(self._rules.argument(rule)):
            self._fail(rule)

    def _fail(self, rule: Rule) -> None:
        failure = FailureRecord(self._name, rule, self._rules.argument(rule), self._value)
        self._record.errors.append(failure)
        if self._settings.log_failures:
            logger.debug("Validation failed: %s", failure)
