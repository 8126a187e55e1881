"""Result classes for attribute validation.

This module contains the failure record appended for every failed rule and
the collector that gathers them for one record.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from record_validations.models.enums import Rule


@dataclass(frozen=True)
class FailureRecord:
    """A failed rule of one attribute."""

    attribute: str
    rule: Rule
    expected: Any
    actual: Any

    def __str__(self) -> str:
        return (
            f"{self.attribute} failed {self.rule.value} "
            f"(expected {self.expected!r}, got {self.actual!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "attribute": self.attribute,
            "rule": self.rule.value,
            "expected": self.expected,
            "actual": self.actual,
        }


class ValidationErrors:
    """Append-only collector of failure records.

    Failures keep the order in which they were recorded. Attribute-level
    views preserve that order too.

    Example:
        >>> errors = ValidationErrors()
        >>> _ = errors.add("email", Rule.PRESENCE, True, None)
        >>> errors.rules_for("email")
        [<Rule.PRESENCE: 'presence'>]
    """

    def __init__(self) -> None:
        self._failures: list[FailureRecord] = []

    def append(self, failure: FailureRecord) -> None:
        """Record a failure."""
        self._failures.append(failure)

    def add(self, attribute: str, rule: Rule | str, expected: Any, actual: Any) -> FailureRecord:
        """Build and record a failure.

        Args:
            attribute: Name of the attribute that failed.
            rule: The failed rule.
            expected: The declared rule argument.
            actual: The attribute value at the time of the failure.

        Returns:
            The recorded FailureRecord.
        """
        failure = FailureRecord(attribute, Rule(rule), expected, actual)
        self.append(failure)
        return failure

    def for_attribute(self, attribute: str) -> list[FailureRecord]:
        """Get failures recorded for one attribute."""
        return [f for f in self._failures if f.attribute == attribute]

    def rules_for(self, attribute: str) -> list[Rule]:
        """Get the failed rules of one attribute."""
        return [f.rule for f in self.for_attribute(attribute)]

    def attributes(self) -> list[str]:
        """Get names of attributes with failures, in first-failure order."""
        return list(dict.fromkeys(f.attribute for f in self._failures))

    def is_empty(self) -> bool:
        return not self._failures

    def clear(self) -> None:
        """Drop all recorded failures."""
        self._failures.clear()

    def to_dict(self) -> dict[str, list[str]]:
        """Map attribute names to the names of their failed rules."""
        return {name: [r.value for r in self.rules_for(name)] for name in self.attributes()}

    def summary(self) -> dict[str, int]:
        """Count failures by rule name."""
        return dict(Counter(f.rule.value for f in self._failures))

    def audit_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export failures for DataFrame analysis.

        Args:
            source: Optional source identifier to add to each entry.

        Returns:
            List of dicts suitable for pd.DataFrame(), in recording order.
        """
        entries: list[dict[str, Any]] = []
        for failure in self._failures:
            d = failure.to_dict()
            if source:
                d["source"] = source
            entries.append(d)
        return entries

    def __iter__(self) -> Iterator[FailureRecord]:
        return iter(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __contains__(self, attribute: object) -> bool:
        return any(f.attribute == attribute for f in self._failures)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._failures!r})"
