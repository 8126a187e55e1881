"""Rule name enumeration."""

from __future__ import annotations

from enum import Enum


class Rule(str, Enum):
    """Enumeration of all validation rules, in evaluation order."""

    PRESENCE = "presence"
    ACCEPTANCE = "acceptance"
    FORMAT = "format"
    TYPE = "type"
    INCLUSION = "inclusion"
    EXCLUSION = "exclusion"
    SIZE = "size"
    CONFIRMATION = "confirmation"

    def __str__(self) -> str:
        return self.value

