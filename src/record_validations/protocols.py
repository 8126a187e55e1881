from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from record_validations.models import FailureRecord


@runtime_checkable
class ErrorCollectorProtocol(Protocol):
    """Protocol for append-only failure collectors.

    Implementations receive one FailureRecord per failed rule, in the order
    the rules ran.
    """

    def append(self, failure: FailureRecord) -> None:
        """Record a single failure.

        Args:
            failure: The failed rule of one attribute.
        """
        ...


@runtime_checkable
class RecordContextProtocol(Protocol):
    """Protocol for records validated attribute by attribute.

    The attribute validator reads and writes one entry of ``attributes``
    (and reads the confirmation entry), and appends to ``errors``.
    """

    @property
    def attributes(self) -> MutableMapping[str, Any]:
        """Attribute values by name."""
        ...

    @property
    def errors(self) -> ErrorCollectorProtocol:
        """Collector for failed rules."""
        ...


@runtime_checkable
class CoercerProtocol(Protocol):
    """Protocol for coercion implementations.

    Implementations convert a single raw value to their target type and
    raise CoercionError when the value cannot be converted.
    """

    def coerce(self, value: Any) -> Any:
        """Convert a raw value.

        Args:
            value: Raw value, never None.

        Returns:
            The converted value.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this coercer for error reporting."""
        ...
