from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from record_validations.core.errors import CoercionError

logger = logging.getLogger(__name__)


class BaseCoercer(ABC):
    """Abstract base class for coercers.

    Provides common error handling and logging. Subclasses must implement
    the _coerce_impl method and set the ``target`` type.
    """

    target: ClassVar[type[Any]]

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this coercer, as registered."""
        ...

    @abstractmethod
    def _coerce_impl(self, value: Any) -> Any:
        """Internal implementation of the conversion.

        Args:
            value: Raw value, never None.

        Returns:
            Converted value.

        Raises:
            ValueError, TypeError or ArithmeticError: If conversion fails.
        """
        ...

    def coerce(self, value: Any) -> Any:
        """Convert a single value.

        Args:
            value: Raw value to convert.

        Returns:
            Converted value.

        Raises:
            CoercionError: If the value cannot be converted.
        """
        try:
            result = self._coerce_impl(value)
        except CoercionError:
            raise
        except (ValueError, TypeError, ArithmeticError) as e:
            logger.warning("Failed to coerce %r to %s - %s", value, self.name, str(e))
            raise CoercionError.for_value(self.name, value, str(e)) from e

        logger.debug("Coerced %r to %s: %r", value, self.name, result)
        return result


class TypeCoercer(BaseCoercer):
    """Coercer for user-defined types.

    Calls the target's constructor with the raw value. Values that are
    already instances of the target are returned unchanged.
    """

    @property
    def name(self) -> str:
        return self.target.__name__

    def _coerce_impl(self, value: Any) -> Any:
        if isinstance(value, self.target):
            return value
        return self.target(value)
