"""Type coercion registry and built-in coercers."""

from record_validations.coercions.base import BaseCoercer, TypeCoercer
from record_validations.coercions.factory import CoercerFactory, coerce

__all__ = ["BaseCoercer", "CoercerFactory", "TypeCoercer", "coerce"]
