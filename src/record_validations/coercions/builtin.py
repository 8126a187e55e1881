"""Built-in coercers.

Most conversions go through pydantic's lax-mode validation, so the accepted
inputs match what a pydantic model field of the same type would accept.
"""

from __future__ import annotations

import datetime as dt
import math
from decimal import Decimal
from pathlib import Path
from typing import Any, ClassVar

from pydantic import TypeAdapter

from record_validations.coercions.base import BaseCoercer
from record_validations.core.kernel import to_boolean


class PydanticCoercer(BaseCoercer):
    """Coercer backed by a pydantic TypeAdapter for ``target``."""

    _adapter: ClassVar[TypeAdapter[Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "target" in cls.__dict__:
            cls._adapter = TypeAdapter(cls.target)

    def _coerce_impl(self, value: Any) -> Any:
        return self._adapter.validate_python(value)


class IntegerCoercer(PydanticCoercer):
    """Integers. Finite floats are truncated towards zero."""

    target = int

    @property
    def name(self) -> str:
        return "integer"

    def _coerce_impl(self, value: Any) -> Any:
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return super()._coerce_impl(value)


class FloatCoercer(PydanticCoercer):
    target = float

    @property
    def name(self) -> str:
        return "float"


class DecimalCoercer(PydanticCoercer):
    target = Decimal

    @property
    def name(self) -> str:
        return "decimal"


class BooleanCoercer(BaseCoercer):
    """Booleans, using the same permissive reading as the acceptance rule."""

    target = bool

    @property
    def name(self) -> str:
        return "boolean"

    def _coerce_impl(self, value: Any) -> Any:
        return to_boolean(value)


class StringCoercer(BaseCoercer):
    target = str

    @property
    def name(self) -> str:
        return "string"

    def _coerce_impl(self, value: Any) -> Any:
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)


class ArrayCoercer(PydanticCoercer):
    target = list

    @property
    def name(self) -> str:
        return "array"


class SetCoercer(PydanticCoercer):
    target = set

    @property
    def name(self) -> str:
        return "set"


class HashCoercer(PydanticCoercer):
    target = dict

    @property
    def name(self) -> str:
        return "hash"


class DateCoercer(PydanticCoercer):
    target = dt.date

    @property
    def name(self) -> str:
        return "date"

    def _coerce_impl(self, value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.date()
        return super()._coerce_impl(value)


class DateTimeCoercer(PydanticCoercer):
    target = dt.datetime

    @property
    def name(self) -> str:
        return "datetime"

    def _coerce_impl(self, value: Any) -> Any:
        if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
            return dt.datetime.combine(value, dt.time())
        return super()._coerce_impl(value)


class TimeCoercer(PydanticCoercer):
    target = dt.time

    @property
    def name(self) -> str:
        return "time"


class PathCoercer(PydanticCoercer):
    target = Path

    @property
    def name(self) -> str:
        return "path"


BUILTIN_COERCERS: tuple[type[BaseCoercer], ...] = (
    IntegerCoercer,
    FloatCoercer,
    DecimalCoercer,
    BooleanCoercer,
    StringCoercer,
    ArrayCoercer,
    SetCoercer,
    HashCoercer,
    DateCoercer,
    DateTimeCoercer,
    TimeCoercer,
    PathCoercer,
)
