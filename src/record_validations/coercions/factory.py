from __future__ import annotations

import inspect
from typing import Any, ClassVar

from record_validations.coercions.base import BaseCoercer, TypeCoercer
from record_validations.core.errors import (
    CoercerSignatureError,
    DuplicateCoercerError,
    UnknownCoercionTypeError,
)
from record_validations.core.factory import PluginFactory
from record_validations.protocols import CoercerProtocol


def _accepts_single_value(target: type[Any]) -> bool:
    """Check that ``target(value)`` is a valid call shape.

    Types whose signature cannot be introspected (some C-implemented types)
    are accepted as they are.
    """
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return True

    required = 0
    positional = 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            positional += 1
        elif param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional += 1
            if param.default is param.empty:
                required += 1
        elif param.kind is param.KEYWORD_ONLY and param.default is param.empty:
            return False
    return required == 1 or (required == 0 and positional > 0)


class CoercerFactory(PluginFactory[CoercerProtocol]):
    """Registry of coercers, keyed by case-insensitive name.

    Built-in coercers are also reachable through their Python type
    (``int``, ``Decimal``, ...). User-defined classes can be registered as
    converters as long as their constructor takes exactly one value.

    Example:
        >>> CoercerFactory.create("integer").coerce("42")
        42
        >>> CoercerFactory.resolve(int).coerce("42")
        42

        # Register a custom type
        >>> CoercerFactory.register_type(EmailAddress)
        >>> CoercerFactory.create("emailaddress").coerce("a@b.c")
    """

    _registry: ClassVar[dict[str, type[CoercerProtocol]]] = {}
    _types: ClassVar[dict[type[Any], str]] = {}
    _entity_name: ClassVar[str] = "coercer"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure built-in coercers are registered."""
        if "integer" not in cls._registry:
            from record_validations.coercions import builtin

            defaults: dict[str, type[BaseCoercer]] = {
                "integer": builtin.IntegerCoercer,
                "float": builtin.FloatCoercer,
                "decimal": builtin.DecimalCoercer,
                "boolean": builtin.BooleanCoercer,
                "string": builtin.StringCoercer,
                "array": builtin.ArrayCoercer,
                "set": builtin.SetCoercer,
                "hash": builtin.HashCoercer,
                "date": builtin.DateCoercer,
                "datetime": builtin.DateTimeCoercer,
                "time": builtin.TimeCoercer,
                "path": builtin.PathCoercer,
            }
            for name, coercer_class in defaults.items():
                cls._registry[name] = coercer_class
                cls._types[coercer_class.target] = name

    @classmethod
    def _normalize_name(cls, name: str) -> str:
        return name.lower()

    @classmethod
    def _unknown_type_error(cls, type_name: str, available: str) -> Exception:
        return UnknownCoercionTypeError.build(
            "configuration_error",
            f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}",
            {"rule": "type", "argument": type_name},
        )

    @classmethod
    def _bound_target(cls, registry_name: str) -> type[Any] | None:
        """Get the class a registry name converts to, if the name is taken."""
        coercer_class = cls._registry.get(registry_name)
        return getattr(coercer_class, "target", coercer_class)

    @classmethod
    def _implicit_name(cls, target: type[Any]) -> str:
        """Registry name for a class first seen as a descriptor.

        Qualified by module, so it never shadows a built-in name or another
        class with the same ``__name__``.
        """
        name = cls._normalize_name(f"{target.__module__}.{target.__qualname__}")
        if cls._bound_target(name) not in (None, target):
            # Same qualified name, different class (e.g. redefined locally)
            name = f"{name}@{id(target):x}"
        return name

    @classmethod
    def register_type(cls, target: type[Any], name: str | None = None) -> str:
        """Register a user-defined class as a converter.

        Args:
            target: Class whose constructor converts a single raw value.
            name: Registry name. Defaults to the class name.

        Returns:
            The normalized registry name.

        Raises:
            CoercerSignatureError: If the constructor doesn't take exactly
                one value.
            DuplicateCoercerError: If the name already converts to a
                different class.
        """
        cls._ensure_defaults_registered()

        if not inspect.isclass(target):
            raise UnknownCoercionTypeError.build(
                "configuration_error",
                f"Coercion target must be a class, it was: {target!r}",
                {"rule": "type", "argument": repr(target)},
            )
        if not _accepts_single_value(target):
            raise CoercerSignatureError.build(
                "configuration_error",
                f"Coercion target {target.__name__} must accept exactly one argument",
                {"rule": "type", "argument": target.__name__},
            )

        registry_name = cls._normalize_name(name or target.__name__)
        bound = cls._bound_target(registry_name)
        if bound is target:
            cls._types.setdefault(target, registry_name)
            return registry_name
        if bound is not None:
            raise DuplicateCoercerError.build(
                "configuration_error",
                f"Coercer name {registry_name!r} already converts to {bound!r}",
                {"rule": "type", "argument": repr(target)},
            )

        coercer_class = type(f"{target.__name__}Coercer", (TypeCoercer,), {"target": target})
        cls.register(registry_name, coercer_class)
        cls._types.setdefault(target, registry_name)
        return registry_name

    @classmethod
    def unregister(cls, name: str) -> None:
        registry_name = cls._normalize_name(name)
        super().unregister(registry_name)
        for target, type_name in list(cls._types.items()):
            if type_name == registry_name:
                del cls._types[target]

    @classmethod
    def resolve(cls, descriptor: Any) -> CoercerProtocol:
        """Turn a coercion type descriptor into a coercer.

        Args:
            descriptor: A registry name, a registered Python type, or a
                user-defined class (registered on first use).

        Returns:
            Coercer instance.

        Raises:
            UnknownCoercionTypeError: If the descriptor is neither a name
                nor a class, or the name is not registered.
            CoercerSignatureError: If a new class doesn't take exactly one
                value.
        """
        cls._ensure_defaults_registered()

        if isinstance(descriptor, str):
            return cls.create(descriptor)
        if inspect.isclass(descriptor):
            name = cls._types.get(descriptor)
            if name is None:
                name = cls.register_type(descriptor, cls._implicit_name(descriptor))
            return cls.create(name)

        raise UnknownCoercionTypeError.build(
            "configuration_error",
            f"Coercion type must be a name or a class, it was: {descriptor!r}",
            {"rule": "type", "argument": repr(descriptor)},
        )

    @classmethod
    def clear_registry(cls) -> None:
        super().clear_registry()
        cls._types.clear()


def coerce(descriptor: Any, value: Any) -> Any:
    """Convert ``value`` with the coercer for ``descriptor``.

    Raises:
        CoercionError: If the value cannot be converted.
        ValidationConfigurationError: If the descriptor is unusable.
    """
    return CoercerFactory.resolve(descriptor).coerce(value)
