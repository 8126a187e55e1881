"""Generic plugin factory base class.

Provides a reusable factory pattern for creating instances from a registry
of registered types. Subclasses specify the protocol type and how to
register defaults.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses should define:
        - _registry: Class-level dict mapping type names to implementation classes
        - _entity_name: Human-readable name for error messages (e.g., "coercer")
        - _ensure_defaults_registered(): Method to register default implementations

    Example subclass:
        class CoercerFactory(PluginFactory[CoercerProtocol]):
            _registry: ClassVar[dict[str, type[CoercerProtocol]]] = {}
            _entity_name: ClassVar[str] = "coercer"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                if "integer" not in cls._registry:
                    cls._registry["integer"] = IntegerCoercer
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default implementations are registered.

        Subclasses must implement this to lazily register their default
        implementations. This method is called before registry access.
        """
        ...

    @classmethod
    def _normalize_name(cls, name: str) -> str:
        """Map a user-supplied type name to its registry key."""
        return name

    @classmethod
    def _unknown_type_error(cls, type_name: str, available: str) -> Exception:
        """Build the exception raised for unregistered type names."""
        return ValueError(
            f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}"
        )

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation type.

        Args:
            name: Type name for the implementation.
            impl_class: Class implementing the protocol.
        """
        cls._ensure_defaults_registered()
        cls._registry[cls._normalize_name(name)] = impl_class
        logger.debug("Registered %s type: %s", cls._entity_name, name)

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an implementation type.

        Args:
            name: Type name to unregister.
        """
        cls._registry.pop(cls._normalize_name(name), None)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a type name is registered."""
        cls._ensure_defaults_registered()
        return cls._normalize_name(name) in cls._registry

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> T:
        """Create an instance of the specified type.

        Args:
            name: Type name to create.
            **kwargs: Arguments to pass to the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            ValueError: If the type name is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = cls._normalize_name(name)

        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise cls._unknown_type_error(name, available)

        impl_class = cls._registry[type_name]
        return impl_class(**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Get list of available types.

        Returns:
            List of registered type names.
        """
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()
