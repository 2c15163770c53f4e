"""
Engine Registry

Central registry for query engine factories.
Engines register themselves here, or are referenced directly as
``package.module:attribute`` import paths.
"""

import importlib
from typing import Any, Dict, List, Optional

from seriesql.domain.errors import EngineConfigurationError, EngineNotFoundError

from .base import EngineFactory, QueryEngine


class EngineRegistryClass:
    """Registry for managing query engine factories"""

    def __init__(self):
        self.factories: Dict[str, EngineFactory] = {}

    def register(self, name: str, factory: EngineFactory) -> None:
        """
        Register an engine factory

        Args:
            name: Engine name used on the command line and in properties
            factory: Callable returning a QueryEngine

        Raises:
            ValueError: If an engine with the same name is already registered
        """
        if name in self.factories:
            raise ValueError(f"Engine '{name}' is already registered")

        self.factories[name] = factory

    def get(self, name: str) -> Optional[EngineFactory]:
        """
        Get an engine factory by name

        Args:
            name: Engine name

        Returns:
            Factory or None
        """
        return self.factories.get(name)

    def get_all_ids(self) -> List[str]:
        """
        Get all registered engine names

        Returns:
            List of engine names
        """
        return list(self.factories.keys())

    def has(self, name: str) -> bool:
        """
        Check if an engine is registered

        Args:
            name: Engine name to check

        Returns:
            True if engine is registered
        """
        return name in self.factories

    def resolve(self, reference: str) -> EngineFactory:
        """
        Resolve an engine reference to its factory

        Args:
            reference: Registered engine name, or ``package.module:attribute``

        Returns:
            Engine factory

        Raises:
            EngineNotFoundError: If the reference matches nothing
            EngineConfigurationError: If the referenced attribute is not callable
        """
        factory = self.get(reference)
        if factory is not None:
            return factory

        if ":" not in reference:
            available = ", ".join(self.get_all_ids()) or "none"
            raise EngineNotFoundError(
                f"Engine '{reference}' not found. Registered engines: {available}. "
                "Use 'package.module:attribute' to reference an unregistered engine.",
                code="engine_not_found",
            )

        module_name, _, attribute = reference.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise EngineNotFoundError(
                f"Cannot import engine module '{module_name}': {e}", code="engine_not_found"
            ) from e

        target = getattr(module, attribute, None)
        if target is None:
            raise EngineNotFoundError(
                f"Module '{module_name}' has no attribute '{attribute}'", code="engine_not_found"
            )
        if not callable(target):
            raise EngineConfigurationError(
                f"Engine reference '{reference}' is not callable", code="engine_configuration"
            )
        return target

    def create(self, reference: str, **options: Any) -> QueryEngine:
        """
        Build an engine instance

        Args:
            reference: Registered engine name, or ``package.module:attribute``
            **options: Keyword arguments passed to the factory

        Returns:
            QueryEngine instance

        Raises:
            EngineNotFoundError: If the reference matches nothing
            EngineConfigurationError: If the factory rejects the options
        """
        factory = self.resolve(reference)
        try:
            return factory(**options)
        except TypeError as e:
            raise EngineConfigurationError(
                f"Invalid options for engine '{reference}': {e}", code="engine_configuration"
            ) from e

    def clear(self) -> None:
        """Clear all registered engines (useful for testing)"""
        self.factories.clear()

    def unregister(self, name: str) -> None:
        """
        Unregister an engine

        Args:
            name: Engine name to unregister
        """
        if name in self.factories:
            del self.factories[name]


# Singleton instance
EngineRegistry = EngineRegistryClass()
