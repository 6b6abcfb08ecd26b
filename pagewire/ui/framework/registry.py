"""
================================================================================
Component Registry
================================================================================

Mapping from a contract type to the factory building its implementation from
a locator: ``factory(by) -> instance``.

Loading order (last write wins on duplicate contracts):
    1. Built-in defaults (pagewire.ui.components.DEFAULT_COMPONENTS)
    2. Providers published under the ``pagewire.components`` entry-point group
    3. Providers listed in the ``ui.component_providers`` configuration key

A provider is an object with ``get_components()``, a callable returning the
mapping, or the mapping itself. Provider failures are logged and skipped.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import importlib
import threading
from importlib.metadata import entry_points
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from loguru import logger

from pagewire.common.config_loader import ConfigLoader

from .selectors import By

# Entry-point group scanned for component providers
PROVIDERS_GROUP = "pagewire.components"

Factory = Callable[[By], Any]


def _provider_components(provider: Any) -> Mapping[type, Factory]:
    """Extract the contract -> factory mapping from a provider object."""
    if isinstance(provider, Mapping):
        return provider
    if isinstance(provider, type):
        return _provider_components(provider())
    if hasattr(provider, "get_components"):
        return provider.get_components()
    if callable(provider):
        return provider()
    raise TypeError(f"Unsupported component provider: {provider!r}")


def _import_provider(reference: str) -> Any:
    """Import a ``module:attribute`` provider reference."""
    module_name, _, attribute = reference.partition(":")
    module = importlib.import_module(module_name)
    return getattr(module, attribute) if attribute else module


class ComponentRegistry:
    """
    Thread-safe contract -> factory table.

    Usage:
        >>> registry = ComponentRegistry.load()
        >>> registry.register(Spinner, SpinnerImpl)
        >>> registry.get(Spinner)
        <class 'SpinnerImpl'>
    """

    def __init__(self, components: Optional[Mapping[type, Factory]] = None):
        self._components: Dict[type, Factory] = dict(components or {})
        self._lock = threading.RLock()

    @classmethod
    def load(
        cls,
        providers: Optional[Iterable[Any]] = None,
        config: Optional[ConfigLoader] = None,
    ) -> "ComponentRegistry":
        """
        Build a registry from the defaults plus every discoverable provider.

        Args:
            providers: Extra provider objects merged after discovery
            config: Configuration source for ``ui.component_providers``

        Returns:
            Populated ComponentRegistry
        """
        from pagewire.ui.components import DEFAULT_COMPONENTS

        registry = cls(DEFAULT_COMPONENTS)

        for name, provider in registry._discover_providers(config):
            registry.merge_provider(provider, name)

        for provider in providers or []:
            registry.merge_provider(provider, repr(provider))

        return registry

    def _discover_providers(self, config: Optional[ConfigLoader]) -> List[tuple]:
        discovered = []

        try:
            for entry_point in entry_points(group=PROVIDERS_GROUP):
                try:
                    discovered.append((entry_point.name, entry_point.load()))
                except Exception as e:
                    logger.opt(exception=e).error(
                        f"Unable to load component provider {entry_point.name}: {e}"
                    )
        except Exception as e:
            logger.opt(exception=e).error(f"Unable to discover component providers: {e}")

        config = config or ConfigLoader.instance()
        for reference in config.get("ui.component_providers", []) or []:
            try:
                discovered.append((reference, _import_provider(reference)))
            except Exception as e:
                logger.opt(exception=e).error(
                    f"Unable to import component provider {reference}: {e}"
                )

        return discovered

    def merge_provider(self, provider: Any, name: str = "") -> bool:
        """
        Merge one provider into the table.

        Returns:
            True if the provider contributed its mapping, False if it failed
        """
        try:
            components = dict(_provider_components(provider))
        except Exception as e:
            logger.opt(exception=e).error(f"Unable to load components from {name}: {e}")
            return False

        logger.info(f"Loading components from {name}")
        with self._lock:
            self._components.update(components)
        return True

    def register(self, contract: type, factory: Factory) -> None:
        """Insert or overwrite the factory of ``contract``."""
        with self._lock:
            self._components[contract] = factory
        logger.debug(f"Registered component {contract.__name__}")

    def get(self, contract: type) -> Optional[Factory]:
        with self._lock:
            return self._components.get(contract)

    def contracts(self) -> List[type]:
        with self._lock:
            return list(self._components)

    def __contains__(self, contract: type) -> bool:
        with self._lock:
            return contract in self._components

    def __len__(self) -> int:
        with self._lock:
            return len(self._components)


__all__ = [
    "ComponentRegistry",
    "Factory",
    "PROVIDERS_GROUP",
]
