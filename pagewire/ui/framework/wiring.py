"""
================================================================================
Component Wiring
================================================================================

Resolves a contract or composite type against a locator:

    - registered contract: the registry factory builds the implementation,
      which is returned wrapped in an instrumented proxy
    - anything else is a composite: it is constructed without arguments and
      every Wire/FindBy field is wired recursively under the parent locator

Usage:
    >>> login_window = wire(LoginWindow)
    >>> login_window.login_button.should_be(VISIBLE).click()
    >>> spinner = wire(Spinner, "spinner")
    >>> table = wire(Table, by_css("div.v-table"))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import inspect
import threading
from typing import Any, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from loguru import logger
from playwright.sync_api import Locator

from pagewire.common.errors import FieldInjectionError, InstantiationError

from . import driver
from .contracts import ElementWrapper, get_wire_path
from .fields import ComponentLogger, FieldMarker, FindBy, Wire, declared_fields
from .proxy import ComponentProxy, create_proxy
from .registry import ComponentRegistry, Factory
from .selectors import BODY_MARKER, By, by_chain, by_path, by_target

T = TypeVar("T")


def rewrap_element(return_type: Any, value: Any) -> Any:
    """
    Default re-wrap rule: proxy results declared as an abstract contract of
    the ElementWrapper family, pass everything else through unchanged.
    """
    if isinstance(value, ComponentProxy):
        return value
    if (
        inspect.isclass(return_type)
        and issubclass(return_type, ElementWrapper)
        and inspect.isabstract(return_type)
    ):
        return proxy_component(return_type, value)
    return value


def proxy_component(contract: Type[T], target: T) -> T:
    """Wrap a component implementation into a logging proxy of ``contract``."""
    return create_proxy(contract, target, rewrap_element)


def _field_type(annotation: Any) -> Any:
    """Unwrap ``Optional[X]`` annotations to ``X``."""
    if get_origin(annotation) is Union:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


class Components:
    """
    Wiring resolver bound to a component registry.

    A process-wide instance backs the module-level ``wire``/``register``
    functions; tests and parallel sessions may build their own.
    """

    def __init__(self, registry: Optional[ComponentRegistry] = None):
        self.registry = registry if registry is not None else ComponentRegistry.load()

    def register(self, contract: Type[T], factory: Factory) -> None:
        """Register (or replace) the implementation factory of a contract."""
        self.registry.register(contract, factory)

    def wire(self, clazz: Type[T], *target: Any) -> T:
        """
        Wire a contract or composite.

        Args:
            clazz: Contract or composite type
            *target: Nothing (use the class path hint or the document root),
                path segments, a By locator, or an element handle

        Returns:
            Proxied component or populated composite
        """
        if clazz is None:
            raise ValueError("Class cannot be None")

        if not target:
            path = get_wire_path(clazz)
            by = by_path(*path) if path else BODY_MARKER
        elif len(target) == 1 and isinstance(target[0], By):
            by = target[0]
        elif all(isinstance(segment, str) for segment in target):
            by = by_path(*target)
        elif len(target) == 1 and target[0] is not None:
            by = by_target(target[0])
        else:
            raise ValueError(f"Unsupported wiring target: {target!r}")

        return self.wire_by(clazz, by)

    def wire_by(self, clazz: Type[T], by: By) -> T:
        if by is None:
            raise ValueError("By cannot be None")
        if clazz is None:
            raise ValueError("Class cannot be None")

        factory = self.registry.get(clazz)
        if factory is not None:
            return proxy_component(clazz, factory(by))

        return self._wire_composite(clazz, by)

    def proxy_component(self, contract: Type[T], target: T) -> T:
        return proxy_component(contract, target)

    def _wire_composite(self, clazz: Type[T], by: By) -> T:
        try:
            instance = clazz()
        except Exception as e:
            raise InstantiationError(
                f"Unable to instantiate composite {clazz.__qualname__}"
            ) from e

        for name, (declaring, marker) in declared_fields(clazz).items():
            field_value = self._field_value(clazz, declaring, name, marker, by)

            if field_value is not None:
                try:
                    object.__setattr__(instance, name, field_value)
                except (AttributeError, TypeError) as e:
                    raise FieldInjectionError(f"Unable to inject field {name}") from e

        logger.debug(f"Wired composite {clazz.__qualname__} at {by}")
        return instance

    def _field_value(
        self,
        clazz: type,
        declaring: type,
        name: str,
        marker: FieldMarker,
        parent_by: By,
    ) -> Any:
        try:
            annotation = get_type_hints(declaring).get(name)
        except (NameError, TypeError) as e:
            raise FieldInjectionError(
                f"Unable to resolve type of field {declaring.__qualname__}.{name}"
            ) from e

        if annotation is None:
            raise FieldInjectionError(
                f"Field {declaring.__qualname__}.{name} has no type annotation"
            )
        field_type = _field_type(annotation)

        if isinstance(marker, Wire):
            if field_type is Locator:
                return driver.find(parent_by)
            if inspect.isclass(field_type) and issubclass(field_type, By):
                return parent_by
            if field_type is ComponentLogger:
                return logger.bind(component=f"{clazz.__module__}.{clazz.__qualname__}")

            return self.wire_by(field_type, self._child_by(parent_by, by_path(*marker.effective_path())))

        if isinstance(marker, FindBy):
            return self.wire_by(field_type, self._child_by(parent_by, marker.build_by()))

        return None

    @staticmethod
    def _child_by(parent_by: By, child_by: By) -> By:
        if parent_by is BODY_MARKER:
            return child_by
        return by_chain(parent_by, child_by)


# =============================================================================
# Process-wide entry points
# =============================================================================

_components: Optional[Components] = None
_components_lock = threading.Lock()


def components() -> Components:
    """Get the process-wide resolver, loading the registry on first use."""
    global _components
    if _components is None:
        with _components_lock:
            if _components is None:
                _components = Components()
    return _components


def reset_components() -> None:
    """Drop the process-wide resolver; the next call reloads the registry."""
    global _components
    with _components_lock:
        _components = None


def register(contract: Type[T], factory: Factory) -> None:
    components().register(contract, factory)


def wire(clazz: Type[T], *target: Any) -> T:
    return components().wire(clazz, *target)


# Short alias, reads well in page objects: w(Button, "loginButton").click()
w = wire


__all__ = [
    "Components",
    "components",
    "reset_components",
    "register",
    "wire",
    "w",
    "proxy_component",
    "rewrap_element",
]
