"""
================================================================================
Component Contracts
================================================================================

Base contracts every UI component implements, plus the two class/method
markers the wiring engine reads:

    - @log: the operation is logged (and reported as an Allure step) when
      called through a component proxy
    - @wire_path(*path): default location of a contract or composite when it
      is wired without an explicit locator

Contracts are abstract classes. Operations returning ``self`` are fluent:
called through a proxy they return the proxy.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple, TypeVar

from .conditions import Condition
from .driver import default_timeout
from .selectors import By

F = TypeVar("F", bound=Callable[..., Any])
C = TypeVar("C", bound=type)

# Method attribute marking loggable operations
LOG_MARKER = "__pagewire_log__"

# Class attribute holding the default wiring path
WIRE_PATH_ATTRIBUTE = "__wire_path__"


def log(func: F) -> F:
    """Mark a contract operation as loggable."""
    setattr(func, LOG_MARKER, True)
    return func


def is_loggable(func: Any) -> bool:
    return bool(getattr(func, LOG_MARKER, False))


def wire_path(*path: str) -> Callable[[C], C]:
    """Class decorator declaring the default wiring path of a type."""

    def decorator(cls: C) -> C:
        setattr(cls, WIRE_PATH_ATTRIBUTE, tuple(path))
        return cls

    return decorator


def get_wire_path(cls: type) -> Tuple[str, ...]:
    return tuple(getattr(cls, WIRE_PATH_ATTRIBUTE, ()))


class ByLocator(ABC):
    """Anything that knows its own locator."""

    @abstractmethod
    def get_by(self) -> By:
        ...


class ElementWrapper(ByLocator):
    """
    Contract family wrapping a single live element.

    Values of this family returned from proxied operations are proxied too,
    when the declared return type is an abstract contract.
    """

    @abstractmethod
    def get_delegate(self) -> Any:
        """Resolved Playwright Locator of the wrapped element."""

    def _condition_locator(self, condition: Condition) -> Any:
        """Element a condition is checked against; components may redirect it."""
        return self.get_delegate()

    @log
    def should(self, *conditions: Condition) -> "ElementWrapper":
        timeout = default_timeout()
        for condition in conditions:
            condition.should(self._condition_locator(condition), timeout)
        return self

    @log
    def should_not(self, *conditions: Condition) -> "ElementWrapper":
        timeout = default_timeout()
        for condition in conditions:
            condition.should_not(self._condition_locator(condition), timeout)
        return self

    @log
    def should_be(self, *conditions: Condition) -> "ElementWrapper":
        return self.should(*conditions)

    @log
    def should_not_be(self, *conditions: Condition) -> "ElementWrapper":
        return self.should_not(*conditions)

    @log
    def should_have(self, *conditions: Condition) -> "ElementWrapper":
        return self.should(*conditions)

    @log
    def should_not_have(self, *conditions: Condition) -> "ElementWrapper":
        return self.should_not(*conditions)

    def is_(self, condition: Condition) -> bool:
        return condition.check(self._condition_locator(condition))

    def has(self, condition: Condition) -> bool:
        return self.is_(condition)


class Component(ElementWrapper):
    """UI component of the web framework."""


class Element(Component):
    """Part of a component (table row, popup item) with a logging parent."""

    @abstractmethod
    def get_parent(self) -> Optional[Component]:
        ...

    def get_logging_id(self) -> Optional[str]:
        return None


__all__ = [
    "log",
    "is_loggable",
    "wire_path",
    "get_wire_path",
    "ByLocator",
    "ElementWrapper",
    "Component",
    "Element",
    "LOG_MARKER",
]
