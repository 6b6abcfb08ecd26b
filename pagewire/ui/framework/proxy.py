"""
================================================================================
Instrumented Component Proxy
================================================================================

Wraps a contract implementation so that every call made through the wrapper:

    - is logged with a readable description when the contract marks the
      operation with @log (and reported as an Allure step)
    - re-raises the original cause of an InvocationError, never the wrapper
    - returns the proxy itself for fluent (self-returning) operations
    - passes other results through an optional re-wrap rule

Proxy classes are generated once per contract: a subclass of both
ComponentProxy and the contract with one forwarding method per public
contract operation, so ``isinstance(proxy, Contract)`` holds.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
import threading
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar, get_type_hints

import allure
from loguru import logger

from pagewire.common.errors import InvocationError

from .contracts import ByLocator, Element, is_loggable
from .selectors import format_by

T = TypeVar("T")

# (declared return type, value) -> value to hand to the caller
RewrapRule = Callable[[Any, Any], Any]

_CAMEL_CASE_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")
_MUTATOR = re.compile(r"^set(?:_(?P<snake>.+)|(?P<camel>[A-Z].*))$")


def readable_operation_name(name: str) -> str:
    """
    Split an operation name into words, capitalizing only the first one.

    >>> readable_operation_name("shouldBeVisible")
    'Should be visible'
    >>> readable_operation_name("should_be_visible")
    'Should be visible'
    """
    words = [word for part in name.split("_") for word in _CAMEL_CASE_WORDS.findall(part)]
    if not words:
        return name
    first, rest = words[0], words[1:]
    return " ".join([first[:1].upper() + first[1:]] + [w[:1].lower() + w[1:] for w in rest])


def mutator_property(name: str) -> Optional[str]:
    """Property name of a ``set_x`` / ``setX`` operation, else None."""
    match = _MUTATOR.match(name)
    if match is None:
        return None
    prop = match.group("snake") or match.group("camel")
    return prop[:1].lower() + prop[1:]


def format_invocation(name: str, args: Tuple[Any, ...], kwargs: Dict[str, Any], target_id: str) -> str:
    """Build the log line describing one operation call."""
    values = [str(a) for a in args] + [f"{k}={v}" for k, v in kwargs.items()]

    if values:
        prop = mutator_property(name)
        if prop is not None and len(values) == 1:
            arg = args[0] if args else next(iter(kwargs.values()))
            return f"Set '{prop}' of '{target_id}' to '{arg}'"
        return f"{readable_operation_name(name)} of '{target_id}' with [{', '.join(values)}]"

    return f"{readable_operation_name(name)} '{target_id}'"


def get_target_id(target: Any) -> str:
    """
    Display identity of a proxy target.

    Elements are described relative to their parent ("row 2 of usersTable"),
    other components by the terminal segment of their locator.
    """
    if isinstance(target, Element):
        parent = target.get_parent()

        own = target.get_logging_id()
        if own is None and isinstance(target, ByLocator):
            own = format_by(target.get_by())

        if parent is None:
            return own if own is not None else str(target)
        if own is None:
            return get_target_id(parent)
        return f"{own} of {get_target_id(parent)}"

    if isinstance(target, ByLocator):
        return format_by(target.get_by())

    return str(target)


class ComponentProxy:
    """Base class of generated component proxies."""

    _contract: type = object
    _return_types: Dict[str, Any] = {}

    def __init__(self, target: Any, rewrap: Optional[RewrapRule] = None):
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_rewrap", rewrap)
        object.__setattr__(self, "_target_id", get_target_id(target))
        object.__setattr__(self, "_log", logger.bind(component=self._contract.__name__))

    @property
    def target_id(self) -> str:
        return self._target_id

    def unwrap(self) -> Any:
        """Underlying component instance."""
        return self._target

    def _invoke(self, name: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        method = getattr(self._target, name)

        if is_loggable(getattr(self._contract, name, None)):
            message = format_invocation(name, args, kwargs, self._target_id)
            self._log.info(message)
            with allure.step(message):
                result = self._dispatch(method, args, kwargs)
        else:
            result = self._dispatch(method, args, kwargs)

        return self._post_process(name, result)

    @staticmethod
    def _dispatch(method: Callable[..., Any], args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        try:
            return method(*args, **kwargs)
        except InvocationError as e:
            cause = e.__cause__
            if cause is None:
                raise
            raise cause

    def _post_process(self, name: str, result: Any) -> Any:
        if result is self._target:
            return self

        if self._rewrap is not None and result is not None:
            return self._rewrap(self._return_types.get(name), result)

        return result

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes the contract does not declare
        return getattr(object.__getattribute__(self, "_target"), name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self._target_id}'>"


_proxy_classes: Dict[type, type] = {}
_proxy_classes_lock = threading.Lock()


def _forwarder(name: str) -> Callable[..., Any]:
    def forward(self: ComponentProxy, *args: Any, **kwargs: Any) -> Any:
        return self._invoke(name, args, kwargs)

    forward.__name__ = name
    return forward


def _declared_return_type(contract: type, name: str) -> Any:
    member = getattr(contract, name)
    try:
        return get_type_hints(member).get("return")
    except (NameError, TypeError) as e:
        logger.debug(f"Return type of {contract.__name__}.{name} is not resolvable: {e}")
        return None


def proxy_class_for(contract: Type[T]) -> Type[T]:
    """Get (or generate) the proxy class implementing ``contract``."""
    with _proxy_classes_lock:
        cls = _proxy_classes.get(contract)
        if cls is not None:
            return cls

        namespace: Dict[str, Any] = {
            "_contract": contract,
            "_return_types": {},
            "__module__": contract.__module__,
        }
        for name in dir(contract):
            if name.startswith("_") or not callable(getattr(contract, name, None)):
                continue
            if isinstance(getattr(contract, name), type):
                continue
            namespace[name] = _forwarder(name)
            namespace["_return_types"][name] = _declared_return_type(contract, name)

        metaclass = type(contract)
        cls = metaclass(f"{contract.__name__}Proxy", (ComponentProxy, contract), namespace)
        _proxy_classes[contract] = cls
        return cls


def create_proxy(contract: Type[T], target: T, rewrap: Optional[RewrapRule] = None) -> T:
    """Wrap ``target`` into an instrumented proxy implementing ``contract``."""
    return proxy_class_for(contract)(target, rewrap)


__all__ = [
    "ComponentProxy",
    "RewrapRule",
    "create_proxy",
    "proxy_class_for",
    "get_target_id",
    "format_invocation",
    "readable_operation_name",
    "mutator_property",
]
