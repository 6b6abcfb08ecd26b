"""
Generation of remote service proxies.

A remote contract is a plain class (usually abstract) whose public methods
describe calls on a remote system. ``remote_proxy`` builds a subclass of the
contract where every public method forwards to a handler callable, so the
result passes ``isinstance(proxy, contract)``.
"""

from __future__ import annotations

import inspect
import threading
from typing import Any, Callable, Dict, Tuple, Type, TypeVar

T = TypeVar("T")

# handler(contract_method, args, kwargs) -> result
RemoteHandler = Callable[[Callable[..., Any], Tuple[Any, ...], Dict[str, Any]], Any]

_proxy_classes: Dict[Type[Any], Type[Any]] = {}
_proxy_classes_lock = threading.Lock()


def remote_operations(contract: Type[Any]) -> Dict[str, Callable[..., Any]]:
    """Public functions declared anywhere in the contract's MRO."""
    operations: Dict[str, Callable[..., Any]] = {}
    for klass in reversed(contract.__mro__):
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if name.startswith("_") or not inspect.isfunction(member):
                continue
            operations[name] = member
    return operations


def _forwarder(name: str, method: Callable[..., Any]) -> Callable[..., Any]:
    def forward(self, *args: Any, **kwargs: Any) -> Any:
        return self._handler(method, args, kwargs)

    forward.__name__ = name
    forward.__qualname__ = name
    forward.__doc__ = method.__doc__
    forward.__wrapped__ = method
    return forward


def _proxy_class(contract: Type[Any]) -> Type[Any]:
    with _proxy_classes_lock:
        proxy_class = _proxy_classes.get(contract)
        if proxy_class is not None:
            return proxy_class

        namespace: Dict[str, Any] = {
            name: _forwarder(name, method)
            for name, method in remote_operations(contract).items()
        }
        namespace["__init__"] = _init_remote
        namespace["__repr__"] = lambda self: f"<remote {contract.__name__}>"

        proxy_class = type(contract)(f"{contract.__name__}RemoteProxy", (contract,), namespace)
        _proxy_classes[contract] = proxy_class
        return proxy_class


def _init_remote(self, handler: RemoteHandler) -> None:
    self._handler = handler


def remote_proxy(contract: Type[T], handler: RemoteHandler) -> T:
    """Build an instance of ``contract`` whose calls go to ``handler``."""
    if not inspect.isclass(contract):
        raise TypeError(f"Remote contract must be a class, got {contract!r}")
    return _proxy_class(contract)(handler)


__all__ = ["RemoteHandler", "remote_operations", "remote_proxy"]
