"""
================================================================================
JMX Connector
================================================================================

MBean contracts served through a Jolokia agent (JMX over HTTP/JSON).

Contract methods map onto Jolokia requests:
    - get_cache_size() / getCacheSize()  -> read attribute "CacheSize"
    - is_enabled()                       -> read attribute "Enabled"
    - set_cache_size(10)                 -> write attribute "CacheSize"
    - clear_cache("users")               -> exec operation "clearCache"

Usage:
    >>> @jmx_name("app-core.cuba:type=CachingFacade")
    ... class CachingFacade:
    ...     def clear_config_storage_cache(self) -> None: ...
    >>> jmx(CachingFacade).clear_config_storage_cache()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type, TypeVar

import httpx
from loguru import logger

from pagewire.common.config_loader import ConfigLoader, ConfigurationError
from pagewire.common.errors import JmxCallError

from .http_client import HttpClient
from .remote import remote_proxy

T = TypeVar("T")

JMX_NAME_ATTR = "__jmx_name__"

DEFAULT_JMX_ADDRESS = "http://localhost:8778/jolokia/"

_ATTRIBUTE_ACCESSOR = re.compile(
    r"^(?P<kind>get|set|is)(?:_(?P<snake>[a-z0-9_]+)|(?P<camel>[A-Z]\w*))$"
)


def jmx_name(name: str) -> Callable[[Type[T]], Type[T]]:
    """Class decorator binding a contract to an MBean object name."""
    def decorate(cls: Type[T]) -> Type[T]:
        setattr(cls, JMX_NAME_ATTR, name)
        return cls
    return decorate


def get_jmx_name(contract: Type[Any]) -> Optional[str]:
    return getattr(contract, JMX_NAME_ATTR, None)


@dataclass(frozen=True)
class JmxHost:
    """Jolokia agent coordinates. Credentials are optional."""

    user: Optional[str]
    password: Optional[str]
    address: str

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "JmxHost":
        config = config or ConfigLoader.instance()
        return cls(
            user=config.get("jmx.user"),
            password=config.get("jmx.password"),
            address=config.get("jmx.host", DEFAULT_JMX_ADDRESS),
        )

    def auth(self) -> Optional[httpx.BasicAuth]:
        if not self.user:
            return None
        return httpx.BasicAuth(self.user, self.password or "")


def _pascal(snake: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in snake.split("_") if part)


def _camel(name: str) -> str:
    if "_" not in name:
        return name
    first, *rest = [part for part in name.split("_") if part]
    return first + "".join(part[:1].upper() + part[1:] for part in rest)


def build_request(object_name: str, operation: str, args: Sequence[Any]) -> Dict[str, Any]:
    """Translate a contract call into a Jolokia request payload."""
    match = _ATTRIBUTE_ACCESSOR.match(operation)
    if match:
        attribute = _pascal(match.group("snake")) if match.group("snake") else match.group("camel")
        kind = match.group("kind")
        if kind in ("get", "is") and not args:
            return {"type": "read", "mbean": object_name, "attribute": attribute}
        if kind == "set" and len(args) == 1:
            return {
                "type": "write",
                "mbean": object_name,
                "attribute": attribute,
                "value": args[0],
            }

    return {
        "type": "exec",
        "mbean": object_name,
        "operation": _camel(operation),
        "arguments": list(args),
    }


class JmxCallHandler:
    """Executes MBean calls against a Jolokia agent."""

    def __init__(
        self,
        host: JmxHost,
        object_name: str,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.host = host
        self.object_name = object_name
        self.transport = transport

    def invoke(self, operation: str, args: Sequence[Any]) -> Any:
        """
        Run one operation and return the decoded ``value`` of the response.

        Raises:
            JmxCallError: The agent answered with a non-200 status
            httpx.HTTPError: The agent could not be reached
        """
        payload = build_request(self.object_name, operation, args)
        logger.debug(f"JMX {payload['type']} {self.object_name} {operation}")

        with HttpClient(self.host.address, auth=self.host.auth(), transport=self.transport) as client:
            response = client.request("POST", "", json=payload)

        if response.status_code != 200:
            raise JmxCallError(
                f"Jolokia agent at {self.host.address} answered HTTP {response.status_code}",
                status=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise JmxCallError(f"Jolokia response is not JSON: {response.text[:200]}") from e

        status = int(result.get("status", 0))
        if status != 200:
            raise JmxCallError(
                f"JMX call {operation} on {self.object_name} failed: {result.get('error', 'unknown error')}",
                status=status,
                error_type=result.get("error_type", ""),
            )
        return result.get("value")

    def __call__(self, method: Callable[..., Any], args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        return self.invoke(method.__name__, _positional(method, args, kwargs))


def _positional(method: Callable[..., Any], args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> List[Any]:
    """Order call arguments as declared, dropping ``self``."""
    if not kwargs:
        return list(args)
    bound = inspect.signature(method).bind(None, *args, **kwargs)
    bound.apply_defaults()
    return list(bound.arguments.values())[1:]


def create_jmx_proxy(
    contract: Type[T],
    host: JmxHost,
    transport: Optional[httpx.BaseTransport] = None,
) -> T:
    name = get_jmx_name(contract)
    if not name:
        raise ConfigurationError(
            f"Remote contract {contract.__qualname__} has no @jmx_name object name"
        )
    return remote_proxy(contract, JmxCallHandler(host, name, transport))


__all__ = [
    "jmx_name",
    "get_jmx_name",
    "JmxHost",
    "JmxCallHandler",
    "build_request",
    "create_jmx_proxy",
]
