"""
================================================================================
REST Connector
================================================================================

HTTP-backed service contracts for the application's REST API.

Contract methods are declared with @get/@post/@put/@delete:
    - "{placeholders}" in the path are filled from same-named parameters
    - a parameter called ``body`` becomes the JSON request body
    - remaining non-None parameters become query parameters
      (form fields for ``form=True`` endpoints)
    - the decoded JSON response is returned

Usage:
    >>> class UserService:
    ...     @get("entities/sec$User/{user_id}")
    ...     def load(self, user_id, view=None): ...
    >>> service = ServiceGenerator.create_service(base_url, UserService, token)
    >>> service.load("60885987-1b61-4247-94c7-dff348347f93", view="_minimal")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import inspect
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger

from pagewire.common.config_loader import ConfigLoader, ConfigurationError

from .http_client import HttpClient
from .remote import remote_proxy

T = TypeVar("T")

REST_CALL_ATTR = "__rest_call__"

DEFAULT_BASE_URL = "http://localhost:8080/app/rest/v2/"


@dataclass(frozen=True)
class RestCall:
    method: str
    path: str
    form: bool = False

    def placeholders(self) -> Tuple[str, ...]:
        return tuple(
            field for _, field, _, _ in string.Formatter().parse(self.path) if field
        )


def _http_method(method: str) -> Callable[..., Callable[[Callable[..., Any]], Callable[..., Any]]]:
    def annotate(path: str, form: bool = False) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def decorate(func: Callable[..., Any]) -> Callable[..., Any]:
            setattr(func, REST_CALL_ATTR, RestCall(method, path, form))
            return func
        return decorate
    annotate.__name__ = method.lower()
    return annotate


get = _http_method("GET")
post = _http_method("POST")
put = _http_method("PUT")
delete = _http_method("DELETE")


@dataclass(frozen=True)
class RestApiHost:
    base_url: str
    user: str
    password: str
    client_id: str = "client"
    client_secret: str = "secret"
    grant_type: str = "password"

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "RestApiHost":
        config = config or ConfigLoader.instance()
        return cls(
            base_url=config.get("restapi.base_url", DEFAULT_BASE_URL),
            user=config.get("restapi.user", "admin"),
            password=config.get("restapi.password", "admin"),
            client_id=config.get("restapi.client_id", "client"),
            client_secret=config.get("restapi.client_secret", "secret"),
            grant_type=config.get("restapi.grant_type", "password"),
        )


@dataclass(frozen=True)
class AccessToken:
    access_token: str
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "AccessToken":
        return cls(
            access_token=payload["access_token"],
            token_type=payload.get("token_type", "bearer"),
            expires_in=payload.get("expires_in"),
            refresh_token=payload.get("refresh_token"),
            scope=payload.get("scope"),
        )


class OAuthTokenService(ABC):
    """OAuth2 token endpoint, authenticated with the client credentials."""

    @post("oauth/token", form=True)
    @abstractmethod
    def token(self, grant_type: str, username: str, password: str) -> Dict[str, Any]: ...


class RestCallHandler:
    """Turns contract calls into HTTP requests."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        auth: Optional[httpx.Auth] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.token = token
        self.auth = auth
        self.transport = transport

    def __call__(self, method: Callable[..., Any], args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        call: Optional[RestCall] = getattr(method, REST_CALL_ATTR, None)
        if call is None:
            raise ConfigurationError(
                f"{method.__qualname__} is not annotated with an HTTP method (@get, @post, ...)"
            )

        bound = inspect.signature(method).bind(None, *args, **kwargs)
        bound.apply_defaults()
        params = dict(bound.arguments)
        params.pop(next(iter(params)))

        try:
            path = call.path.format(**{
                name: quote(str(params.pop(name)), safe="") for name in call.placeholders()
            })
        except KeyError as e:
            raise ConfigurationError(
                f"{method.__qualname__} has no parameter for path placeholder {e}"
            ) from e

        request: Dict[str, Any] = {}
        if not call.form and "body" in params:
            body = params.pop("body")
            if body is not None:
                request["json"] = body

        remaining = {name: value for name, value in params.items() if value is not None}
        if remaining:
            request["data" if call.form else "params"] = remaining

        logger.debug(f"REST {call.method} {path}")
        with HttpClient(self.base_url, token=self.token, auth=self.auth, transport=self.transport) as client:
            response = client.request(call.method, path, **request)

        response.raise_for_status()
        if not response.content:
            return None
        return response.json()


class ServiceGenerator:
    """Factory for HTTP-backed contract instances."""

    @staticmethod
    def create_service(
        base_url: str,
        contract: Type[T],
        access_token: Optional[str] = None,
        auth: Optional[httpx.Auth] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> T:
        handler = RestCallHandler(base_url, token=access_token, auth=auth, transport=transport)
        return remote_proxy(contract, handler)


__all__ = [
    "RestCall",
    "get",
    "post",
    "put",
    "delete",
    "RestApiHost",
    "AccessToken",
    "OAuthTokenService",
    "RestCallHandler",
    "ServiceGenerator",
]
