"""
Entry points for remote service contracts: JMX MBeans and REST services.

Hosts default to the ``jmx.*`` and ``restapi.*`` configuration sections.
"""

from __future__ import annotations

from typing import Optional, Type, TypeVar

import httpx
from loguru import logger

from pagewire.common.errors import AuthenticationError

from .http_client import HttpClientError
from .jmx import JmxHost, create_jmx_proxy
from .rest_api import AccessToken, OAuthTokenService, RestApiHost, ServiceGenerator

T = TypeVar("T")


def jmx(
    contract: Type[T],
    host: Optional[JmxHost] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> T:
    """MBean proxy for a ``@jmx_name`` contract."""
    return create_jmx_proxy(contract, host or JmxHost.from_config(), transport)


def rest_api_oauth_service(
    host: Optional[RestApiHost] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> OAuthTokenService:
    host = host or RestApiHost.from_config()
    return ServiceGenerator.create_service(
        host.base_url,
        OAuthTokenService,
        auth=httpx.BasicAuth(host.client_id, host.client_secret),
        transport=transport,
    )


def obtain_access_token(
    host: RestApiHost,
    transport: Optional[httpx.BaseTransport] = None,
) -> AccessToken:
    """
    Password-grant token exchange.

    Raises:
        AuthenticationError: The token endpoint failed or returned no token
    """
    service = rest_api_oauth_service(host, transport)
    try:
        payload = service.token(host.grant_type, host.user, host.password)
        token = AccessToken.from_response(payload or {})
    except (httpx.HTTPError, HttpClientError, KeyError, TypeError, ValueError) as e:
        logger.opt(exception=e).error(f"OAuth token exchange failed for user '{host.user}'")
        raise AuthenticationError(
            f"Unable to get OAuth2 access token for user '{host.user}' from {host.base_url}"
        ) from e

    logger.debug(f"Obtained OAuth2 access token for user '{host.user}'")
    return token


def rest_api(
    contract: Type[T],
    host: Optional[RestApiHost] = None,
    access_token: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> T:
    """REST proxy for ``contract``; exchanges a token first unless one is given."""
    host = host or RestApiHost.from_config()
    if access_token is None:
        access_token = obtain_access_token(host, transport).access_token
    return ServiceGenerator.create_service(
        host.base_url, contract, access_token=access_token, transport=transport
    )


__all__ = ["jmx", "rest_api", "rest_api_oauth_service", "obtain_access_token"]
