"""
================================================================================
Remote Connectors
================================================================================

Typed proxies for remote contracts:
    - jmx: MBean operations and attributes through a Jolokia agent
    - rest_api: REST services behind an OAuth2 password grant

Author: Automation Team
License: MIT
================================================================================
"""

from .connectors import jmx, obtain_access_token, rest_api, rest_api_oauth_service
from .http_client import HttpClient, HttpClientError, RateLimitExceeded
from .jmx import JmxCallHandler, JmxHost, jmx_name
from .rest_api import (
    AccessToken,
    OAuthTokenService,
    RestApiHost,
    ServiceGenerator,
    delete,
    get,
    post,
    put,
)

__all__ = [
    "jmx",
    "rest_api",
    "rest_api_oauth_service",
    "obtain_access_token",
    "jmx_name",
    "JmxHost",
    "JmxCallHandler",
    "RestApiHost",
    "AccessToken",
    "OAuthTokenService",
    "ServiceGenerator",
    "get",
    "post",
    "put",
    "delete",
    "HttpClient",
    "HttpClientError",
    "RateLimitExceeded",
]
