"""
================================================================================
HTTP Client with Allure Integration
================================================================================

Transport shared by the remote connectors:
    - Automatic retry with exponential backoff on network errors
    - Rate limit (429) handling with Retry-After parsing
    - Allure reporting with cURL command generation
    - Secrets masked in every report attachment

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import allure
import httpx
from allure_commons.types import AttachmentType
from loguru import logger

from pagewire.common.config_loader import ConfigLoader


# Maximum response length to include in Allure reports
MAX_RESPONSE_LENGTH = 3000

# Default retry settings
DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_BACKOFF = 0.5
DEFAULT_RETRY_MAX_WAIT = 5.0

SENSITIVE_HEADERS = {"authorization", "x-api-key", "cookie", "set-cookie"}
SENSITIVE_FIELDS = ["password", "secret", "token", "api_key", "authorization", "session"]


class HttpClientError(Exception):
    """Base exception for HTTP client errors."""
    pass


class RateLimitExceeded(HttpClientError):
    """Raised when rate limit is exceeded and all retries are exhausted."""
    pass


class HttpClient:
    """
    HTTP client with built-in resilience and reporting.

    Usage:
        >>> with HttpClient("http://localhost:8080/app/rest/v2/", token="abc") as client:
        ...     response = client.request("GET", "entities/sec$User")
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        auth: Optional[httpx.Auth] = None,
        config: Optional[ConfigLoader] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL every request path is relative to
            token: Bearer token sent in the Authorization header
            auth: httpx authentication (e.g. BasicAuth for OAuth clients)
            config: Configuration source for timeouts and retries
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        config = config or ConfigLoader.instance()

        self.base_url = base_url
        self.token = token
        self.auth = auth
        self.transport = transport
        self.timeout = float(config.get("http.timeout", 30))
        self.retry_count = max(1, int(config.get("http.retry_count", DEFAULT_RETRY_COUNT)))
        self.retry_backoff = float(config.get("http.retry_backoff", DEFAULT_RETRY_BACKOFF))
        self.retry_max_wait = float(config.get("http.retry_max_wait", DEFAULT_RETRY_MAX_WAIT))

        self.session: Optional[httpx.Client] = None

    def __enter__(self) -> "HttpClient":
        """Enter context manager - initialize HTTP session."""
        self.session = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            auth=self.auth,
            transport=self.transport,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager - close HTTP session."""
        if self.session:
            self.session.close()
            self.session = None

    def request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Execute HTTP request with automatic retry and Allure logging.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH)
            url: Request URL (relative to base_url)
            **kwargs: Additional arguments passed to httpx.Client.request

        Returns:
            httpx.Response object

        Raises:
            RateLimitExceeded: When rate limit retries are exhausted
            httpx.HTTPError: When network retries are exhausted
        """
        if self.session is None:
            raise HttpClientError(
                "HttpClient must be used within a context manager. "
                "Use 'with HttpClient(base_url) as client:'"
            )

        headers = dict(kwargs.pop("headers", None) or {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        kwargs["headers"] = headers

        for attempt in range(self.retry_count):
            try:
                response = self.session.request(method, url, **kwargs)

                if response.status_code == 429:
                    retry_after = self._parse_retry_after(response)
                    logger.warning(
                        f"Rate limited (429). Waiting {retry_after}s before retry. "
                        f"Attempt {attempt + 1}/{self.retry_count}"
                    )
                    time.sleep(retry_after)
                    continue

                self._log_to_allure(method, url, kwargs, response)
                return response

            except (httpx.TimeoutException, httpx.NetworkError) as e:
                if attempt < self.retry_count - 1:
                    wait_time = self._calculate_backoff(attempt)
                    logger.warning(
                        f"Network error: {e}. Retrying in {wait_time}s. "
                        f"Attempt {attempt + 1}/{self.retry_count}"
                    )
                    time.sleep(wait_time)
                else:
                    logger.error(f"All retries exhausted. Last error: {e}")
                    raise

        raise RateLimitExceeded(
            f"Rate limit exceeded after {self.retry_count} retries"
        )

    def _parse_retry_after(self, response: httpx.Response) -> float:
        """Parse the Retry-After header (seconds), capped at retry_max_wait."""
        retry_after = response.headers.get("Retry-After", "")

        try:
            wait_time = float(retry_after)
        except ValueError:
            wait_time = self.retry_backoff

        return min(wait_time, self.retry_max_wait)

    def _calculate_backoff(self, attempt: int) -> float:
        """Exponential backoff: base * (2 ^ attempt), capped at max_wait."""
        wait_time = self.retry_backoff * (2 ** attempt)
        return min(wait_time, self.retry_max_wait)

    def _log_to_allure(
        self,
        method: str,
        url: str,
        kwargs: Dict[str, Any],
        response: httpx.Response,
    ) -> None:
        """Attach the request/response pair to the current Allure step."""
        full_url = str(response.request.url) if response.request else url
        marker = "OK" if response.status_code < 400 else "FAILED"
        step_title = f"{method} {url} -> {response.status_code} {marker}"

        with allure.step(step_title):
            allure.attach(
                full_url,
                name="Request URL",
                attachment_type=AttachmentType.TEXT
            )

            safe_headers = self._redact_headers(kwargs.get("headers", {}))
            if safe_headers:
                allure.attach(
                    json.dumps(safe_headers, ensure_ascii=False, indent=2),
                    name="Request Headers",
                    attachment_type=AttachmentType.JSON
                )

            safe_body = self._redact_body(kwargs.get("json") or kwargs.get("data"))
            if safe_body:
                allure.attach(
                    json.dumps(safe_body, ensure_ascii=False, indent=2, default=str),
                    name="Request Body",
                    attachment_type=AttachmentType.JSON
                )

            allure.attach(
                self._build_curl(method, full_url, safe_headers, safe_body),
                name="cURL Command",
                attachment_type=AttachmentType.TEXT
            )

            try:
                response_content = json.dumps(response.json(), ensure_ascii=False, indent=2)
            except (json.JSONDecodeError, ValueError):
                response_content = response.text or "<empty>"

            if len(response_content) > MAX_RESPONSE_LENGTH:
                response_content = (
                    f"{response_content[:MAX_RESPONSE_LENGTH]}\n\n"
                    f"... [Truncated, full length: {len(response_content)} chars] ..."
                )

            allure.attach(
                self._redact_text(response_content),
                name=f"Response Body ({response.status_code})",
                attachment_type=AttachmentType.JSON
            )

    def _redact_headers(self, headers: Dict[str, Any]) -> Dict[str, Any]:
        """Mask sensitive header values before logging."""
        return {
            key: "***MASKED***" if key.lower() in SENSITIVE_HEADERS else value
            for key, value in headers.items()
        }

    def _redact_body(self, payload: Any) -> Any:
        """Recursively mask sensitive fields in request bodies."""
        if isinstance(payload, dict):
            redacted = {}
            for key, value in payload.items():
                if any(token in str(key).lower() for token in SENSITIVE_FIELDS):
                    redacted[key] = "***MASKED***"
                else:
                    redacted[key] = self._redact_body(value)
            return redacted
        if isinstance(payload, list):
            return [self._redact_body(item) for item in payload]
        return payload

    def _redact_text(self, content: str) -> str:
        """Mask sensitive fields of a JSON response body, if it is JSON."""
        try:
            return json.dumps(self._redact_body(json.loads(content)), ensure_ascii=False, indent=2)
        except (json.JSONDecodeError, ValueError):
            return content

    def _build_curl(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[Any],
    ) -> str:
        """Build a copy-paste ready cURL command (headers already masked)."""
        parts = [f"curl -X {method}"]

        for key, value in headers.items():
            parts.append(f"-H '{key}: {value}'")

        if body:
            body_json = json.dumps(body, ensure_ascii=False, default=str)
            parts.append(f"-d '{body_json}'")

        parts.append(f"'{url}'")

        return " \\\n  ".join(parts)


__all__ = [
    "HttpClient",
    "HttpClientError",
    "RateLimitExceeded",
]
