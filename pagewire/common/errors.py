"""
Exception taxonomy for the wiring engine and the remote connectors.

``ConfigurationError`` is defined next to the config loader and re-exported
here because remote-contract annotation problems are configuration problems
too.
"""

from __future__ import annotations

from .config_loader import ConfigurationError


class PagewireError(Exception):
    """Base class for errors raised by pagewire itself."""
    pass


class InstantiationError(PagewireError):
    """Raised when a composite class cannot be constructed without arguments."""
    pass


class FieldInjectionError(PagewireError):
    """Raised when a wired value cannot be computed or assigned to a field."""
    pass


class DriverNotBoundError(PagewireError):
    """Raised when a component touches the browser before a page is bound."""
    pass


class AuthenticationError(PagewireError):
    """Raised when the OAuth token exchange fails."""
    pass


class InvocationError(PagewireError):
    """
    Wrapper for a failed underlying operation.

    Component proxies never let this wrapper reach the caller: the original
    failure stored in ``__cause__`` is re-raised instead.
    """
    pass


class JmxCallError(PagewireError):
    """Raised when a Jolokia agent rejects or fails a JMX request."""

    def __init__(self, message: str, status: int = 0, error_type: str = ""):
        super().__init__(message)
        self.status = status
        self.error_type = error_type


__all__ = [
    "PagewireError",
    "ConfigurationError",
    "InstantiationError",
    "FieldInjectionError",
    "DriverNotBoundError",
    "AuthenticationError",
    "InvocationError",
    "JmxCallError",
]
