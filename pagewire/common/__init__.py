"""
================================================================================
Common Utilities
================================================================================

Shared configuration, logging setup and the exception taxonomy.

Usage:
    from pagewire.common import ConfigLoader, init_logger

    init_logger()
    timeout = ConfigLoader.instance().get("ui.timeout", 4000)

================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .errors import (
    AuthenticationError,
    DriverNotBoundError,
    FieldInjectionError,
    InstantiationError,
    InvocationError,
    JmxCallError,
    PagewireError,
)
from .global_config import get_logger, init_logger

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "PagewireError",
    "InstantiationError",
    "FieldInjectionError",
    "DriverNotBoundError",
    "AuthenticationError",
    "InvocationError",
    "JmxCallError",
    "init_logger",
    "get_logger",
]
