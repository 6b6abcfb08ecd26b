"""
================================================================================
Driver Binding
================================================================================

Thread-local binding between the wiring engine and a Playwright page.

Components never hold a page themselves: they keep a locator and resolve it
through ``find``/``find_all`` at the point of use, against the page bound to
the current thread. Each parallel test worker binds its own page.

Usage:
    with sync_playwright() as pw:
        page = pw.chromium.launch().new_page()
        bind_page(page)
        button = wire(Button, "loginButton")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import threading
from typing import Any, List, Optional

from loguru import logger

from pagewire.common.config_loader import ConfigLoader
from pagewire.common.errors import DriverNotBoundError

from .selectors import By


# Selenide-compatible default for waiting assertions, in milliseconds
DEFAULT_TIMEOUT = 4000

_local = threading.local()


def bind_page(page: Any) -> None:
    """Bind a Playwright page to the current thread."""
    _local.page = page
    logger.debug(f"Page bound to thread {threading.current_thread().name}")


def unbind_page() -> None:
    """Drop the page bound to the current thread, if any."""
    _local.page = None


def current_page() -> Any:
    """
    Get the page bound to the current thread.

    Raises:
        DriverNotBoundError: When no page has been bound
    """
    page: Optional[Any] = getattr(_local, "page", None)
    if page is None:
        raise DriverNotBoundError(
            "No page bound to the current thread. Call bind_page(page) first."
        )
    return page


def find(by: By) -> Any:
    """Resolve a locator to a (lazy) Playwright Locator."""
    return by.resolve(current_page())


def find_all(by: By) -> List[Any]:
    """Resolve a locator to every matching element."""
    return find(by).all()


def default_timeout() -> int:
    """Timeout for waiting assertions, ``ui.timeout`` in milliseconds."""
    return int(ConfigLoader.instance().get("ui.timeout", DEFAULT_TIMEOUT))


__all__ = [
    "bind_page",
    "unbind_page",
    "current_page",
    "find",
    "find_all",
    "default_timeout",
    "DEFAULT_TIMEOUT",
]
