"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation (Playwright sync API).

Features:
    - Single browser instance per manager
    - Isolated contexts for test independence
    - Authentication state persistence
    - Pages bound to the wiring driver on creation

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    sync_playwright,
)

from . import driver


# Storage state file for authentication persistence
AUTH_STATE_FILE = Path(".auth_state.json")


class BrowserManager:
    """
    Manages the browser and its contexts for UI testing.

    Usage:
        with BrowserManager() as manager:
            page = manager.new_page()          # bound to the wiring driver
            page.goto("http://localhost:8080/app")
            wire(LoginWindow).login_button.click()
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": ["--ignore-certificate-errors"],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        restore_auth: bool = False,
        browser_type: str = "chromium",
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            restore_auth: Restore authentication state from file
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
        """
        self.headless = headless
        self.restore_auth = restore_auth
        self.browser_type = browser_type

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    def __enter__(self) -> "BrowserManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = sync_playwright().start()

        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            self._browser.close()
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        driver.unbind_page()
        logger.debug("Browser closed")

    def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new isolated browser context.

        Args:
            **options: Additional context options
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}

        if self.restore_auth and AUTH_STATE_FILE.exists():
            context_options["storage_state"] = str(AUTH_STATE_FILE)
            logger.debug("Restored authentication state from file")

        context = self._browser.new_context(**context_options)
        self._contexts.append(context)

        return context

    def new_page(
        self,
        context: Optional[BrowserContext] = None,
        bind: bool = True,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            bind: Bind the page to the wiring driver of the current thread
            **context_options: Options for new context
        """
        if context is None:
            context = self.new_context(**context_options)

        page = context.new_page()
        if bind:
            driver.bind_page(page)
        return page

    def save_auth_state(self, context: BrowserContext) -> None:
        """Save cookies and localStorage for future sessions."""
        context.storage_state(path=str(AUTH_STATE_FILE))
        logger.info(f"Authentication state saved to: {AUTH_STATE_FILE}")

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
]
