"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Live UI tests run against a deployed application and are skipped unless
UI_E2E=1. Every test gets a fresh context and a page bound to the wiring
driver.

================================================================================
"""

import os
from typing import Generator

import allure
import pytest
from playwright.sync_api import Page

from pagewire.ui.framework.browser_manager import BrowserManager


def pytest_collection_modifyitems(config, items):
    if os.getenv("UI_E2E") == "1":
        return

    skip_e2e = pytest.mark.skip(reason="live UI tests need UI_E2E=1 and a running application")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def base_url() -> str:
    return os.getenv("UI_BASE_URL", "http://localhost:8080/app")


@pytest.fixture(scope="session")
def browser_manager() -> Generator[BrowserManager, None, None]:
    """Session-scoped browser; launched once for all UI tests."""
    manager = BrowserManager(
        headless=os.getenv("UI_HEADLESS", "true").lower() != "false",
        browser_type=os.getenv("UI_BROWSER", "chromium"),
    )
    manager.start()
    yield manager
    manager.close()


@pytest.fixture
def page(browser_manager: BrowserManager, base_url: str, request) -> Generator[Page, None, None]:
    """Fresh page bound to the wiring driver, opened on the application."""
    page = browser_manager.new_page()
    page.goto(base_url)
    yield page

    failed = getattr(request.node, "rep_call", None)
    if failed is not None and failed.failed:
        allure.attach(
            page.screenshot(full_page=True),
            name="screenshot",
            attachment_type=allure.attachment_type.PNG,
        )
    page.context.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase report on the item for screenshot-on-failure."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
