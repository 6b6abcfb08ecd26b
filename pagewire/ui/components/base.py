"""
Base implementation shared by the built-in components.

A component keeps only its locator; the live element is resolved through the
driver binding every time it is needed.
"""

from __future__ import annotations

from typing import Any

from pagewire.ui.framework import driver
from pagewire.ui.framework.conditions import ENABLED, VISIBLE
from pagewire.ui.framework.contracts import Component
from pagewire.ui.framework.selectors import By, by_chain


class AbstractComponent(Component):
    """Component bound to a locator."""

    def __init__(self, by: By):
        self.by = by

    @property
    def impl(self) -> Any:
        return driver.find(self.by)

    def get_by(self) -> By:
        return self.by

    def get_delegate(self) -> Any:
        return self.impl

    def find_inner(self, *bys: By) -> Any:
        """Resolve a locator nested inside this component."""
        return driver.find(by_chain(self.by, *bys))

    def _click_when_enabled(self, locator: Any) -> None:
        timeout = driver.default_timeout()
        VISIBLE.should(locator, timeout)
        ENABLED.should(locator, timeout)
        locator.click()

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.by})"


__all__ = ["AbstractComponent"]
