"""
Base class for composites: screens and fragments assembled from components.
"""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pagewire.ui.framework import driver
from pagewire.ui.framework.fields import Wire
from pagewire.ui.framework.selectors import BODY_MARKER, By, by_chain, by_path
from pagewire.ui.framework.wiring import components

T = TypeVar("T")


class Composite:
    """
    Composite root. Subclasses declare their components as Wire/FindBy fields:

        @wire_path("sec$User.browse")
        class UserBrowse(Composite):
            users_table: Table = Wire("usersTable")
    """

    by: By = Wire()

    @property
    def impl(self) -> Any:
        return driver.find(self.by)

    def child(self, clazz: Type[T], *path: str) -> T:
        """Wire a component nested inside this composite."""
        child_by = by_path(*path)
        if self.by is not BODY_MARKER:
            child_by = by_chain(self.by, child_by)
        return components().wire_by(clazz, child_by)

    def act_as(self, clazz: Type[T]) -> T:
        """Wire this composite's own element as another component type."""
        return components().wire_by(clazz, self.by)

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.by})"


__all__ = ["Composite"]
