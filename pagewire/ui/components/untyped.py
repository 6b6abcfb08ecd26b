"""
Generic components: an untyped component and a group box.
"""

from __future__ import annotations

from abc import abstractmethod

from pagewire.ui.framework.contracts import Component
from pagewire.ui.framework.selectors import by_class_name

from .base import AbstractComponent


class Untyped(Component):
    """Any component; only the common checks are available."""


class UntypedImpl(AbstractComponent, Untyped):
    pass


class GroupBox(Component):

    @abstractmethod
    def get_caption(self) -> str:
        ...


class GroupBoxImpl(AbstractComponent, GroupBox):

    def get_caption(self) -> str:
        return self.find_inner(by_class_name("v-panel-caption")).inner_text()


__all__ = ["Untyped", "UntypedImpl", "GroupBox", "GroupBoxImpl"]
