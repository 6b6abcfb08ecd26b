"""
Button component.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from pagewire.ui.framework.conditions import Caption, Condition
from pagewire.ui.framework.contracts import Component, log
from pagewire.ui.framework.selectors import by_class_name

from .base import AbstractComponent

BUTTON_CAPTION_CLASSNAME = "v-button-caption"


class Button(Component):

    @log
    @abstractmethod
    def click(self) -> "Button":
        ...

    @abstractmethod
    def get_caption(self) -> str:
        ...


class ButtonImpl(AbstractComponent, Button):

    def get_caption(self) -> str:
        return self.find_inner(by_class_name(BUTTON_CAPTION_CLASSNAME)).inner_text()

    def click(self) -> "Button":
        self._click_when_enabled(self.impl)
        return self

    def _condition_locator(self, condition: Condition) -> Any:
        if isinstance(condition, Caption):
            return self.find_inner(by_class_name(BUTTON_CAPTION_CLASSNAME))
        return super()._condition_locator(condition)


__all__ = ["Button", "ButtonImpl", "BUTTON_CAPTION_CLASSNAME"]
