"""
Popup button: a button opening a popup with selectable options.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, List

from pagewire.ui.framework import driver
from pagewire.ui.framework.conditions import ENABLED, VISIBLE
from pagewire.ui.framework.contracts import Component, ElementWrapper, log
from pagewire.ui.framework.selectors import By, by_chain, by_class_name, by_css, by_tag_name, by_text

from .base import AbstractComponent
from .button import BUTTON_CAPTION_CLASSNAME

POPUP_SELECTOR = "div.v-popupbutton-popup"


class PopupContent(ElementWrapper):

    @log
    @abstractmethod
    def select(self, option: str) -> None:
        ...

    @abstractmethod
    def get_options(self) -> List[str]:
        ...


class PopupButton(Component):

    @log
    @abstractmethod
    def click_option(self, option: str) -> None:
        ...

    @log
    @abstractmethod
    def open_popup_content(self) -> PopupContent:
        ...

    @abstractmethod
    def get_popup_content(self) -> PopupContent:
        ...


class PopupContentImpl(PopupContent):

    def __init__(self, by: By):
        self.by = by

    def get_by(self) -> By:
        return self.by

    def get_delegate(self) -> Any:
        return driver.find(self.by)

    def select(self, option: str) -> None:
        caption = driver.find(by_chain(self.by, by_tag_name("span"), by_text(option)))
        item = caption.locator("xpath=../..")

        timeout = driver.default_timeout()
        VISIBLE.should(item, timeout)
        ENABLED.should(item, timeout)
        item.click()

    def get_options(self) -> List[str]:
        captions = driver.find(by_chain(self.by, by_tag_name("span"), by_class_name(BUTTON_CAPTION_CLASSNAME)))
        return captions.all_inner_texts()

    def __str__(self) -> str:
        return f"PopupContent({self.by})"


class PopupButtonImpl(AbstractComponent, PopupButton):

    def click_option(self, option: str) -> None:
        self.open_popup_content().select(option)

    def open_popup_content(self) -> PopupContent:
        self._click_when_enabled(self.impl)
        return self.get_popup_content()

    def get_popup_content(self) -> PopupContent:
        content = PopupContentImpl(by_css(POPUP_SELECTOR))
        VISIBLE.should(content.get_delegate(), driver.default_timeout())
        return content


__all__ = [
    "PopupButton",
    "PopupButtonImpl",
    "PopupContent",
    "PopupContentImpl",
]
