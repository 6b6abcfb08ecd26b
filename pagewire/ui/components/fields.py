"""
Input components: text field, password field, check box and label.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from pagewire.ui.framework.conditions import Caption, Checked, Condition
from pagewire.ui.framework.contracts import Component, log
from pagewire.ui.framework.selectors import by_tag_name

from .base import AbstractComponent


class TextField(Component):

    @log
    @abstractmethod
    def set_value(self, value: str) -> "TextField":
        ...

    @abstractmethod
    def get_value(self) -> str:
        ...

    @log
    @abstractmethod
    def clear(self) -> "TextField":
        ...


class TextFieldImpl(AbstractComponent, TextField):

    def set_value(self, value: str) -> "TextField":
        self.impl.fill(value)
        return self

    def get_value(self) -> str:
        return self.impl.input_value()

    def clear(self) -> "TextField":
        self.impl.clear()
        return self


class PasswordField(TextField):
    """Masked text field; values are written the same way."""


class PasswordFieldImpl(TextFieldImpl, PasswordField):
    pass


class CheckBox(Component):

    @log
    @abstractmethod
    def set_checked(self, checked: bool) -> "CheckBox":
        ...

    @abstractmethod
    def get_caption(self) -> str:
        ...


class CheckBoxImpl(AbstractComponent, CheckBox):

    def set_checked(self, checked: bool) -> "CheckBox":
        self.find_inner(by_tag_name("input")).set_checked(checked)
        return self

    def get_caption(self) -> str:
        return self.find_inner(by_tag_name("label")).inner_text()

    def _condition_locator(self, condition: Condition) -> Any:
        if isinstance(condition, Checked):
            return self.find_inner(by_tag_name("input"))
        if isinstance(condition, Caption):
            return self.find_inner(by_tag_name("label"))
        return super()._condition_locator(condition)


class Label(Component):

    @abstractmethod
    def get_value(self) -> str:
        ...


class LabelImpl(AbstractComponent, Label):

    def get_value(self) -> str:
        return self.impl.inner_text()


__all__ = [
    "TextField",
    "TextFieldImpl",
    "PasswordField",
    "PasswordFieldImpl",
    "CheckBox",
    "CheckBoxImpl",
    "Label",
    "LabelImpl",
]
