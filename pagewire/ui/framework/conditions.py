"""
================================================================================
Conditions
================================================================================

Element conditions checked by component ``should_*`` / ``is_`` / ``has``
operations. Every condition knows how to:

    - check(locator): immediate, non-waiting boolean check
    - should(locator, timeout): waiting assertion via Playwright ``expect``
    - should_not(locator, timeout): the negated waiting assertion

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Optional

from playwright.sync_api import expect


# Class name the web framework adds to disabled components
DISABLED_CLASSNAME = "v-disabled"


class Condition(ABC):
    """Base condition."""

    def __init__(self, name: str, expected: Optional[str] = None):
        self.name = name
        self.expected = expected

    @abstractmethod
    def check(self, locator: Any) -> bool: ...

    @abstractmethod
    def should(self, locator: Any, timeout: int) -> None: ...

    @abstractmethod
    def should_not(self, locator: Any, timeout: int) -> None: ...

    def __str__(self) -> str:
        if self.expected is None:
            return self.name
        return f"{self.name} '{self.expected}'"

    def __repr__(self) -> str:
        return f"<Condition {self}>"


class Not(Condition):
    """Negation of another condition."""

    def __init__(self, condition: Condition, name: Optional[str] = None):
        # a named negation describes itself; an anonymous one reads "not <inner>"
        if name is None:
            super().__init__(f"not {condition.name}", condition.expected)
        else:
            super().__init__(name)
        self.condition = condition

    def check(self, locator: Any) -> bool:
        return not self.condition.check(locator)

    def should(self, locator: Any, timeout: int) -> None:
        self.condition.should_not(locator, timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        self.condition.should(locator, timeout)


class Visible(Condition):
    def __init__(self):
        super().__init__("visible")

    def check(self, locator: Any) -> bool:
        return locator.is_visible()

    def should(self, locator: Any, timeout: int) -> None:
        expect(locator).to_be_visible(timeout=timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        expect(locator).not_to_be_visible(timeout=timeout)


class Editable(Condition):
    def __init__(self):
        super().__init__("editable")

    def check(self, locator: Any) -> bool:
        return locator.is_editable()

    def should(self, locator: Any, timeout: int) -> None:
        expect(locator).to_be_editable(timeout=timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        expect(locator).not_to_be_editable(timeout=timeout)


class Checked(Condition):
    def __init__(self):
        super().__init__("checked")

    def check(self, locator: Any) -> bool:
        return locator.is_checked()

    def should(self, locator: Any, timeout: int) -> None:
        expect(locator).to_be_checked(timeout=timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        expect(locator).not_to_be_checked(timeout=timeout)


class CssClass(Condition):
    def __init__(self, class_name: str, name: str = "css class"):
        super().__init__(name, class_name)

    @property
    def pattern(self) -> "re.Pattern[str]":
        return re.compile(rf"(^|\s){re.escape(self.expected)}(\s|$)")

    def check(self, locator: Any) -> bool:
        return self.expected in (locator.get_attribute("class") or "").split()

    def should(self, locator: Any, timeout: int) -> None:
        expect(locator).to_have_class(self.pattern, timeout=timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        expect(locator).not_to_have_class(self.pattern, timeout=timeout)


class Text(Condition):
    """Element text contains the expected substring."""

    def __init__(self, expected: str):
        super().__init__("text", expected)

    def check(self, locator: Any) -> bool:
        return self.expected in (locator.text_content() or "")

    def should(self, locator: Any, timeout: int) -> None:
        expect(locator).to_contain_text(self.expected, timeout=timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        expect(locator).not_to_contain_text(self.expected, timeout=timeout)


class ExactText(Condition):
    """Element text equals the expected value (case sensitive)."""

    def __init__(self, expected: str, name: str = "exact text"):
        super().__init__(name, expected)

    def check(self, locator: Any) -> bool:
        return (locator.text_content() or "").strip() == self.expected

    def should(self, locator: Any, timeout: int) -> None:
        expect(locator).to_have_text(self.expected, timeout=timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        expect(locator).not_to_have_text(self.expected, timeout=timeout)


class Caption(ExactText):
    """
    Component caption. Components decide which inner element holds it;
    by default the component element itself is checked.
    """

    def __init__(self, expected: str):
        super().__init__(expected, name="caption")


class Value(Condition):
    def __init__(self, expected: str):
        super().__init__("value", expected)

    def check(self, locator: Any) -> bool:
        return locator.input_value() == self.expected

    def should(self, locator: Any, timeout: int) -> None:
        expect(locator).to_have_value(self.expected, timeout=timeout)

    def should_not(self, locator: Any, timeout: int) -> None:
        expect(locator).not_to_have_value(self.expected, timeout=timeout)


VISIBLE = Visible()
HIDDEN = Not(VISIBLE, "hidden")
DISABLED = CssClass(DISABLED_CLASSNAME, name="disabled")
ENABLED = Not(DISABLED, "enabled")
EDITABLE = Editable()
READONLY = Not(EDITABLE, "readonly")
CHECKED = Checked()


def caption(expected: str) -> Caption:
    return Caption(expected)


def text(expected: str) -> Text:
    return Text(expected)


def exact_text(expected: str) -> ExactText:
    return ExactText(expected)


def value(expected: str) -> Value:
    return Value(expected)


def css_class(class_name: str) -> CssClass:
    return CssClass(class_name)


__all__ = [
    "Condition",
    "Not",
    "Caption",
    "VISIBLE",
    "HIDDEN",
    "ENABLED",
    "DISABLED",
    "EDITABLE",
    "READONLY",
    "CHECKED",
    "caption",
    "text",
    "exact_text",
    "value",
    "css_class",
]
