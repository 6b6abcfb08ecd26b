"""
================================================================================
Locator Algebra
================================================================================

Immutable locator values describing a region of the live document.

    - ByPath: framework-native id path ([cuba-id="a"] [cuba-id="b"])
    - BySelector: native Playwright selector built from a find-by directive
    - ByChain: "find within find", flattened on construction
    - ByTarget: an already resolved Playwright Locator

Locators never touch the browser by themselves; the driver binding calls
``By.resolve(scope)`` at the point of use.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Tuple

# Attribute carrying component ids rendered by the web framework
ID_ATTRIBUTE = "cuba-id"


class By(ABC):
    """Base class of all locators."""

    @abstractmethod
    def resolve(self, scope: Any) -> Any:
        """
        Resolve this locator inside ``scope``.

        Args:
            scope: Playwright Page or Locator to search within

        Returns:
            Playwright Locator
        """

    def describe(self) -> str:
        """Terminal human-readable description used for logging."""
        return str(self)


@dataclass(frozen=True)
class ByPath(By):
    """Framework-native id path, one id per nesting level."""

    path: Tuple[str, ...]

    @property
    def selector(self) -> str:
        return " ".join(f'[{ID_ATTRIBUTE}="{segment}"]' for segment in self.path)

    def resolve(self, scope: Any) -> Any:
        return scope.locator(self.selector)

    def describe(self) -> str:
        return self.path[-1]

    def __str__(self) -> str:
        return f"By.path: {'/'.join(self.path)}"


@dataclass(frozen=True)
class BySelector(By):
    """Native Playwright selector, e.g. ``css=div.v-table`` or ``xpath=//td``."""

    selector: str
    description: str = ""

    def resolve(self, scope: Any) -> Any:
        return scope.locator(self.selector)

    def __str__(self) -> str:
        return self.description or self.selector


@dataclass(frozen=True)
class ByChain(By):
    """Ordered sequence of locators, each searched within the previous one."""

    bys: Tuple[By, ...]

    @property
    def last_by(self) -> By:
        return self.bys[-1]

    def resolve(self, scope: Any) -> Any:
        located = scope
        for by in self.bys:
            located = by.resolve(located)
        return located

    def describe(self) -> str:
        return self.last_by.describe()

    def __str__(self) -> str:
        return " > ".join(str(by) for by in self.bys)


@dataclass(frozen=True)
class ByTarget(By):
    """Wraps an element handle the caller already holds."""

    handle: Any

    def resolve(self, scope: Any) -> Any:
        return self.handle

    def __str__(self) -> str:
        return f"By.target: {self.handle}"


def by_path(*path: str) -> ByPath:
    """Build a framework-native id path locator."""
    if not path:
        raise ValueError("Path must contain at least one segment")
    return ByPath(tuple(path))


def by_chain(parent: By, *children: By) -> ByChain:
    """Chain locators so that every child is searched within its predecessor."""
    if not children:
        raise ValueError("Chain requires at least one child locator")

    bys = []
    for by in (parent, *children):
        if isinstance(by, ByChain):
            bys.extend(by.bys)
        else:
            bys.append(by)
    return ByChain(tuple(bys))


def by_target(handle: Any) -> ByTarget:
    """Wrap an already resolved element handle."""
    if handle is None:
        raise ValueError("Target handle cannot be None")
    return ByTarget(handle)


# =============================================================================
# Native selector builders (find-by directive strategies)
# =============================================================================

def by_css(selector: str) -> BySelector:
    return BySelector(f"css={selector}", f"By.css: {selector}")


def by_xpath(xpath: str) -> BySelector:
    return BySelector(f"xpath={xpath}", f"By.xpath: {xpath}")


def by_id(element_id: str) -> BySelector:
    return BySelector(f'css=[id="{element_id}"]', f"By.id: {element_id}")


def by_class_name(class_name: str) -> BySelector:
    return BySelector(f"css=.{class_name}", f"By.className: {class_name}")


def by_tag_name(tag_name: str) -> BySelector:
    return BySelector(f"css={tag_name}", f"By.tagName: {tag_name}")


def by_name(name: str) -> BySelector:
    return BySelector(f'css=[name="{name}"]', f"By.name: {name}")


def by_text(text: str) -> BySelector:
    return BySelector(f'text="{text}"', f"By.text: {text}")


def format_by(by: By) -> str:
    """Return the terminal descriptive string of a locator."""
    return by.describe()


# Document root marker; composites wired against it use child paths standalone
BODY_MARKER = by_tag_name("body")


__all__ = [
    "By",
    "ByPath",
    "BySelector",
    "ByChain",
    "ByTarget",
    "BODY_MARKER",
    "by_path",
    "by_chain",
    "by_target",
    "by_css",
    "by_xpath",
    "by_id",
    "by_class_name",
    "by_tag_name",
    "by_name",
    "by_text",
    "format_by",
]
