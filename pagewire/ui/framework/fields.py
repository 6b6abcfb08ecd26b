"""
================================================================================
Composite Field Declarations
================================================================================

Class-level descriptors declaring how a composite's fields are wired:

    class LoginWindow(Composite):
        login_field: TextField = Wire(path="loginField")
        submit: Button = FindBy(css="button.submit")
        delegate: Locator = Wire()          # raw element handle
        by: By = Wire()                     # alias of the composite locator
        log: ComponentLogger = Wire()       # logger bound to the class

The field type comes from the class annotation; the declared name is the
default path segment. Unwired fields read as ``None``.

A ``Locator`` field is resolved while the composite is wired, so composites
declaring one can only be wired once a page is bound (see
``driver.bind_page``); otherwise ``DriverNotBoundError`` is raised. Other
field types never touch the page while wiring.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple, Union

from loguru import logger

from .selectors import (
    By,
    by_class_name,
    by_css,
    by_id,
    by_name,
    by_tag_name,
    by_text,
    by_xpath,
)

# Type of the Loguru logger; annotate a Wire() field with it to get a
# logger bound to the declaring composite class
ComponentLogger = type(logger)


class FieldMarker:
    """Base descriptor of a wired composite field."""

    def __init__(self) -> None:
        self.name: Optional[str] = None
        self.owner: Optional[type] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.name)


class Wire(FieldMarker):
    """
    Field derived from the parent locator.

    Args:
        path: Path segments overriding the field name
    """

    def __init__(self, path: Union[str, Sequence[str], None] = None):
        super().__init__()
        if isinstance(path, str):
            path = (path,)
        self.path: Tuple[str, ...] = tuple(path or ())

    def effective_path(self) -> Tuple[str, ...]:
        return self.path or (self.name,)

    def __repr__(self) -> str:
        return f"Wire(path={self.effective_path()!r})"


_FIND_BY_STRATEGIES = {
    "css": by_css,
    "xpath": by_xpath,
    "id": by_id,
    "class_name": by_class_name,
    "tag_name": by_tag_name,
    "name": by_name,
    "text": by_text,
}


class FindBy(FieldMarker):
    """
    Field located by a native selector, e.g. ``FindBy(css="div.v-table")``.

    Exactly one strategy must be given.
    """

    def __init__(self, **strategy: str):
        super().__init__()
        unknown = set(strategy) - set(_FIND_BY_STRATEGIES)
        if unknown:
            raise TypeError(f"Unknown FindBy strategies: {', '.join(sorted(unknown))}")
        if len(strategy) != 1:
            raise TypeError("FindBy requires exactly one strategy")
        self.strategy, self.selector = next(iter(strategy.items()))

    def build_by(self) -> By:
        return _FIND_BY_STRATEGIES[self.strategy](self.selector)

    def __repr__(self) -> str:
        return f"FindBy({self.strategy}={self.selector!r})"


def declared_fields(cls: type) -> Dict[str, Tuple[type, FieldMarker]]:
    """
    Collect every wired field of ``cls`` including inherited ones.

    Returns:
        Mapping field name -> (declaring class, marker), base classes first
    """
    fields: Dict[str, Tuple[type, FieldMarker]] = {}
    for klass in reversed(cls.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, FieldMarker):
                fields[name] = (klass, value)
            elif name in fields:
                # Plain attribute shadowing an inherited wired field
                del fields[name]
    return fields


__all__ = [
    "ComponentLogger",
    "FieldMarker",
    "Wire",
    "FindBy",
    "declared_fields",
]
