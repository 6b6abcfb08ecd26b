"""
================================================================================
UI Wiring Framework
================================================================================

Playwright-based component wiring engine.

Components:
    - selectors: locator algebra (path, native selector, chain, target)
    - driver: thread-local page binding, find/find_all
    - conditions: waiting and immediate element conditions
    - contracts: base component contracts, @log and @wire_path markers
    - proxy: instrumented component proxies
    - registry: contract -> factory table with provider discovery
    - fields: Wire/FindBy composite field declarations
    - wiring: the resolver and the process-wide wire/register entry points
    - browser_manager: Playwright browser lifecycle

Author: Automation Team
License: MIT
================================================================================
"""

from .contracts import ByLocator, Component, Element, ElementWrapper, log, wire_path
from .driver import bind_page, current_page, find, find_all, unbind_page
from .fields import ComponentLogger, FindBy, Wire
from .registry import ComponentRegistry
from .selectors import (
    BODY_MARKER,
    By,
    by_chain,
    by_class_name,
    by_css,
    by_id,
    by_name,
    by_path,
    by_tag_name,
    by_target,
    by_text,
    by_xpath,
)
from .wiring import Components, proxy_component, register, reset_components, w, wire

__all__ = [
    "By",
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
    "ByLocator",
    "ElementWrapper",
    "Component",
    "Element",
    "log",
    "wire_path",
    "bind_page",
    "unbind_page",
    "current_page",
    "find",
    "find_all",
    "Wire",
    "FindBy",
    "ComponentLogger",
    "ComponentRegistry",
    "Components",
    "wire",
    "w",
    "register",
    "proxy_component",
    "reset_components",
]
