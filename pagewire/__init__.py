"""
================================================================================
pagewire
================================================================================

Component wiring for UI test automation of Vaadin-style web applications,
plus remote proxies for JMX (Jolokia) and REST services.

Example:
    from pagewire import wire, bind_page
    from pagewire.ui.components import Button
    from pagewire.ui.framework.conditions import VISIBLE

    bind_page(page)
    wire(Button, "loginButton").should_be(VISIBLE).click()

================================================================================
"""

__version__ = "1.0.0"

from pagewire.ui.framework import (
    Components,
    ComponentRegistry,
    FindBy,
    Wire,
    bind_page,
    by_chain,
    by_path,
    by_target,
    proxy_component,
    register,
    unbind_page,
    w,
    wire,
    wire_path,
)

__all__ = [
    "Components",
    "ComponentRegistry",
    "FindBy",
    "Wire",
    "bind_page",
    "unbind_page",
    "by_chain",
    "by_path",
    "by_target",
    "proxy_component",
    "register",
    "w",
    "wire",
    "wire_path",
]
