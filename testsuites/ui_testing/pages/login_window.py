"""
================================================================================
Login Window Composite
================================================================================

The application login screen, wired by component id.

    login_window = wire(LoginWindow)
    login_window.login("admin", "admin")

================================================================================
"""

from __future__ import annotations

import os
from typing import Optional

import allure

from pagewire import Wire, wire_path
from pagewire.ui.components import Button, CheckBox, Composite, Label, PasswordField, TextField
from pagewire.ui.framework.conditions import ENABLED, VISIBLE
from pagewire.ui.framework.fields import ComponentLogger


@wire_path("loginMainBox")
class LoginWindow(Composite):

    welcome_label: Label = Wire("welcomeLabel")
    login_field: TextField = Wire("loginField")
    password_field: PasswordField = Wire("passwordField")
    remember_me: CheckBox = Wire("rememberMeCheckBox")
    login_button: Button = Wire("loginButton")
    log: ComponentLogger = Wire()

    @allure.step("Login as {username}")
    def login(self, username: Optional[str] = None, password: Optional[str] = None) -> None:
        username = username or os.getenv("UI_USERNAME", "admin")
        password = password or os.getenv("UI_PASSWORD", "admin")

        self.login_field.should_be(VISIBLE, ENABLED).set_value(username)
        self.password_field.set_value(password)
        self.login_button.should_be(VISIBLE).click()
        self.log.info(f"Submitted credentials of {username}")
