from abc import abstractmethod
from typing import Optional

import pytest
from playwright.sync_api import Locator

from pagewire import register, w, wire, wire_path
from pagewire.common.errors import DriverNotBoundError, FieldInjectionError, InstantiationError
from pagewire.ui.components import Button, CheckBox, Composite, GroupBox, Table, TextField
from pagewire.ui.components.base import AbstractComponent
from pagewire.ui.framework.contracts import Component
from pagewire.ui.framework.fields import ComponentLogger, FindBy, Wire
from pagewire.ui.framework.proxy import ComponentProxy
from pagewire.ui.framework.selectors import BODY_MARKER, By, by_chain, by_css, by_path
from pagewire.ui.framework.wiring import Components, components


class Credentials(Composite):
    login: TextField = Wire("loginField")
    remember_me: Optional[CheckBox] = Wire("rememberMe")


@wire_path("loginWindow")
class LoginWindow(Composite):
    credentials: Credentials = Wire("credentialsBox")
    login_button: Button = Wire("loginButton")
    users: Table = FindBy(css="div.v-table")
    log: ComponentLogger = Wire()
    parent_by: By = Wire()


class LoginScreen(Composite):
    loginButton: Button = Wire()


class ExtendedLoginWindow(LoginWindow):
    cancel_button: Button = Wire("cancelButton")


class HandleHolder(Composite):
    delegate: Locator = Wire()


class NeedsArguments(Composite):
    def __init__(self, name):
        self.name = name


class MissingAnnotation(Composite):
    thing = Wire()


class UnresolvableAnnotation(Composite):
    thing: "NoSuchComponent" = Wire()  # noqa: F821


class Spinner(Component):
    """Registered at test time."""

    @abstractmethod
    def get_value(self) -> int:
        ...


class SpinnerImpl(AbstractComponent, Spinner):
    def get_value(self) -> int:
        return 1


class OtherSpinnerImpl(AbstractComponent, Spinner):
    def get_value(self) -> int:
        return 2


def test_composite_at_document_root_uses_field_paths():
    screen = wire(LoginScreen)

    assert screen.by is BODY_MARKER
    assert screen.loginButton.get_by() == by_path("loginButton")


def test_composite_fields_are_chained_under_path_hint():
    window = wire(LoginWindow)

    assert window.by == by_path("loginWindow")
    assert isinstance(window.login_button, Button)
    assert isinstance(window.login_button, ComponentProxy)
    assert window.login_button.get_by() == by_chain(by_path("loginWindow"), by_path("loginButton"))
    assert window.users.get_by() == by_chain(by_path("loginWindow"), by_css("div.v-table"))


def test_nested_composites_chain_every_level():
    window = wire(LoginWindow)

    assert isinstance(window.credentials, Credentials)
    assert window.credentials.login.get_by() == by_chain(
        by_path("loginWindow"), by_path("credentialsBox"), by_path("loginField")
    )
    assert isinstance(window.credentials.remember_me, CheckBox)


def test_explicit_locator_overrides_path_hint():
    window = wire(LoginWindow, "mainWindow", "loginWindow")

    assert window.login_button.get_by() == by_chain(
        by_path("mainWindow", "loginWindow"), by_path("loginButton")
    )


def test_by_field_aliases_the_composite_locator():
    window = wire(LoginWindow, by_css("div.login"))

    assert window.parent_by == by_css("div.login")


def test_logger_field_is_bound_to_the_composite(log_records):
    window = wire(LoginWindow)

    window.log.info("Login window opened")

    record = next(r for r in log_records if r["message"] == "Login window opened")
    assert record["extra"]["component"] == f"{LoginWindow.__module__}.LoginWindow"


def test_inherited_fields_are_wired():
    window = wire(ExtendedLoginWindow)

    assert window.login_button.get_by() == by_chain(by_path("loginWindow"), by_path("loginButton"))
    assert window.cancel_button.get_by() == by_chain(by_path("loginWindow"), by_path("cancelButton"))


def test_raw_handle_field(fake_page):
    holder = wire(HandleHolder, "holder")

    assert holder.delegate.selectors == ('[cuba-id="holder"]',)


def test_raw_handle_field_needs_a_bound_page():
    with pytest.raises(DriverNotBoundError):
        wire(HandleHolder, "holder")

    assert wire(LoginWindow, "loginWindow").login_button is not None


def test_wire_element_handle(fake_page):
    handle = fake_page.locator("css=#login")

    button = wire(Button, handle)
    assert button.get_by().resolve(fake_page) is handle


def test_short_alias():
    assert w is wire
    assert w(Button, "okButton").get_by() == by_path("okButton")


def test_unsupported_targets_are_rejected():
    with pytest.raises(ValueError):
        wire(Button, 1, "okButton")
    with pytest.raises(ValueError):
        wire(None, "okButton")
    with pytest.raises(ValueError):
        components().wire_by(Button, None)


def test_composite_without_default_constructor():
    with pytest.raises(InstantiationError):
        wire(NeedsArguments)


def test_field_without_annotation():
    with pytest.raises(FieldInjectionError):
        wire(MissingAnnotation)


def test_field_with_unresolvable_annotation():
    with pytest.raises(FieldInjectionError):
        wire(UnresolvableAnnotation)


def test_registered_contract_skips_field_walking(monkeypatch):
    register(Spinner, SpinnerImpl)

    def fail(*args, **kwargs):
        raise AssertionError("registered contract must not be walked as a composite")

    monkeypatch.setattr(Components, "_wire_composite", fail)

    spinner = wire(Spinner, "spinner")

    assert isinstance(spinner, Spinner)
    assert spinner.get_by() == by_path("spinner")
    assert spinner.get_value() == 1


def test_reregistering_uses_newest_factory():
    register(Spinner, SpinnerImpl)
    register(Spinner, OtherSpinnerImpl)

    assert wire(Spinner, "spinner").get_value() == 2


def test_child_and_act_as():
    window = wire(LoginWindow)
    screen = wire(LoginScreen)

    assert window.child(Button, "okButton").get_by() == by_chain(by_path("loginWindow"), by_path("okButton"))
    assert screen.child(Button, "okButton").get_by() == by_path("okButton")

    box = window.act_as(GroupBox)
    assert isinstance(box, GroupBox)
    assert box.get_by() == by_path("loginWindow")


def test_resolver_with_private_registry():
    from pagewire.ui.framework.registry import ComponentRegistry

    resolver = Components(ComponentRegistry({Spinner: SpinnerImpl}))

    assert resolver.wire(Spinner, "spinner").get_value() == 1
    # Button is unknown to this registry, so it is walked as an (empty) composite
    with pytest.raises(InstantiationError):
        resolver.wire(Button, "okButton")
