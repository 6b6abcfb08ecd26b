from abc import abstractmethod
from contextlib import contextmanager

import pytest

from pagewire.common.errors import InvocationError
from pagewire.ui.components import Table, TableRow, TextField
from pagewire.ui.components.fields import TextFieldImpl
from pagewire.ui.components.table import TableImpl
from pagewire.ui.framework import proxy as proxy_module
from pagewire.ui.framework.conditions import ENABLED, VISIBLE
from pagewire.ui.framework.contracts import Component, log
from pagewire.ui.framework.proxy import (
    ComponentProxy,
    format_invocation,
    mutator_property,
    readable_operation_name,
)
from pagewire.ui.framework.selectors import by_path
from pagewire.ui.framework.wiring import proxy_component


class LoginButton(Component):

    @log
    @abstractmethod
    def should_be_visible(self) -> "LoginButton":
        ...

    @log
    @abstractmethod
    def submit(self, reason: str) -> None:
        ...

    @abstractmethod
    def caption(self) -> str:
        ...


class LoginButtonImpl(LoginButton):

    def __init__(self, error=None):
        self.by = by_path("loginWindow", "loginButton")
        self.error = error
        self.checks = 0

    def get_by(self):
        return self.by

    def get_delegate(self):
        return None

    def should_be_visible(self):
        self.checks += 1
        return self

    def submit(self, reason):
        if self.error is not None:
            raise self.error

    def caption(self):
        return "Submit"


def test_readable_operation_names():
    assert readable_operation_name("shouldBeVisible") == "Should be visible"
    assert readable_operation_name("should_be_visible") == "Should be visible"
    assert readable_operation_name("click") == "Click"
    assert readable_operation_name("openPopupContent") == "Open popup content"


def test_mutator_property():
    assert mutator_property("setValue") == "value"
    assert mutator_property("set_value") == "value"
    assert mutator_property("set_checked") == "checked"
    assert mutator_property("settings") is None
    assert mutator_property("select_row") is None


def test_format_invocation_with_arguments():
    assert format_invocation("select_row", (2,), {}, "usersTable") == "Select row of 'usersTable' with [2]"
    assert format_invocation("set_value", (), {"value": "x"}, "loginField") == "Set 'value' of 'loginField' to 'x'"


def test_negated_conditions_in_log_line():
    line = format_invocation("should_be", (VISIBLE, ENABLED), {}, "loginField")

    assert line == "Should be of 'loginField' with [visible, enabled]"


def test_zero_arg_operation_log_line(log_messages):
    button = proxy_component(LoginButton, LoginButtonImpl())

    button.should_be_visible()

    assert "Should be visible 'loginButton'" in log_messages


def test_mutator_log_line(fake_page, log_messages):
    field = proxy_component(TextField, TextFieldImpl(by_path("loginWindow", "loginField")))

    field.set_value("masquerade")

    assert "Set 'value' of 'loginField' to 'masquerade'" in log_messages
    assert fake_page.actions == [
        (('[cuba-id="loginWindow"] [cuba-id="loginField"]',), "fill", ("masquerade",))
    ]


def test_unmarked_operations_are_not_logged(log_messages):
    button = proxy_component(LoginButton, LoginButtonImpl())

    assert button.caption() == "Submit"
    assert not any("Caption" in message for message in log_messages)


def test_loggable_operation_runs_in_allure_step(monkeypatch):
    titles = []

    @contextmanager
    def fake_step(title):
        titles.append(title)
        yield

    monkeypatch.setattr(proxy_module.allure, "step", fake_step)
    button = proxy_component(LoginButton, LoginButtonImpl())

    button.submit("manual")
    button.caption()

    assert titles == ["Submit of 'loginButton' with [manual]"]


def test_fluent_chain_keeps_proxy_identity(fake_page):
    field = proxy_component(TextField, TextFieldImpl(by_path("loginField")))

    result = field.set_value("admin").clear().set_value("masquerade").clear()

    assert result is field
    assert field.should_be() is field


def test_proxy_implements_contract():
    impl = LoginButtonImpl()
    button = proxy_component(LoginButton, impl)

    assert isinstance(button, LoginButton)
    assert isinstance(button, ComponentProxy)
    assert button.unwrap() is impl
    assert button.target_id == "loginButton"
    # not part of the contract, forwarded as is
    assert button.checks == 0


def test_invocation_error_is_unwrapped():
    cause = KeyError("missing")
    wrapper = InvocationError("call failed")
    wrapper.__cause__ = cause
    button = proxy_component(LoginButton, LoginButtonImpl(error=wrapper))

    with pytest.raises(KeyError) as excinfo:
        button.submit("now")

    assert excinfo.value is cause


def test_other_errors_pass_through():
    error = RuntimeError("boom")
    button = proxy_component(LoginButton, LoginButtonImpl(error=error))

    with pytest.raises(RuntimeError) as excinfo:
        button.submit("now")

    assert excinfo.value is error


def test_invocation_error_without_cause_is_raised_as_is():
    button = proxy_component(LoginButton, LoginButtonImpl(error=InvocationError("bare")))

    with pytest.raises(InvocationError):
        button.submit("now")


def test_element_results_are_rewrapped(fake_page, log_messages):
    table = proxy_component(Table, TableImpl(by_path("usersTable")))

    row = table.row(1)
    assert isinstance(row, ComponentProxy)
    assert isinstance(row, TableRow)
    assert row.target_id == "row 1 of usersTable"

    assert row.click() is row
    assert "Click 'row 1 of usersTable'" in log_messages
    assert fake_page.actions[-1] == (
        ('[cuba-id="usersTable"]', "css=tr[class*='v-table-row'] >> nth=1"),
        "click",
        (),
    )


def test_collections_are_not_rewrapped(fake_page):
    fake_page.counts[('[cuba-id="usersTable"]', "css=tr[class*='v-table-row']")] = 2
    table = proxy_component(Table, TableImpl(by_path("usersTable")))

    rows = table.get_rows()

    assert len(rows) == 2
    assert not any(isinstance(row, ComponentProxy) for row in rows)


def test_identity_is_computed_once(fake_page):
    table = TableImpl(by_path("usersTable"))
    row = proxy_component(TableRow, table.row(0))

    row.unwrap().index = 5

    assert row.target_id == "row 0 of usersTable"


def test_logged_operation_on_table(fake_page, log_messages):
    table = proxy_component(Table, TableImpl(by_path("usersTable")))

    assert table.select_row(2) is table
    assert "Select row of 'usersTable' with [2]" in log_messages
