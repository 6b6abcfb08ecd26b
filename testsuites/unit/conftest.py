"""
Fixtures for browser-free unit tests.

FakePage/FakeLocator mimic the small part of the Playwright Locator API the
components use and record every selector chain and action.
"""

from typing import Any, Dict, List, Tuple

import pytest
from loguru import logger

from pagewire.common.config_loader import ConfigLoader
from pagewire.ui.framework.driver import bind_page, unbind_page
from pagewire.ui.framework.wiring import reset_components


class FakeLocator:

    def __init__(self, page: "FakePage", selectors: Tuple[str, ...]):
        self.page = page
        self.selectors = selectors

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self.page, self.selectors + (selector,))

    def all(self) -> List["FakeLocator"]:
        return [self.locator(f"nth={i}") for i in range(self.count())]

    def count(self) -> int:
        return self.page.counts.get(self.selectors, 0)

    def fill(self, value: str) -> None:
        self.page.record(self, "fill", value)
        self.page.values[self.selectors] = value

    def clear(self) -> None:
        self.page.record(self, "clear")
        self.page.values[self.selectors] = ""

    def input_value(self) -> str:
        return self.page.values.get(self.selectors, "")

    def click(self) -> None:
        self.page.record(self, "click")

    def set_checked(self, checked: bool) -> None:
        self.page.record(self, "set_checked", checked)

    def inner_text(self) -> str:
        return self.page.texts.get(self.selectors, "")

    def text_content(self) -> str:
        return self.inner_text()

    def all_inner_texts(self) -> List[str]:
        return list(self.page.lists.get(self.selectors, []))

    def is_visible(self) -> bool:
        return True

    def get_attribute(self, name: str) -> Any:
        return self.page.attributes.get((self.selectors, name))

    def __repr__(self) -> str:
        return f"<FakeLocator {' >> '.join(self.selectors)}>"


class FakePage:

    def __init__(self):
        self.actions: List[Tuple[Tuple[str, ...], str, Tuple[Any, ...]]] = []
        self.values: Dict[Tuple[str, ...], str] = {}
        self.texts: Dict[Tuple[str, ...], str] = {}
        self.lists: Dict[Tuple[str, ...], List[str]] = {}
        self.counts: Dict[Tuple[str, ...], int] = {}
        self.attributes: Dict[Tuple[Tuple[str, ...], str], Any] = {}

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, (selector,))

    def record(self, locator: FakeLocator, action: str, *args: Any) -> None:
        self.actions.append((locator.selectors, action, args))


@pytest.fixture(autouse=True)
def _isolated_wiring(monkeypatch):
    """Fresh configuration, registry and driver binding for every test."""
    monkeypatch.delenv("PAGEWIRE_CONFIG", raising=False)
    monkeypatch.delenv("UI_COMPONENT_PROVIDERS", raising=False)
    ConfigLoader.reset()
    reset_components()
    unbind_page()
    yield
    unbind_page()
    reset_components()
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> FakePage:
    page = FakePage()
    bind_page(page)
    return page


@pytest.fixture
def log_messages() -> List[str]:
    """Messages of every loguru record emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def log_records() -> List[dict]:
    records: List[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
