"""
Table component and its rows.

Rows are Elements: they are logged relative to the table that produced them,
e.g. ``Click 'row 2 of usersTable'``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, List, Optional

from pagewire.ui.framework import driver
from pagewire.ui.framework.contracts import Component, Element, log
from pagewire.ui.framework.selectors import By, by_chain, by_css

from .base import AbstractComponent

ROW_SELECTOR = "tr[class*='v-table-row']"


class TableRow(Element):

    @log
    @abstractmethod
    def click(self) -> "TableRow":
        ...

    @abstractmethod
    def get_cells(self) -> List[str]:
        ...

    @abstractmethod
    def get_cell(self, column: int) -> str:
        ...


class Table(Component):

    @abstractmethod
    def row(self, index: int) -> TableRow:
        """Row by zero-based position among the rendered rows."""

    @abstractmethod
    def get_rows(self) -> List[TableRow]:
        ...

    @abstractmethod
    def get_row_count(self) -> int:
        ...

    @log
    @abstractmethod
    def select_row(self, index: int) -> "Table":
        ...


class TableRowImpl(TableRow):

    def __init__(self, table: Table, index: int):
        self.table = table
        self.index = index
        self.by = by_chain(table.get_by(), by_css(f"{ROW_SELECTOR} >> nth={index}"))

    def get_by(self) -> By:
        return self.by

    def get_delegate(self) -> Any:
        return driver.find(self.by)

    def get_parent(self) -> Optional[Component]:
        return self.table

    def get_logging_id(self) -> Optional[str]:
        return f"row {self.index}"

    def click(self) -> TableRow:
        self.get_delegate().click()
        return self

    def get_cells(self) -> List[str]:
        return self.get_delegate().locator("td").all_inner_texts()

    def get_cell(self, column: int) -> str:
        return self.get_cells()[column]


class TableImpl(AbstractComponent, Table):

    def row(self, index: int) -> TableRow:
        return TableRowImpl(self, index)

    def get_rows(self) -> List[TableRow]:
        return [self.row(i) for i in range(self.get_row_count())]

    def get_row_count(self) -> int:
        return self.find_inner(by_css(ROW_SELECTOR)).count()

    def select_row(self, index: int) -> Table:
        self.row(index).click()
        return self


__all__ = ["Table", "TableImpl", "TableRow", "TableRowImpl"]
