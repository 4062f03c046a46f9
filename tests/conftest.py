import re
from typing import Any

import pytest

from invoice_sheets.gateway import ToolGateway
from invoice_sheets.sheet_writer import SheetWriter

_START_CELL = re.compile(r"(?:'[^']*'!)?([A-Z]+)(\d+)$")


class FakeTable:
    """In-memory stand-in for a spreadsheet, addressed like the Sheets API."""

    def __init__(self, rows: list[list[Any]] | None = None):
        self.rows: list[list[Any]] = [list(r) for r in rows or []]
        self.reads: list[str] = []
        self.updates: list[tuple[str, list[list[Any]]]] = []

    def read(self, cell_range: str) -> list[list[Any]]:
        self.reads.append(cell_range)
        return [list(r) for r in self.rows]

    def update(self, cell_range: str, rows: list[list[Any]]) -> None:
        self.updates.append((cell_range, rows))
        match = _START_CELL.search(cell_range)
        assert match is not None, f"unexpected range {cell_range}"
        start = int(match.group(2)) - 1
        while len(self.rows) < start + len(rows):
            self.rows.append([])
        for offset, row in enumerate(rows):
            self.rows[start + offset] = list(row)


class FailingTable(FakeTable):
    def __init__(self, fail_on: str, message: str = "boom"):
        super().__init__()
        self.fail_on = fail_on
        self.message = message

    def read(self, cell_range: str) -> list[list[Any]]:
        if self.fail_on == "read":
            raise RuntimeError(self.message)
        return super().read(cell_range)

    def update(self, cell_range: str, rows: list[list[Any]]) -> None:
        if self.fail_on == "update":
            raise RuntimeError(self.message)
        super().update(cell_range, rows)


@pytest.fixture
def table() -> FakeTable:
    return FakeTable()


@pytest.fixture
def writer(table: FakeTable) -> SheetWriter:
    return SheetWriter(table=table)


@pytest.fixture
def gateway(writer: SheetWriter) -> ToolGateway:
    return ToolGateway(writer)
