"""
Main logic for appending invoice data to the spreadsheet
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from . import config
from .validators import InvoiceData

logger = logging.getLogger(__name__)

__all__ = ["AppendResult", "SheetWriter", "build_rows"]


class Table(Protocol):
    """Remote grid the writer appends to."""

    def read(self, cell_range: str) -> list[list[Any]]: ...

    def update(self, cell_range: str, rows: list[list[Any]]) -> None: ...


@dataclass(frozen=True)
class AppendResult:
    """Where an append block landed."""

    start_row: int  # 1-based row of the first written row
    rows_written: int  # includes the header row, if one was written
    header_written: bool


def build_rows(invoice: InvoiceData) -> list[list[Any]]:
    """Lay out one invoice as sheet rows, one row per item.

    The first row carries the invoice date and sender, the remaining rows
    leave those columns blank so they read as part of the invoice above.

    :param invoice: Validated invoice data
    :type invoice: InvoiceData
    :return: Rows in ``Date, Sender, Item, Amount`` column order
    :rtype: list[list[Any]]
    """
    rows: list[list[Any]] = []
    for idx, line in enumerate(invoice.items):
        row: list[Any] = [""] * len(config.HEADER_ROW)
        if idx == 0:
            row[config.COL_DATE] = invoice.invoice_date or ""
            row[config.COL_SENDER] = invoice.sender or ""
        row[config.COL_ITEM] = line.item
        row[config.COL_AMOUNT] = line.amount
        rows.append(row)
    return rows


@dataclass(frozen=True)
class SheetWriter:
    """Appends invoices below the last used row of a sheet.

    Reads the current extent and then writes, without any guard between the
    two requests. Two writers appending at the same time can pick the same
    start row and overwrite each other.
    """

    table: Table
    sheet_name: str | None = None

    def _range(self, cells: str) -> str:
        if self.sheet_name:
            return f"'{self.sheet_name}'!{cells}"
        return cells

    def append(self, invoice: InvoiceData) -> AppendResult:
        """Append one invoice as a contiguous block of rows.

        On an empty sheet the header row is written as row 1, in the same
        request as the invoice rows.

        :param invoice: Validated invoice data
        :type invoice: InvoiceData
        :return: Position and size of the written block
        :rtype: AppendResult
        :raises Exception: Any error of the read or write request, unchanged
        """
        current_values: list[list[Any]] = self.table.read(
            self._range(f"{config.FIRST_COLUMN}:{config.LAST_COLUMN}")
        )

        batch: list[list[Any]] = build_rows(invoice)
        header_written: bool = not current_values
        if header_written:
            batch.insert(0, list(config.HEADER_ROW))

        next_row: int = len(current_values) + 1
        self.table.update(self._range(f"{config.FIRST_COLUMN}{next_row}"), batch)

        result = AppendResult(
            start_row=next_row,
            rows_written=len(batch),
            header_written=header_written,
        )
        logger.info(
            "Appended %d row(s) at row %d (header written: %s)",
            result.rows_written,
            result.start_row,
            result.header_written,
        )
        return result
