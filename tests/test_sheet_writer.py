import pytest

from invoice_sheets.config import HEADER_ROW
from invoice_sheets.sheet_writer import AppendResult, SheetWriter, build_rows
from invoice_sheets.validators import InvoiceData, InvoiceItem
from tests.conftest import FailingTable, FakeTable


def _invoice(*items, invoice_date=None, sender=None) -> InvoiceData:
    return InvoiceData(
        items=tuple(InvoiceItem(name, amount) for name, amount in items),
        invoice_date=invoice_date,
        sender=sender,
    )


def test_build_rows_puts_metadata_on_first_row_only():
    invoice = _invoice(
        ("Widget A", 100), ("Widget B", 250), ("Widget C", 5),
        invoice_date="2024-01-15", sender="Acme",
    )

    assert build_rows(invoice) == [
        ["2024-01-15", "Acme", "Widget A", 100],
        ["", "", "Widget B", 250],
        ["", "", "Widget C", 5],
    ]


def test_build_rows_blanks_missing_metadata():
    assert build_rows(_invoice(("Consulting", 80))) == [["", "", "Consulting", 80]]


def test_scenario_on_empty_table(table, writer):
    invoice = _invoice(
        ("Widget A", 100), ("Widget B", 250),
        invoice_date="2024-01-15", sender="Acme",
    )

    result = writer.append(invoice)

    assert table.rows == [
        ["Date", "Sender", "Item", "Amount"],
        ["2024-01-15", "Acme", "Widget A", 100],
        ["", "", "Widget B", 250],
    ]
    assert result == AppendResult(start_row=1, rows_written=3, header_written=True)


def test_empty_table_gets_header_in_same_write(table, writer):
    writer.append(_invoice(("A", 1), ("B", 2), ("C", 3), ("D", 4)))

    assert len(table.updates) == 1
    cell_range, rows = table.updates[0]
    assert cell_range == "A1"
    assert rows[0] == HEADER_ROW
    assert len(table.rows) == 5


def test_appends_after_existing_rows():
    existing = [
        HEADER_ROW,
        ["2024-01-01", "Old Co", "Thing", 10],
        ["", "", "Other thing", 20],
    ]
    table = FakeTable(existing)
    writer = SheetWriter(table=table)

    result = writer.append(_invoice(("New", 7), ("Newer", 8), sender="Acme"))

    assert table.updates[0][0] == "A4"
    assert len(table.rows) == len(existing) + 2
    assert table.rows[:3] == existing
    assert table.rows[3] == ["", "Acme", "New", 7]
    assert table.rows[4] == ["", "", "Newer", 8]
    assert result == AppendResult(start_row=4, rows_written=2, header_written=False)


def test_header_not_repeated_on_second_append(table, writer):
    writer.append(_invoice(("First", 1)))
    writer.append(_invoice(("Second", 2)))

    assert table.rows == [HEADER_ROW, ["", "", "First", 1], ["", "", "Second", 2]]


def test_identical_calls_append_twice(table, writer):
    invoice = _invoice(("Same", 5), sender="Acme")

    writer.append(invoice)
    writer.append(invoice)

    assert table.rows[1] == table.rows[2] == ["", "Acme", "Same", 5]


@pytest.mark.parametrize("amount", [0, 1234, 9999.99, -50])
def test_amounts_are_written_unchanged(table, writer, amount):
    writer.append(_invoice(("Line", amount)))

    written = table.rows[1][3]
    assert written == amount
    assert type(written) is type(amount)


def test_reads_full_column_range(table, writer):
    writer.append(_invoice(("Line", 1)))

    assert table.reads == ["A:D"]


def test_sheet_name_prefixes_ranges(table):
    writer = SheetWriter(table=table, sheet_name="Invoices 2024")

    writer.append(_invoice(("Line", 1)))

    assert table.reads == ["'Invoices 2024'!A:D"]
    assert table.updates[0][0] == "'Invoices 2024'!A1"


def test_read_failure_propagates_without_write():
    table = FailingTable("read", "rate limit exceeded")

    with pytest.raises(RuntimeError, match="rate limit exceeded"):
        SheetWriter(table=table).append(_invoice(("Line", 1)))

    assert table.updates == []


def test_write_failure_propagates():
    table = FailingTable("update", "permission denied")

    with pytest.raises(RuntimeError, match="permission denied"):
        SheetWriter(table=table).append(_invoice(("Line", 1)))
