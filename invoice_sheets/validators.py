"""
Validation functions for invoice data
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class InvoiceItem:
    """A single invoice line."""

    item: str
    amount: int | float


@dataclass(frozen=True)
class InvoiceData:
    """One invoice: its line items plus optional invoice-level metadata."""

    items: tuple[InvoiceItem, ...]
    invoice_date: str | None = None
    sender: str | None = None


class ValidationFailure(Enum):
    """Reasons an invoice payload can be rejected."""

    NOT_AN_OBJECT = "payload must be an object"
    ITEMS_NOT_A_LIST = "'items' must be an array"
    EMPTY_ITEMS = "'items' must contain at least one entry"
    ITEM_NOT_AN_OBJECT = "every entry in 'items' must be an object"
    ITEM_LABEL_INVALID = "every entry in 'items' needs a non-empty string 'item'"
    AMOUNT_NOT_A_NUMBER = "every entry in 'items' needs a numeric 'amount'"
    METADATA_NOT_A_STRING = "'invoiceDate' and 'sender' must be strings"


def is_number(value: Any) -> bool:
    """Check for a JSON number. Booleans are not numbers here.

    :param value: Value to check
    :type value: Any
    :return: True for int or float values, False otherwise
    :rtype: bool
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_item(raw_item: Any) -> InvoiceItem | ValidationFailure:
    if not isinstance(raw_item, dict):
        return ValidationFailure.ITEM_NOT_AN_OBJECT

    label: Any = raw_item.get("item")
    if not isinstance(label, str) or not label.strip():
        return ValidationFailure.ITEM_LABEL_INVALID

    amount: Any = raw_item.get("amount")
    if not is_number(amount):
        return ValidationFailure.AMOUNT_NOT_A_NUMBER

    return InvoiceItem(item=label, amount=amount)


def _optional_string(payload: dict[str, Any], key: str) -> str | None | ValidationFailure:
    value: Any = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        return ValidationFailure.METADATA_NOT_A_STRING
    return value


def parse_invoice_data(payload: Any) -> InvoiceData | ValidationFailure:
    """Parse a raw tool payload into invoice data, or reject it.

    Expected shape::

        {
            "items": [{"item": "Widget A", "amount": 100}, ...],
            "invoiceDate": "2024-01-15",   # optional
            "sender": "Acme"               # optional
        }

    A JSON ``null`` for ``invoiceDate`` or ``sender`` counts as absent.
    An empty ``items`` list is rejected.

    :param payload: Decoded JSON arguments of the tool call
    :type payload: Any
    :return: The validated invoice, or the first failure found
    :rtype: InvoiceData | ValidationFailure
    """
    if not isinstance(payload, dict):
        return ValidationFailure.NOT_AN_OBJECT

    raw_items: Any = payload.get("items")
    if not isinstance(raw_items, list):
        return ValidationFailure.ITEMS_NOT_A_LIST

    if not raw_items:
        return ValidationFailure.EMPTY_ITEMS

    items: list[InvoiceItem] = []
    for raw_item in raw_items:
        parsed = _parse_item(raw_item)
        if isinstance(parsed, ValidationFailure):
            return parsed
        items.append(parsed)

    invoice_date = _optional_string(payload, "invoiceDate")
    if isinstance(invoice_date, ValidationFailure):
        return invoice_date

    sender = _optional_string(payload, "sender")
    if isinstance(sender, ValidationFailure):
        return sender

    return InvoiceData(items=tuple(items), invoice_date=invoice_date, sender=sender)
