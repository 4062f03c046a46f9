"""
Tool gateway: declares the save_to_sheet tool and dispatches calls to the sheet writer
"""

import json
import logging
from typing import Any, Final

from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ErrorData,
    TextContent,
    Tool,
)

from .config import TOOL_NAME
from .sheet_writer import SheetWriter
from .validators import ValidationFailure, parse_invoice_data

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE: Final[str] = "Invoice data saved successfully"

INPUT_SCHEMA: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "items": {
            "type": "array",
            "description": "Invoice line items with their amounts",
            "items": {
                "type": "object",
                "properties": {
                    "item": {"type": "string", "description": "Line item label"},
                    "amount": {"type": "number", "description": "Amount"},
                },
                "required": ["item", "amount"],
            },
        },
        "invoiceDate": {
            "type": "string",
            "description": "Invoice date (optional)",
        },
        "sender": {
            "type": "string",
            "description": "Invoice sender (optional)",
        },
    },
    "required": ["items"],
}


def _error(code: int, message: str) -> McpError:
    return McpError(ErrorData(code=code, message=message))


class ToolGateway:
    """Validates tool calls and hands them to the sheet writer, once per call."""

    def __init__(self, writer: SheetWriter):
        self.writer = writer

    def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name=TOOL_NAME,
                description="Save invoice data extracted by the assistant to Google Sheets",
                inputSchema=INPUT_SCHEMA,
            )
        ]

    def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Run a tool call and build its response content.

        :param name: Requested tool name
        :type name: str
        :param arguments: Decoded JSON arguments
        :type arguments: dict[str, Any] | None
        :return: A single text block with the confirmation JSON
        :rtype: list[TextContent]
        :raises McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for
            malformed invoices, INTERNAL_ERROR when the spreadsheet write fails
        """
        if name != TOOL_NAME:
            raise _error(METHOD_NOT_FOUND, f"Unknown tool: {name}")

        invoice = parse_invoice_data(arguments)
        if isinstance(invoice, ValidationFailure):
            logger.warning("Rejected invoice payload: %s", invoice.value)
            raise _error(INVALID_PARAMS, f"Invalid invoice data format: {invoice.value}")

        try:
            self.writer.append(invoice)
        except Exception as e:
            logger.error("Saving to spreadsheet failed: %s", e)
            raise _error(INTERNAL_ERROR, f"Error saving to spreadsheet: {e}") from e

        payload: dict[str, Any] = {"message": SUCCESS_MESSAGE, "savedData": arguments}
        return [
            TextContent(
                type="text",
                text=json.dumps(payload, indent=2, ensure_ascii=False),
            )
        ]
