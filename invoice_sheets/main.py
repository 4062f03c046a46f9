"""
Invoice Sheets - MCP server that appends extracted invoice data to Google Sheets

The server offers a single tool, save_to_sheet, over stdio. Callers pass the
line items, date and sender of one invoice and get them appended below the
last used row of the configured spreadsheet.
"""

import logging
import sys
from typing import Any, Final

import anyio
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .config import SERVER_NAME, SERVER_VERSION, ConfigError, Settings, load_settings
from .gateway import ToolGateway
from .sheet_writer import SheetWriter
from .sheets_api import SheetsTable, build_sheets_service

logger = logging.getLogger(__name__)

# stdout carries the protocol, so logs go to stderr only
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_gateway(settings: Settings) -> ToolGateway:
    """Build the Sheets client and writer once for the process lifetime."""
    service: Any = build_sheets_service(settings.credentials_path)
    table: SheetsTable = SheetsTable(service, settings.spreadsheet_id)
    writer: SheetWriter = SheetWriter(table=table, sheet_name=settings.sheet_name)
    return ToolGateway(writer)


def create_server(gateway: ToolGateway) -> Server:
    """Register the tool handlers of ``gateway`` on a new MCP server."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return gateway.list_tools()

    # Set directly: the call_tool decorator turns exceptions into isError
    # results and drops the McpError code
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        content: list[types.TextContent] = await anyio.to_thread.run_sync(
            gateway.call_tool, req.params.name, req.params.arguments
        )
        return types.ServerResult(types.CallToolResult(content=content))

    server.request_handlers[types.CallToolRequest] = call_tool

    return server


async def serve(server: Server) -> None:
    """Serve requests on stdin/stdout until the input stream closes."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Invoice Parser MCP server running on stdio")
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


def main() -> None:
    """Run the invoice sheets server."""
    logging.basicConfig(stream=sys.stderr, format=LOG_FORMAT)

    try:
        settings: Settings = load_settings()
    except ConfigError as e:
        logger.error("Startup failed: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)

    server: Server = create_server(create_gateway(settings))

    try:
        anyio.run(serve, server)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")

    sys.exit(0)


if __name__ == "__main__":
    main()
