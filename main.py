"""
Invoice Sheets - MCP server that saves extracted invoice data to Google Sheets

Run this file (or the ``invoice-sheets`` command) from an MCP client
configuration. GOOGLE_CREDENTIALS_PATH and SPREADSHEET_ID must be set in
the environment or in ``.env.invoice_sheets``.
"""

from invoice_sheets.main import main

if __name__ == "__main__":
    main()
