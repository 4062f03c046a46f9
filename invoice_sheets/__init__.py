"""
Invoice Sheets - Append extracted invoice data to Google Sheets

This package provides functionality to:
- Serve a save_to_sheet tool over the Model Context Protocol on stdio
- Validate invoice payloads (line items, date, sender)
- Append each invoice as a block of rows below the last used row of a sheet
"""
