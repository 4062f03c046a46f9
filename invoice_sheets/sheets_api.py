"""
Google Sheets API access for reading and writing cell ranges
"""

from typing import Any

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from .config import SCOPES, VALUE_INPUT_OPTION


def build_sheets_service(credentials_path: str) -> Any:
    """Create an authorized Sheets v4 service from a service account key file.

    :param credentials_path: Path to the service account JSON key
    :type credentials_path: str
    :return: Sheets API service resource
    :rtype: Any
    :raises FileNotFoundError: If the key file does not exist
    """
    creds: Credentials = Credentials.from_service_account_file(
        credentials_path, scopes=SCOPES
    )
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


class SheetsTable:
    """Reads and overwrites value ranges of a single spreadsheet."""

    def __init__(self, service: Any, spreadsheet_id: str):
        self.service = service
        self.spreadsheet_id = spreadsheet_id

    def read(self, cell_range: str) -> list[list[Any]]:
        """Return all rows in ``cell_range``. An empty range yields no rows."""
        response: dict[str, Any] = (
            self.service.spreadsheets()
            .values()
            .get(spreadsheetId=self.spreadsheet_id, range=cell_range)
            .execute()
        )
        return response.get("values", [])

    def update(self, cell_range: str, rows: list[list[Any]]) -> None:
        """Overwrite cells starting at ``cell_range`` with ``rows``."""
        self.service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=cell_range,
            valueInputOption=VALUE_INPUT_OPTION,
            body={"values": rows},
        ).execute()
