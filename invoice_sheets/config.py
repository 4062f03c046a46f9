"""
Configuration constants for the invoice sheets server
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv(".env.invoice_sheets")

# ==============================================================================
# SERVER IDENTITY
# ==============================================================================

SERVER_NAME: Final[str] = "invoice-parser"
SERVER_VERSION: Final[str] = "0.1.0"

TOOL_NAME: Final[str] = "save_to_sheet"


# ==============================================================================
# GOOGLE SHEETS API CONFIGURATION
# ==============================================================================

SCOPES: Final[list[str]] = ["https://www.googleapis.com/auth/spreadsheets"]

# Values are written as-is, without spreadsheet parsing of formulas or dates
VALUE_INPUT_OPTION: Final[str] = "RAW"


# ==============================================================================
# SHEET COLUMN LAYOUT
# ==============================================================================

COL_DATE: Final[int] = 0
COL_SENDER: Final[int] = 1
COL_ITEM: Final[int] = 2
COL_AMOUNT: Final[int] = 3

HEADER_ROW: Final[list[str]] = ["Date", "Sender", "Item", "Amount"]

FIRST_COLUMN: Final[str] = "A"
LAST_COLUMN: Final[str] = "D"


# ==============================================================================
# LOGGING
# ==============================================================================

LOG_LEVELS: Final[tuple[str, ...]] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(RuntimeError):
    """Raised when a setting is missing or invalid at startup."""


@dataclass(frozen=True)
class Settings:
    """Process settings, read once at startup."""

    credentials_path: str
    spreadsheet_id: str
    sheet_name: str | None = None
    log_level: str = "INFO"


def _require(env: Mapping[str, str], key: str) -> str:
    value: str | None = env.get(key)
    if not value or not value.strip():
        raise ConfigError(f"{key} environment variable is not set")
    return value.strip()


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Read and validate the process settings.

    :param env: Mapping to read from, defaults to ``os.environ``
    :type env: Mapping[str, str] | None
    :return: Validated settings
    :rtype: Settings
    :raises ConfigError: If the credentials path or spreadsheet id is missing,
        or the log level is unknown
    """
    source = os.environ if env is None else env

    credentials_path: str = _require(source, "GOOGLE_CREDENTIALS_PATH")
    spreadsheet_id: str = _require(source, "SPREADSHEET_ID")

    sheet_name: str | None = (source.get("SHEET_NAME") or "").strip() or None
    log_level: str = (source.get("LOG_LEVEL") or "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(
            f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
        )

    return Settings(
        credentials_path=credentials_path,
        spreadsheet_id=spreadsheet_id,
        sheet_name=sheet_name,
        log_level=log_level,
    )
