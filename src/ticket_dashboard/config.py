"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads environment variables (including a check that `TICKET_LOG_LEVEL`
names a real logging level).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

@dataclass(frozen=True)
class Settings:
    """Container for dashboard configuration read from the environment.

    Attributes:
        log_level: Numeric logging level.
        log_path: Optional file that receives log output.
        sheet: Sheet index or name read from workbooks.
    """
    log_level: int
    log_path: Path | None
    sheet: int | str



def parse_sheet(raw: str) -> int | str:
    """Return `raw` as a sheet index when it is all digits, else as a sheet name."""
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    return raw or 0


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `TICKET_LOG_LEVEL` is not a standard logging level.
    """
    level_name = os.getenv("TICKET_LOG_LEVEL", "INFO").strip().upper()
    log_path_raw = os.getenv("TICKET_LOG_PATH", "").strip()
    sheet = parse_sheet(os.getenv("TICKET_SHEET", "0"))

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise RuntimeError(
            f"TICKET_LOG_LEVEL={level_name!r} is not a logging level "
            "(expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL)."
        )

    return Settings(
        log_level=level,
        log_path=Path(log_path_raw) if log_path_raw else None,
        sheet=sheet,
    )
