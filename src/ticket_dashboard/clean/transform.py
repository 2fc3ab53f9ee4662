"""Cleaning and normalization utilities for single cell values.

Rows come from spreadsheets with no schema guarantee, so every helper here
accepts any value and never raises for malformed input.
"""
from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any

import pandas as pd

log = logging.getLogger(__name__)

# pandas resolves these against the clock, so they name no fixed day.
RELATIVE_DATE_WORDS = frozenset({"now", "today", "tomorrow", "yesterday"})

# Year-less values such as "Jan 5" come back as year 1.
MIN_YEAR = 1900


def is_blank(value: Any) -> bool:
    """Return True when a cell carries no value (None, "", or NaN)."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return math.isnan(value)
    return value is pd.NaT or value is pd.NA


def to_text(value: Any) -> str:
    """Coerce a cell value to text; blank cells become ""."""
    if is_blank(value):
        return ""
    return str(value)


def parse_day(value: Any) -> date | None:
    """Parse a date-like cell into its calendar day.

    Uses the same month-first parser as the rest of pandas. Time of day and
    any UTC offset are dropped; the wall-clock day as written is kept.

    Relative words ("now", "today", ...) and values without a usable year
    are rejected, so the result depends only on the cell.

    Returns:
        The `date`, or ``None`` when the value is blank or unparseable.
    """
    text = to_text(value).strip()
    if not text:
        return None
    if text.lower() in RELATIVE_DATE_WORDS:
        log.debug("Relative date value ignored: %r", value)
        return None

    try:
        ts = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        ts = pd.NaT

    if pd.isna(ts) or ts.year < MIN_YEAR:
        log.debug("Unparseable date value: %r", value)
        return None

    return ts.date()
