"""Parsing helpers for ticket spreadsheets.

`read_rows` decodes a workbook (or CSV export) into a list of row records
keyed by the header row. Every cell is read as text and empty cells become
empty strings, which is the input shape the aggregators expect.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

log = logging.getLogger(__name__)

EXCEL_SUFFIXES = frozenset({".xlsx", ".xlsm"})
CSV_SUFFIXES = frozenset({".csv"})


def rows_from_frame(pdf: pd.DataFrame) -> list[dict[str, str]]:
    """Convert a DataFrame into row records with string keys and values.

    Args:
        pdf: DataFrame whose columns are the header names.

    Returns:
        List of dicts, one per row, in file order. Missing cells are ``""``.
    """
    pdf = pdf.copy()
    pdf.columns = [str(c) for c in pdf.columns]
    pdf = pdf.fillna("").astype(str)
    return pdf.to_dict(orient="records")


def read_rows(path: Path, sheet: int | str = 0) -> list[dict[str, str]]:
    """Read a single spreadsheet file into row records.

    The first row is treated as the header. Only one sheet of one file is
    read per call.

    Args:
        path: Path to a `.xlsx`, `.xlsm` or `.csv` file.
        sheet: Sheet index or name for workbooks (ignored for CSV).

    Returns:
        List of row dicts mapping column name to cell text.

    Raises:
        ValueError: if the file extension is not supported.
        FileNotFoundError: if `path` does not exist.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in EXCEL_SUFFIXES:
        pdf = pd.read_excel(path, sheet_name=sheet, dtype=str, keep_default_na=False)
    elif suffix in CSV_SUFFIXES:
        pdf = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    else:
        raise ValueError(
            f"Unsupported file type {suffix or '(none)'!r} for {path}; "
            "expected one of .xlsx, .xlsm, .csv"
        )

    rows = rows_from_frame(pdf)
    log.info("Read %d rows from %s", len(rows), path)
    if rows:
        log.debug("First row sample: %s", rows[0])
    return rows
