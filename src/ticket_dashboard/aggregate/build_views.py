"""Dashboard view builders.

Functions in this module derive the dashboard views from a sequence of row
records. Each function makes one pass over the rows, never mutates them and
never raises for missing or malformed fields.

Expectations:
- Input: any iterable of string-keyed mappings (or ``None``). Column names
  vary by file; see `ticket_dashboard.aggregate.fields` for the aliases.
- Outputs: pydantic models from `ticket_dashboard.models`.
"""
from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Any, Iterable, Mapping, Sequence

from ticket_dashboard.aggregate.fields import (
    DATE_ALIASES,
    STATUS_ALIASES,
    candidate_keys,
    resolve_field,
)
from ticket_dashboard.clean.transform import parse_day, to_text
from ticket_dashboard.models import CategoryPoint, DashboardSummary, Metrics, TimePoint

log = logging.getLogger(__name__)

Row = Mapping[str, Any]

OPEN_STATUSES = frozenset({"open", "in review", "hold", "in progress"})
RESOLVED_STATUSES = frozenset({"closed"})

UNKNOWN = "Unknown"

DEFAULT_CATEGORIES: tuple[str, ...] = (
    "technology",
    "client",
    "ticketType",
    "assignedTo",
    "status",
)


# =========================================================
# METRICS
# =========================================================

def calculate_metrics(rows: Iterable[Row] | None) -> Metrics:
    """Return total, open and resolved ticket counts.

    Status is read from `Status` then `status` and compared lowercased.
    Rows with an empty or unrecognized status count toward the total only.

    Args:
        rows: Row records; ``None`` or empty yields all-zero metrics.

    Returns:
        `Metrics` with `total_tickets`, `open_tickets`, `resolved_tickets`.
    """
    total = opened = resolved = 0

    for row in rows or ():
        total += 1
        status = to_text(resolve_field(row, STATUS_ALIASES)).lower()
        if status in OPEN_STATUSES:
            opened += 1
        elif status in RESOLVED_STATUSES:
            resolved += 1

    return Metrics(total_tickets=total, open_tickets=opened, resolved_tickets=resolved)


# =========================================================
# TIME SERIES
# =========================================================

def prepare_time_series(rows: Iterable[Row] | None) -> list[TimePoint]:
    """Return ticket counts per calendar day, oldest day first.

    The date comes from the first non-empty of `Date`, `date`,
    `Created Date`, `Created On`. Rows without a date, or whose date cannot
    be parsed, are left out.

    Args:
        rows: Row records; ``None`` or empty yields ``[]``.

    Returns:
        List of `TimePoint` with one entry per distinct day.
    """
    per_day: Counter[date] = Counter()
    skipped = 0

    for row in rows or ():
        raw = resolve_field(row, DATE_ALIASES)
        if raw is None:
            skipped += 1
            continue
        day = parse_day(raw)
        if day is None:
            skipped += 1
            continue
        per_day[day] += 1

    if skipped:
        log.debug("Time series skipped %d rows without a usable date", skipped)

    return [
        TimePoint(date=day.isoformat(), tickets=count)
        for day, count in sorted(per_day.items())
    ]


# =========================================================
# CATEGORIES
# =========================================================

def prepare_category_data(
    rows: Iterable[Row] | None,
    category: str | None,
) -> list[CategoryPoint]:
    """Return ticket counts grouped by one logical category.

    Values are trimmed but keep their case, so ``"Acme"`` and ``"acme"``
    land in separate buckets. Rows with no value count under ``"Unknown"``.
    Entry order follows first appearance and carries no meaning.

    Args:
        rows: Row records; ``None`` or empty yields ``[]``.
        category: Logical key such as ``"client"``; empty yields ``[]``.

    Returns:
        List of `CategoryPoint` with unique names.
    """
    if not category:
        return []

    candidates = candidate_keys(category)
    buckets: Counter[str] = Counter()

    for row in rows or ():
        value = resolve_field(row, candidates)
        name = to_text(value).strip() if value is not None else UNKNOWN
        buckets[name] += 1

    return [CategoryPoint(name=name, value=count) for name, count in buckets.items()]


# =========================================================
# SUMMARY
# =========================================================

def build_dashboard(
    rows: Iterable[Row] | None,
    categories: Sequence[str] = DEFAULT_CATEGORIES,
) -> DashboardSummary:
    """Compute every view for one upload.

    Args:
        rows: Row records. Iterated once per view, so generators are
            materialized first.
        categories: Logical category keys to break down.

    Returns:
        `DashboardSummary` bundling metrics, time series and categories.
    """
    data = list(rows or ())
    log.info("Building dashboard views for %d rows", len(data))

    return DashboardSummary(
        metrics=calculate_metrics(data),
        time_series=prepare_time_series(data),
        categories={key: prepare_category_data(data, key) for key in categories if key},
    )
