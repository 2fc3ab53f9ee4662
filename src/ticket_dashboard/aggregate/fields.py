"""Logical field -> physical column resolution.

Spreadsheets exported from different trackers spell the same column in
different ways. Each logical field maps to an ordered list of candidate
column names; the first candidate holding a value wins.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ticket_dashboard.clean.transform import is_blank

CATEGORY_ALIASES: dict[str, tuple[str, ...]] = {
    "technology": ("Technology/Platform", "Technology", "technology"),
    "client": ("Client", "client"),
    "ticketType": ("Ticket Type", "TicketType", "ticketType"),
    "assignedTo": ("Assigned To", "Assigned to", "AssignedTo", "assignedTo"),
    "status": ("Status", "status"),
}

STATUS_ALIASES: tuple[str, ...] = CATEGORY_ALIASES["status"]

DATE_ALIASES: tuple[str, ...] = ("Date", "date", "Created Date", "Created On")


def _capitalize(text: str) -> str:
    # Only the first letter changes; str.capitalize would lowercase the rest.
    return text[:1].upper() + text[1:]


def candidate_keys(category: str) -> tuple[str, ...]:
    """Return the ordered column names to try for a logical category.

    Well-known keys use `CATEGORY_ALIASES`. Any other key tries the literal
    name, its lowercase form, then its first-letter-capitalized form.

    Args:
        category: Logical category key (e.g. ``"client"`` or ``"Priority"``).

    Returns:
        Tuple of candidate column names without duplicates.
    """
    if category in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[category]
    candidates = (category, category.lower(), _capitalize(category))
    return tuple(dict.fromkeys(candidates))


def resolve_field(row: Mapping[str, Any], candidates: Sequence[str]) -> Any | None:
    """Return the first non-blank value among `candidates`, else ``None``."""
    for key in candidates:
        value = row.get(key)
        if not is_blank(value):
            return value
    return None
