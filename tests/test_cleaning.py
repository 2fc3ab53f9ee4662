from __future__ import annotations

from datetime import date

import pytest
from ticket_dashboard.clean.transform import is_blank, parse_day, to_text


@pytest.mark.parametrize("value", [None, "", float("nan")])
def test_is_blank_detects_missing_cells(value: object) -> None:
    assert is_blank(value)


@pytest.mark.parametrize("value", [" ", "0", 0, "Open"])
def test_is_blank_keeps_real_values(value: object) -> None:
    assert not is_blank(value)


def test_to_text_coerces_values() -> None:
    assert to_text(None) == ""
    assert to_text(12) == "12"
    assert to_text(" Acme ") == " Acme "


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-01-05", date(2024, 1, 5)),
        ("2024-01-05 14:30:00", date(2024, 1, 5)),
        ("2024-01-05T23:59:00+05:00", date(2024, 1, 5)),
        ("01/06/2024", date(2024, 1, 6)),
        ("March 3, 2024", date(2024, 3, 3)),
        (date(2024, 2, 29), date(2024, 2, 29)),
    ],
)
def test_parse_day_truncates_to_calendar_day(raw: object, expected: date) -> None:
    assert parse_day(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "   ", None, "not a date", "2024-02-30", "now", "Today", " TOMORROW ", "yesterday", "Jan 5"],
)
def test_parse_day_returns_none_for_unusable_values(raw: object) -> None:
    assert parse_day(raw) is None
