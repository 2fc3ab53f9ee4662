from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest
from ticket_dashboard.cli import build_parser, main


@pytest.fixture()
def tickets_csv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for name in ("TICKET_LOG_LEVEL", "TICKET_LOG_PATH", "TICKET_SHEET"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "tickets.csv"
    path.write_text(
        "Status,Date,Client\n"
        "Open,2024-01-05,Acme\n"
        "closed,2024-01-05,acme \n"
        "Hold,2024-01-06,\n",
        encoding="utf-8",
    )
    return path


def test_parser_requires_category_for_categories_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["categories", "tickets.csv"])


def test_metrics_command_prints_json(tickets_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["metrics", str(tickets_csv)])
    out = json.loads(capsys.readouterr().out)
    assert out == {"totalTickets": 3, "openTickets": 2, "resolvedTickets": 1}


def test_timeseries_command_prints_json(tickets_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["timeseries", str(tickets_csv)])
    out = json.loads(capsys.readouterr().out)
    assert out == [
        {"date": "2024-01-05", "tickets": 2},
        {"date": "2024-01-06", "tickets": 1},
    ]


def test_categories_command_prints_json(tickets_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["categories", str(tickets_csv), "--category", "client"])
    out = json.loads(capsys.readouterr().out)
    assert {p["name"]: p["value"] for p in out} == {"Acme": 1, "acme": 1, "Unknown": 1}


def test_summary_command_limits_categories(tickets_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["summary", str(tickets_csv), "--category", "status", "--category", "client"])
    out = json.loads(capsys.readouterr().out)
    assert out["metrics"]["totalTickets"] == 3
    assert len(out["timeSeries"]) == 2
    assert set(out["categories"]) == {"status", "client"}


def test_sheet_option_selects_workbook_sheet_by_index(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    for name in ("TICKET_LOG_LEVEL", "TICKET_LOG_PATH", "TICKET_SHEET"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "tickets.xlsx"
    with pd.ExcelWriter(path) as writer:
        pd.DataFrame([{"Status": "Open"}]).to_excel(writer, sheet_name="Old", index=False)
        pd.DataFrame([{"Status": "closed"}, {"Status": "Hold"}]).to_excel(
            writer, sheet_name="Current", index=False
        )

    main(["metrics", str(path), "--sheet", "1"])
    out = json.loads(capsys.readouterr().out)
    assert out == {"totalTickets": 2, "openTickets": 1, "resolvedTickets": 1}
