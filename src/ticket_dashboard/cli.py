"""Command-line interface for computing dashboard views from a spreadsheet.

Provides subcommands: `summary`, `metrics`, `timeseries`, and `categories`.
Each command is implemented as a `cmd_*` function that accepts an argparse
namespace and returns the JSON text it printed.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from ticket_dashboard.config import get_settings, parse_sheet
from ticket_dashboard.logging_config import configure_logging
from ticket_dashboard.ingest.read_rows import read_rows
from ticket_dashboard.aggregate.build_views import (
    DEFAULT_CATEGORIES,
    build_dashboard,
    calculate_metrics,
    prepare_category_data,
    prepare_time_series,
)

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _load(args: argparse.Namespace) -> list[dict[str, str]]:
    """Read the rows named by `args.file` using the requested sheet."""
    sheet = parse_sheet(args.sheet) if args.sheet is not None else get_settings().sheet
    return read_rows(Path(args.file), sheet=sheet)


def _emit(payload: Any) -> str:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    print(text)
    return text


# --------------------------------------------------
# Commands
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace) -> str:
    """Print every dashboard view for the file.

    Args:
        args: argparse namespace with `file`, `sheet`, `category`.
    """
    rows = _load(args)
    categories = args.category or list(DEFAULT_CATEGORIES)
    summary = build_dashboard(rows, categories)
    return _emit(summary.model_dump(mode="json", by_alias=True))


def cmd_metrics(args: argparse.Namespace) -> str:
    """Print status metrics for the file."""
    metrics = calculate_metrics(_load(args))
    return _emit(metrics.model_dump(mode="json", by_alias=True))


def cmd_timeseries(args: argparse.Namespace) -> str:
    """Print tickets per day for the file."""
    series = prepare_time_series(_load(args))
    return _emit([p.model_dump(mode="json", by_alias=True) for p in series])


def cmd_categories(args: argparse.Namespace) -> str:
    """Print the breakdown for a single category."""
    points = prepare_category_data(_load(args), args.category)
    return _emit([p.model_dump(mode="json", by_alias=True) for p in points])


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="ticket-dashboard")
    sub = p.add_subparsers(dest="cmd", required=True)

    def _with_file(name: str) -> argparse.ArgumentParser:
        sp = sub.add_parser(name)
        sp.add_argument("file")
        sp.add_argument("--sheet", default=None)
        return sp

    p_summary = _with_file("summary")
    p_summary.add_argument("--category", action="append", default=None)

    _with_file("metrics")
    _with_file("timeseries")

    p_categories = _with_file("categories")
    p_categories.add_argument("--category", required=True)

    return p


COMMANDS = {
    "summary": cmd_summary,
    "metrics": cmd_metrics,
    "timeseries": cmd_timeseries,
    "categories": cmd_categories,
}


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    args = build_parser().parse_args(argv)

    s = get_settings()
    configure_logging(s.log_path, s.log_level)

    handler = COMMANDS.get(args.cmd)
    if handler is None:
        raise SystemExit(2)
    handler(args)


if __name__ == "__main__":
    main()
