"""ticket_dashboard package.

Contains modules for reading a ticket spreadsheet into untyped row records,
normalizing loosely-keyed fields, and deriving the three views a dashboard
renders from one upload: status metrics, tickets per day, and per-category
breakdowns.

Architecture:
- Row source (pandas) -> aggregators (pure functions over rows)
- Pydantic models describe the derived views
- A small argparse CLI prints the views as JSON
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
