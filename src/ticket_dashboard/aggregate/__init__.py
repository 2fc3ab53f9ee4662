"""Dashboard aggregation helpers.

This package turns a sequence of untyped, inconsistently keyed row records
into the derived views a dashboard renders: status metrics, a per-day time
series and per-category breakdowns.
"""

from ticket_dashboard.aggregate.build_views import (
    DEFAULT_CATEGORIES,
    build_dashboard,
    calculate_metrics,
    prepare_category_data,
    prepare_time_series,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "build_dashboard",
    "calculate_metrics",
    "prepare_category_data",
    "prepare_time_series",
]
