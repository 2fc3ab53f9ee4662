"""Pydantic models for the derived dashboard views.

These models define the shape of the metrics, time-series and category
outputs consumed by charts and summary cards. Field names are snake_case in
Python and serialize under the camelCase aliases the dashboard expects.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

class Metrics(BaseModel):
    """Ticket counts by status class.

    Attributes:
        total_tickets: Number of rows scanned.
        open_tickets: Rows whose status is one of the open statuses.
        resolved_tickets: Rows whose status is `closed`.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)
    total_tickets: int = Field(0, ge=0, alias="totalTickets")
    open_tickets: int = Field(0, ge=0, alias="openTickets")
    resolved_tickets: int = Field(0, ge=0, alias="resolvedTickets")

    @model_validator(mode="after")
    def _classified_within_total(self) -> "Metrics":
        if self.open_tickets + self.resolved_tickets > self.total_tickets:
            raise ValueError("openTickets + resolvedTickets cannot exceed totalTickets")
        return self

class TimePoint(BaseModel):
    """Ticket count for a single calendar day (`YYYY-MM-DD`)."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    tickets: int = Field(..., ge=1)

class CategoryPoint(BaseModel):
    """Ticket count for one value of a logical category."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)
    name: str
    value: int = Field(..., ge=1)

class DashboardSummary(BaseModel):
    """All views derived from one upload.

    Attributes:
        metrics: Status metrics for the summary cards.
        time_series: Tickets per day, oldest first.
        categories: Breakdown per requested logical category key.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)
    metrics: Metrics
    time_series: list[TimePoint] = Field(default_factory=list, alias="timeSeries")
    categories: dict[str, list[CategoryPoint]] = Field(default_factory=dict)
