from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

NOT_AVAILABLE = "N/A"

REPORT_HEADERS: Tuple[str, ...] = (
    "Supplier",
    "Week",
    "Destination",
    "Trip number",
    "Supplier cost",
    "Highway expenses",
    "Stay cost",
    "Total cost",
    "Date",
)


@dataclass(frozen=True)
class ReportRow:
    freight_id: Optional[int]
    supplier_name: str
    week_label: str
    destination_name: str
    trip_number: int
    destination_cost: int
    highway_cost: int
    stay_cost: int
    total_cost: int
    date_label: str

    def as_values(self) -> tuple:
        return (
            self.supplier_name,
            self.week_label,
            self.destination_name,
            self.trip_number,
            self.destination_cost,
            self.highway_cost,
            self.stay_cost,
            self.total_cost,
            self.date_label,
        )


@dataclass(frozen=True)
class ReportTotals:
    destination_cost: int
    highway_cost: int
    stay_cost: int
    total_cost: int


@dataclass(frozen=True)
class ReportModel:
    title: str
    sheet_name: str
    file_stem: str
    rows: Tuple[ReportRow, ...]
    totals: Optional[ReportTotals] = None
    headers: Tuple[str, ...] = REPORT_HEADERS

    @property
    def has_totals(self) -> bool:
        return self.totals is not None


@dataclass(frozen=True)
class MonthWithData:
    year: int
    month: int
    month_name: str
    label: str


__all__ = [
    "NOT_AVAILABLE",
    "REPORT_HEADERS",
    "ReportRow",
    "ReportTotals",
    "ReportModel",
    "MonthWithData",
]
