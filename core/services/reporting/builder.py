from __future__ import annotations

from typing import Iterable, List, Optional

from core.models import FreightView
from core.services.reporting.models import (
    NOT_AVAILABLE,
    ReportModel,
    ReportRow,
    ReportTotals,
)
from core.services.reporting.weeks import week_label


def _amount(value: Optional[int]) -> int:
    return int(value or 0)


class ReportBuilder:
    """Turns ordered freight views into an immutable report model. No I/O."""

    def build(
        self,
        title: str,
        views: Iterable[FreightView],
        include_totals: bool,
        *,
        sheet_name: str = "Report",
        file_stem: str = "Freight_Report",
    ) -> ReportModel:
        rows = [self.build_row(view) for view in views]
        totals = self.totals(rows) if include_totals else None
        return ReportModel(
            title=title,
            sheet_name=sheet_name,
            file_stem=file_stem,
            rows=tuple(rows),
            totals=totals,
        )

    def build_row(self, view: FreightView) -> ReportRow:
        record = view.record
        destination_cost = _amount(view.destination_cost)
        highway_cost = _amount(record.highway_expense_cost)
        stay_cost = _amount(record.cost_of_stay)
        registered = record.registration_date
        return ReportRow(
            freight_id=record.id,
            supplier_name=view.supplier_name or NOT_AVAILABLE,
            week_label=week_label(registered) if registered else NOT_AVAILABLE,
            destination_name=view.destination_name or NOT_AVAILABLE,
            trip_number=_amount(record.trip_number),
            destination_cost=destination_cost,
            highway_cost=highway_cost,
            stay_cost=stay_cost,
            total_cost=destination_cost + highway_cost + stay_cost,
            date_label=registered.strftime("%d/%m/%Y") if registered else NOT_AVAILABLE,
        )

    def totals(self, rows: List[ReportRow]) -> ReportTotals:
        return ReportTotals(
            destination_cost=sum(r.destination_cost for r in rows),
            highway_cost=sum(r.highway_cost for r in rows),
            stay_cost=sum(r.stay_cost for r in rows),
            total_cost=sum(r.total_cost for r in rows),
        )


__all__ = ["ReportBuilder"]
