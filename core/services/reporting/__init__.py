from .service import FreightReportingService
from .builder import ReportBuilder
from .periods import PeriodQueryPlanner
from .models import (
    MonthWithData,
    ReportModel,
    ReportRow,
    ReportTotals,
)
from .weeks import week_label, week_range

__all__ = [
    "FreightReportingService",
    "ReportBuilder",
    "PeriodQueryPlanner",
    "MonthWithData",
    "ReportModel",
    "ReportRow",
    "ReportTotals",
    "week_label",
    "week_range",
]
