from __future__ import annotations

import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from core.interfaces import FreightRepository
from core.services.common.base import ServiceBase
from core.services.reporting.builder import ReportBuilder
from core.services.reporting.models import MonthWithData, ReportModel
from core.services.reporting.periods import PeriodQueryPlanner
from core.services.reporting.weeks import month_name

logger = logging.getLogger(__name__)


class FreightReportingService(ServiceBase):
    def __init__(self, session: Session, freight_repo: FreightRepository):
        super().__init__(session)
        self._freight_repo: FreightRepository = freight_repo
        self._planner = PeriodQueryPlanner(freight_repo)
        self._builder = ReportBuilder()

    def monthly_report(self, year: int, month: int) -> ReportModel:
        period = self._planner.for_month(year, month)
        views = self._planner.fetch(period)
        name = month_name(month)
        # Monthly reports carry no totals row; range reports do.
        model = self._builder.build(
            f"FREIGHT REPORT - {name.upper()} {year}",
            views,
            include_totals=False,
            sheet_name="Monthly report",
            file_stem=f"Freight_Report_{name}_{year}",
        )
        logger.info("Monthly report %s-%02d built with %d rows.", year, month, len(model.rows))
        return model

    def range_report(self, start: date, end: date) -> ReportModel:
        period = self._planner.for_range(start, end)
        views = self._planner.fetch(period)
        model = self._builder.build(
            f"FREIGHT REPORT - FROM {period.start:%d/%m/%Y} TO {period.end:%d/%m/%Y}",
            views,
            include_totals=True,
            sheet_name="Period report",
            file_stem=f"Freight_Report_{period.start:%Y%m%d}_{period.end:%Y%m%d}",
        )
        logger.info("Range report %s..%s built with %d rows.", period.start, period.end, len(model.rows))
        return model

    def months_with_data(self) -> List[MonthWithData]:
        return self._planner.months_with_data()
