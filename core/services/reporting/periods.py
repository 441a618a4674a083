from __future__ import annotations

import logging
from datetime import date
from typing import List

from core.exceptions import NoDataError
from core.interfaces import FreightRepository
from core.models import DateRangePeriod, FreightView, MonthPeriod, Period
from core.services.reporting.models import MonthWithData
from core.services.reporting.weeks import month_name

logger = logging.getLogger(__name__)


class PeriodQueryPlanner:
    """Validates report periods and fetches their records in report order."""

    def __init__(self, freight_repo: FreightRepository):
        self._freight_repo: FreightRepository = freight_repo

    def for_month(self, year: int, month: int) -> MonthPeriod:
        return MonthPeriod(year=year, month=month)

    def for_range(self, start: date, end: date) -> DateRangePeriod:
        return DateRangePeriod(start=start, end=end)

    def fetch(self, period: Period) -> List[FreightView]:
        views = period.order(self._freight_repo.list_in_period(period))
        if not views:
            logger.info("No freight records for %s.", period)
            raise NoDataError("No data for the specified period.")
        return views

    def months_with_data(self) -> List[MonthWithData]:
        result: List[MonthWithData] = []
        for year, month in self._freight_repo.distinct_months():
            name = month_name(month)
            result.append(
                MonthWithData(year=year, month=month, month_name=name, label=f"{name} {year}")
            )
        return result


__all__ = ["PeriodQueryPlanner"]
