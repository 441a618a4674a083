from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import ClassVar, Iterable, List, Union

from core.domain.freight import FreightView
from core.exceptions import ValidationError

MIN_YEAR = 2000
MAX_YEAR = 2100


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def _start_of(value: date) -> datetime:
    return datetime.combine(value, time.min)


@dataclass(frozen=True)
class MonthPeriod:
    """A calendar month; reports list equal dates newest id first."""
    year: int
    month: int

    newest_id_first: ClassVar[bool] = True

    def __post_init__(self) -> None:
        for value in (self.year, self.month):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError("Year and month must be integers.", code="INVALID_PERIOD")
        if self.month < 1 or self.month > 12 or self.year < MIN_YEAR or self.year > MAX_YEAR:
            raise ValidationError("Invalid month or year.", code="INVALID_PERIOD")

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def bounds(self) -> tuple[datetime, datetime]:
        if self.month == 12:
            next_month = date(self.year + 1, 1, 1)
        else:
            next_month = date(self.year, self.month + 1, 1)
        return _start_of(self.first_day), _start_of(next_month)

    def contains(self, value: date | datetime) -> bool:
        day = _as_date(value)
        return day.year == self.year and day.month == self.month

    def order(self, views: Iterable[FreightView]) -> List[FreightView]:
        return sorted(views, key=lambda v: (v.registration_date or datetime.min, -(v.id or 0)))


@dataclass(frozen=True)
class DateRangePeriod:
    """Inclusive date range; the time of day of a registration is ignored."""
    start: date
    end: date

    newest_id_first: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if self.start is None or self.end is None:
            raise ValidationError("Start and end dates are required.", code="INVALID_DATE_RANGE")
        object.__setattr__(self, "start", _as_date(self.start))
        object.__setattr__(self, "end", _as_date(self.end))
        if self.start > self.end:
            raise ValidationError(
                "The start date cannot be later than the end date.",
                code="INVALID_DATE_RANGE",
            )

    def bounds(self) -> tuple[datetime, datetime]:
        return _start_of(self.start), _start_of(self.end + timedelta(days=1))

    def contains(self, value: date | datetime) -> bool:
        return self.start <= _as_date(value) <= self.end

    def order(self, views: Iterable[FreightView]) -> List[FreightView]:
        return sorted(views, key=lambda v: (v.registration_date or datetime.min, v.id or 0))


Period = Union[MonthPeriod, DateRangePeriod]


__all__ = ["MIN_YEAR", "MAX_YEAR", "MonthPeriod", "DateRangePeriod", "Period"]
