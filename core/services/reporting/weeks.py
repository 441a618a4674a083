from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import List, Tuple

# Fixed abbreviations so labels do not depend on the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WeekRange = Tuple[date, date]


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def week_range(value: date | datetime) -> WeekRange:
    """
    Week-of-month bucket containing `value`.

    Buckets start on days 1, 8, 15, 22 and 29 of the month regardless of
    weekday; the last bucket is cut at the month's final day.
    """
    day = _as_date(value)
    first_of_month = day.replace(day=1)
    week_index = (day.day - first_of_month.day) // 7
    start = first_of_month + timedelta(days=week_index * 7)
    end = start + timedelta(days=6)
    if end.month != day.month:
        end = last_day_of_month(day.year, day.month)
    return start, end


def format_day_month(value: date) -> str:
    return f"{value.day:02d} {MONTH_ABBREVIATIONS[value.month - 1]}"


def week_label(value: date | datetime) -> str:
    start, end = week_range(value)
    return f"{format_day_month(start)}.-{format_day_month(end)}"


def month_weeks(year: int, month: int) -> List[WeekRange]:
    weeks: List[WeekRange] = []
    current = date(year, month, 1)
    while current.month == month:
        bucket = week_range(current)
        weeks.append(bucket)
        current = bucket[1] + timedelta(days=1)
    return weeks


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


__all__ = [
    "MONTH_ABBREVIATIONS",
    "MONTH_NAMES",
    "WeekRange",
    "last_day_of_month",
    "week_range",
    "week_label",
    "format_day_month",
    "month_weeks",
    "month_name",
]
