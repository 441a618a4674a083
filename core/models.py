"""Compatibility wrapper for domain models."""

from core.domain import (
    DateRangePeriod,
    Destination,
    FreightInput,
    FreightRecord,
    FreightView,
    MonthPeriod,
    Period,
    Supplier,
)

__all__ = [
    "Supplier",
    "Destination",
    "FreightInput",
    "FreightRecord",
    "FreightView",
    "MonthPeriod",
    "DateRangePeriod",
    "Period",
]
