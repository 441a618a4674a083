from core.domain.catalog import Destination, Supplier
from core.domain.freight import FreightInput, FreightRecord, FreightView
from core.domain.period import DateRangePeriod, MonthPeriod, Period

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
