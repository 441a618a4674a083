from .catalog import CatalogService
from .freight import FreightService, FreightRecordFactory
from .reporting import FreightReportingService

__all__ = [
    "CatalogService",
    "FreightService",
    "FreightRecordFactory",
    "FreightReportingService",
]
