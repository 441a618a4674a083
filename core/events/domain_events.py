"""Track changes in freight records and reference data so listeners can refresh."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.freights_changed: Signal[int] = Signal()   # freight id
        self.catalog_changed: Signal[str] = Signal()    # "supplier" | "destination"


# SINGLE global instance
domain_events = DomainEvents()
