from .factory import FreightRecordFactory
from .policy import NO_COST_SUPPLIERS, apply_cost_policy, is_no_cost_supplier
from .service import FreightService

__all__ = [
    "FreightService",
    "FreightRecordFactory",
    "NO_COST_SUPPLIERS",
    "apply_cost_policy",
    "is_no_cost_supplier",
]
