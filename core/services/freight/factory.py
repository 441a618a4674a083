from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from core.exceptions import ValidationError
from core.interfaces import SupplierRepository
from core.models import FreightInput, FreightRecord
from core.services.freight.policy import apply_cost_policy, is_no_cost_supplier

logger = logging.getLogger(__name__)


class FreightRecordFactory:
    """Builds freight records from caller input, zeroing excused incidental costs."""

    def __init__(self, supplier_repo: SupplierRepository):
        self._supplier_repo: SupplierRepository = supplier_repo

    def build(self, data: Optional[FreightInput]) -> FreightRecord:
        self._validate(data)
        highway, stay = self._resolve_costs(data)
        return FreightRecord.create(
            supplier_id=data.supplier_id,
            destination_id=data.destination_id,
            highway_expense_cost=highway,
            cost_of_stay=stay,
            registration_date=data.registration_date,
            trip_number=data.trip_number,
        )

    def apply_update(self, existing: FreightRecord, data: Optional[FreightInput]) -> FreightRecord:
        self._validate(data)
        highway, stay = self._resolve_costs(data)
        return replace(
            existing,
            supplier_id=data.supplier_id,
            destination_id=data.destination_id,
            highway_expense_cost=highway,
            cost_of_stay=stay,
            registration_date=data.registration_date,
            trip_number=data.trip_number,
        )

    def _validate(self, data: Optional[FreightInput]) -> None:
        if data is None:
            raise ValidationError("Freight data is empty.", code="FREIGHT_PAYLOAD_MISSING")

    def _check_non_negative(self, highway: Optional[int], stay: Optional[int]) -> None:
        for label, value in (("Highway expense cost", highway), ("Cost of stay", stay)):
            if value is not None and value < 0:
                raise ValidationError(f"{label} cannot be negative.", code="FREIGHT_NEGATIVE_COST")

    def _supplier_name(self, supplier_id: Optional[int]) -> str:
        if supplier_id is None:
            return ""
        supplier = self._supplier_repo.get(supplier_id)
        return (supplier.name or "") if supplier else ""

    def _resolve_costs(self, data: FreightInput) -> tuple[Optional[int], Optional[int]]:
        name = self._supplier_name(data.supplier_id)
        if is_no_cost_supplier(name):
            logger.info("Supplier %r is excused from incidental costs; zeroing them.", name)
        highway, stay = apply_cost_policy(name, data.highway_expense_cost, data.cost_of_stay)
        # checks the values that will be stored
        self._check_non_negative(highway, stay)
        return highway, stay


__all__ = ["FreightRecordFactory"]
