from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class FreightInput:
    """Caller payload for creating or updating a freight record."""
    supplier_id: Optional[int] = None
    destination_id: Optional[int] = None
    highway_expense_cost: Optional[int] = None
    cost_of_stay: Optional[int] = None
    registration_date: Optional[datetime] = None
    trip_number: Optional[int] = None


@dataclass
class FreightRecord:
    id: Optional[int]
    supplier_id: Optional[int] = None
    destination_id: Optional[int] = None
    highway_expense_cost: Optional[int] = None
    cost_of_stay: Optional[int] = None
    registration_date: Optional[datetime] = None
    trip_number: Optional[int] = None
    created_at: Optional[datetime] = None
    version: int = 1

    @staticmethod
    def create(
        supplier_id: Optional[int] = None,
        destination_id: Optional[int] = None,
        highway_expense_cost: Optional[int] = None,
        cost_of_stay: Optional[int] = None,
        registration_date: Optional[datetime] = None,
        trip_number: Optional[int] = None,
    ) -> "FreightRecord":
        # id and created_at are assigned by storage on insert
        return FreightRecord(
            id=None,
            supplier_id=supplier_id,
            destination_id=destination_id,
            highway_expense_cost=highway_expense_cost,
            cost_of_stay=cost_of_stay,
            registration_date=registration_date,
            trip_number=trip_number,
        )


@dataclass
class FreightView:
    """A freight record joined with its supplier and destination details."""
    record: FreightRecord
    supplier_name: Optional[str] = None
    destination_name: Optional[str] = None
    destination_cost: Optional[int] = None

    @property
    def id(self) -> Optional[int]:
        return self.record.id

    @property
    def registration_date(self) -> Optional[datetime]:
        return self.record.registration_date


__all__ = ["FreightInput", "FreightRecord", "FreightView"]
