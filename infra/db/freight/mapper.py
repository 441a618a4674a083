from __future__ import annotations

from core.models import FreightRecord, FreightView
from infra.db.models import FreightORM


def freight_to_orm(record: FreightRecord) -> FreightORM:
    return FreightORM(
        id=record.id,
        supplier_id=record.supplier_id,
        destination_id=record.destination_id,
        highway_expense_cost=record.highway_expense_cost,
        cost_of_stay=record.cost_of_stay,
        registration_date=record.registration_date,
        trip_number=record.trip_number,
        version=getattr(record, "version", 1),
    )


def freight_from_orm(obj: FreightORM) -> FreightRecord:
    return FreightRecord(
        id=obj.id,
        supplier_id=obj.supplier_id,
        destination_id=obj.destination_id,
        highway_expense_cost=obj.highway_expense_cost,
        cost_of_stay=obj.cost_of_stay,
        registration_date=obj.registration_date,
        trip_number=obj.trip_number,
        created_at=obj.created_at,
        version=getattr(obj, "version", 1),
    )


def freight_view_from_orm(obj: FreightORM) -> FreightView:
    supplier = obj.supplier
    destination = obj.destination
    return FreightView(
        record=freight_from_orm(obj),
        supplier_name=supplier.name if supplier else None,
        destination_name=destination.name if destination else None,
        destination_cost=destination.cost if destination else None,
    )


__all__ = ["freight_to_orm", "freight_from_orm", "freight_view_from_orm"]
