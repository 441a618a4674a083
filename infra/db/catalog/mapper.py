from __future__ import annotations

from core.models import Destination, Supplier
from infra.db.models import DestinationORM, SupplierORM


def supplier_to_orm(supplier: Supplier) -> SupplierORM:
    return SupplierORM(id=supplier.id, name=supplier.name)


def supplier_from_orm(obj: SupplierORM) -> Supplier:
    return Supplier(id=obj.id, name=obj.name or "")


def destination_to_orm(destination: Destination) -> DestinationORM:
    return DestinationORM(id=destination.id, name=destination.name, cost=destination.cost)


def destination_from_orm(obj: DestinationORM) -> Destination:
    return Destination(id=obj.id, name=obj.name or "", cost=obj.cost)


__all__ = [
    "supplier_to_orm",
    "supplier_from_orm",
    "destination_to_orm",
    "destination_from_orm",
]
