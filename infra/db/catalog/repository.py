from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import DestinationRepository, SupplierRepository
from core.models import Destination, Supplier
from infra.db.catalog.mapper import (
    destination_from_orm,
    destination_to_orm,
    supplier_from_orm,
    supplier_to_orm,
)
from infra.db.models import DestinationORM, SupplierORM


class SqlAlchemySupplierRepository(SupplierRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, supplier: Supplier) -> int:
        obj = supplier_to_orm(supplier)
        self.session.add(obj)
        self.session.flush()
        supplier.id = obj.id
        return obj.id

    def get(self, supplier_id: int) -> Optional[Supplier]:
        if supplier_id is None:
            return None
        obj = self.session.get(SupplierORM, supplier_id)
        return supplier_from_orm(obj) if obj else None

    def list_all(self) -> List[Supplier]:
        stmt = select(SupplierORM).order_by(SupplierORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [supplier_from_orm(row) for row in rows]


class SqlAlchemyDestinationRepository(DestinationRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, destination: Destination) -> int:
        obj = destination_to_orm(destination)
        self.session.add(obj)
        self.session.flush()
        destination.id = obj.id
        return obj.id

    def get(self, destination_id: int) -> Optional[Destination]:
        if destination_id is None:
            return None
        obj = self.session.get(DestinationORM, destination_id)
        return destination_from_orm(obj) if obj else None

    def list_all(self) -> List[Destination]:
        stmt = select(DestinationORM).order_by(DestinationORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [destination_from_orm(row) for row in rows]


__all__ = ["SqlAlchemySupplierRepository", "SqlAlchemyDestinationRepository"]
