# infra/db/models.py
from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infra.db.base import Base


class SupplierORM(Base):
    __tablename__ = "suppliers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)


class DestinationORM(Base):
    __tablename__ = "destinations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    cost: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


class FreightORM(Base):
    __tablename__ = "fletes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    supplier_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("suppliers.id", ondelete="CASCADE"),
        nullable=True,
    )
    destination_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("destinations.id", ondelete="CASCADE"),
        nullable=True,
    )
    highway_expense_cost: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    cost_of_stay: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    registration_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    trip_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, server_default=func.current_timestamp()
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    supplier: Mapped[Optional[SupplierORM]] = relationship(SupplierORM, lazy="joined")
    destination: Mapped[Optional[DestinationORM]] = relationship(DestinationORM, lazy="joined")

Index("idx_fletes_registration_date", FreightORM.registration_date)
Index("idx_fletes_supplier", FreightORM.supplier_id)
Index("idx_fletes_destination", FreightORM.destination_id)
