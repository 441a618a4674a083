from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import extract, select
from sqlalchemy.orm import Session

from core.interfaces import FreightRepository
from core.models import FreightRecord, FreightView, Period
from infra.db.freight.mapper import freight_from_orm, freight_to_orm, freight_view_from_orm
from infra.db.models import FreightORM
from infra.db.optimistic import update_with_version_check


class SqlAlchemyFreightRepository(FreightRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, record: FreightRecord) -> int:
        obj = freight_to_orm(record)
        self.session.add(obj)
        self.session.flush()
        record.id = obj.id
        return obj.id

    def update(self, record: FreightRecord) -> None:
        record.version = update_with_version_check(
            self.session,
            FreightORM,
            record.id,
            getattr(record, "version", 1),
            {
                "supplier_id": record.supplier_id,
                "destination_id": record.destination_id,
                "highway_expense_cost": record.highway_expense_cost,
                "cost_of_stay": record.cost_of_stay,
                "registration_date": record.registration_date,
                "trip_number": record.trip_number,
            },
            not_found_message="Freight record not found.",
            stale_message="Freight record was updated by another user.",
            not_found_code="FREIGHT_NOT_FOUND",
        )

    def delete(self, freight_id: int) -> None:
        self.session.query(FreightORM).filter_by(id=freight_id).delete()

    def get(self, freight_id: int) -> Optional[FreightRecord]:
        obj = self.session.get(FreightORM, freight_id)
        return freight_from_orm(obj) if obj else None

    def get_view(self, freight_id: int) -> Optional[FreightView]:
        obj = self.session.get(FreightORM, freight_id)
        return freight_view_from_orm(obj) if obj else None

    def list_views(self) -> List[FreightView]:
        stmt = select(FreightORM).order_by(FreightORM.id.desc())
        rows = self.session.execute(stmt).scalars().all()
        return [freight_view_from_orm(row) for row in rows]

    def list_in_period(self, period: Period) -> List[FreightView]:
        start, end = period.bounds()
        id_order = FreightORM.id.desc() if period.newest_id_first else FreightORM.id.asc()
        stmt = (
            select(FreightORM)
            .where(
                FreightORM.registration_date.is_not(None),
                FreightORM.registration_date >= start,
                FreightORM.registration_date < end,
            )
            .order_by(FreightORM.registration_date.asc(), id_order)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [freight_view_from_orm(row) for row in rows]

    def distinct_months(self) -> List[Tuple[int, int]]:
        year_col = extract("year", FreightORM.registration_date).label("year")
        month_col = extract("month", FreightORM.registration_date).label("month")
        stmt = (
            select(year_col, month_col)
            .where(FreightORM.registration_date.is_not(None))
            .distinct()
            .order_by(year_col.desc(), month_col.desc())
        )
        return [(int(year), int(month)) for year, month in self.session.execute(stmt).all()]


__all__ = ["SqlAlchemyFreightRepository"]
