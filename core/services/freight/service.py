from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import ConcurrencyError, NotFoundError
from core.interfaces import FreightRepository, SupplierRepository
from core.models import FreightInput, FreightRecord, FreightView
from core.services.common.base import ServiceBase
from core.services.freight.factory import FreightRecordFactory

logger = logging.getLogger(__name__)


class FreightService(ServiceBase):
    def __init__(
        self,
        session: Session,
        freight_repo: FreightRepository,
        supplier_repo: SupplierRepository,
    ):
        super().__init__(session)
        self._freight_repo: FreightRepository = freight_repo
        self._supplier_repo: SupplierRepository = supplier_repo
        self._factory = FreightRecordFactory(supplier_repo)

    def create_freight(self, data: Optional[FreightInput]) -> FreightRecord:
        record = self._factory.build(data)
        self._write(lambda: self._freight_repo.add(record))

        logger.info(
            "Freight %s registered (supplier=%s, destination=%s).",
            record.id, record.supplier_id, record.destination_id,
        )
        domain_events.freights_changed.emit(record.id)
        return record

    def update_freight(
        self,
        freight_id: int,
        data: Optional[FreightInput],
        expected_version: int | None = None,
    ) -> FreightRecord:
        existing = self._freight_repo.get(freight_id)
        if not existing:
            raise NotFoundError("Freight record not found.", code="FREIGHT_NOT_FOUND")
        if expected_version is not None and existing.version != expected_version:
            raise ConcurrencyError(
                "Freight record changed since you opened it. Refresh and try again.",
                code="STALE_WRITE",
            )

        record = self._factory.apply_update(existing, data)
        self._write(lambda: self._freight_repo.update(record))

        logger.info("Freight %s updated to version %s.", record.id, record.version)
        domain_events.freights_changed.emit(record.id)
        return record

    def delete_freight(self, freight_id: int) -> None:
        if not self._freight_repo.get(freight_id):
            raise NotFoundError("Freight record not found.", code="FREIGHT_NOT_FOUND")
        self._write(lambda: self._freight_repo.delete(freight_id))

        logger.info("Freight %s deleted.", freight_id)
        domain_events.freights_changed.emit(freight_id)

    def get_freight(self, freight_id: int) -> FreightView:
        view = self._freight_repo.get_view(freight_id)
        if not view:
            raise NotFoundError(f"Freight with ID {freight_id} not found.", code="FREIGHT_NOT_FOUND")
        return view

    def list_freights(self) -> List[FreightView]:
        return self._freight_repo.list_views()


__all__ = ["FreightService"]
