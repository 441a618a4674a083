from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import ValidationError
from core.interfaces import DestinationRepository, SupplierRepository
from core.models import Destination, Supplier
from core.services.common.base import ServiceBase

logger = logging.getLogger(__name__)


class CatalogService(ServiceBase):
    """Supplier and destination reference data used by freight entry and reports."""

    def __init__(
        self,
        session: Session,
        supplier_repo: SupplierRepository,
        destination_repo: DestinationRepository,
    ):
        super().__init__(session)
        self._supplier_repo: SupplierRepository = supplier_repo
        self._destination_repo: DestinationRepository = destination_repo

    def add_supplier(self, name: str) -> Supplier:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Supplier name cannot be empty.", code="SUPPLIER_NAME_EMPTY")
        supplier = Supplier.create(cleaned)
        self._write(lambda: self._supplier_repo.add(supplier))
        logger.info("Supplier %s added: %s", supplier.id, supplier.name)
        domain_events.catalog_changed.emit("supplier")
        return supplier

    def add_destination(self, name: str, cost: Optional[int] = None) -> Destination:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Destination name cannot be empty.", code="DESTINATION_NAME_EMPTY")
        if cost is not None and cost < 0:
            raise ValidationError("Destination cost cannot be negative.", code="DESTINATION_NEGATIVE_COST")
        destination = Destination.create(cleaned, cost)
        self._write(lambda: self._destination_repo.add(destination))
        logger.info("Destination %s added: %s (cost=%s)", destination.id, destination.name, cost)
        domain_events.catalog_changed.emit("destination")
        return destination

    def list_suppliers(self) -> List[Supplier]:
        return self._supplier_repo.list_all()

    def list_destinations(self) -> List[Destination]:
        return self._destination_repo.list_all()


__all__ = ["CatalogService"]
