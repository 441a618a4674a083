# tests/conftest.py
from __future__ import annotations

import os

# keep module-level engine creation away from the real user data dir
os.environ.setdefault("FLETES_DATABASE_URL", "sqlite:///:memory:")

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from infra.db.base import Base
from infra.db.repositories import (
    SqlAlchemyDestinationRepository,
    SqlAlchemyFreightRepository,
    SqlAlchemySupplierRepository,
)

from core.models import FreightInput
from core.services.catalog import CatalogService
from core.services.freight import FreightService
from core.services.reporting import FreightReportingService


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    # Recreate what build_services() does, but with the test session
    freight_repo = SqlAlchemyFreightRepository(session)
    supplier_repo = SqlAlchemySupplierRepository(session)
    destination_repo = SqlAlchemyDestinationRepository(session)

    return {
        "session": session,
        "freight_repo": freight_repo,
        "supplier_repo": supplier_repo,
        "freight_service": FreightService(session, freight_repo, supplier_repo),
        "catalog_service": CatalogService(session, supplier_repo, destination_repo),
        "reporting_service": FreightReportingService(session, freight_repo),
    }


@pytest.fixture
def add_trip(services):
    """Register a trip; supplier/destination are looked up or created by name."""
    catalog = services["catalog_service"]
    freights = services["freight_service"]
    suppliers: dict[str, int] = {}
    destinations: dict[tuple[str, int | None], int] = {}

    def _add(
        registered: datetime | None,
        *,
        supplier: str | None = "TRANSPORTES DEL NORTE",
        destination: str | None = "MONTERREY",
        destination_cost: int | None = 500,
        highway: int | None = None,
        stay: int | None = None,
        trip_number: int | None = None,
    ):
        supplier_id = None
        if supplier is not None:
            if supplier not in suppliers:
                suppliers[supplier] = catalog.add_supplier(supplier).id
            supplier_id = suppliers[supplier]
        destination_id = None
        if destination is not None:
            key = (destination, destination_cost)
            if key not in destinations:
                destinations[key] = catalog.add_destination(destination, destination_cost).id
            destination_id = destinations[key]
        return freights.create_freight(
            FreightInput(
                supplier_id=supplier_id,
                destination_id=destination_id,
                highway_expense_cost=highway,
                cost_of_stay=stay,
                registration_date=registered,
                trip_number=trip_number,
            )
        )

    return _add
