"""Compatibility wrapper collecting the SQLAlchemy repositories."""

from infra.db.catalog.repository import (
    SqlAlchemyDestinationRepository,
    SqlAlchemySupplierRepository,
)
from infra.db.freight.repository import SqlAlchemyFreightRepository


__all__ = [
    "SqlAlchemySupplierRepository",
    "SqlAlchemyDestinationRepository",
    "SqlAlchemyFreightRepository",
]
