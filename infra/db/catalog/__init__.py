from infra.db.catalog.mapper import (
    destination_from_orm,
    destination_to_orm,
    supplier_from_orm,
    supplier_to_orm,
)
from infra.db.catalog.repository import (
    SqlAlchemyDestinationRepository,
    SqlAlchemySupplierRepository,
)

__all__ = [
    "supplier_to_orm",
    "supplier_from_orm",
    "destination_to_orm",
    "destination_from_orm",
    "SqlAlchemySupplierRepository",
    "SqlAlchemyDestinationRepository",
]
