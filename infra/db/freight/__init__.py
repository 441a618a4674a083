from infra.db.freight.mapper import freight_from_orm, freight_to_orm, freight_view_from_orm
from infra.db.freight.repository import SqlAlchemyFreightRepository

__all__ = [
    "freight_to_orm",
    "freight_from_orm",
    "freight_view_from_orm",
    "SqlAlchemyFreightRepository",
]
