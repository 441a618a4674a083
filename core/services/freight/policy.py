from __future__ import annotations

from typing import Optional, Tuple

# Supplier categories whose highway and stay costs are never charged.
NO_COST_SUPPLIERS = frozenset(
    {
        "UNIDAD MESA",
        "RECOLECCIONES A PROVEEDOR",
        "RECOLECCION POR CLIENTE",
    }
)


def is_no_cost_supplier(supplier_name: Optional[str]) -> bool:
    if not supplier_name:
        return False
    return supplier_name.upper() in NO_COST_SUPPLIERS


def apply_cost_policy(
    supplier_name: Optional[str],
    highway_expense_cost: Optional[int],
    cost_of_stay: Optional[int],
) -> Tuple[Optional[int], Optional[int]]:
    """Return the incidental costs to persist for a trip with this supplier."""
    if is_no_cost_supplier(supplier_name):
        return 0, 0
    return highway_expense_cost, cost_of_stay


__all__ = ["NO_COST_SUPPLIERS", "is_no_cost_supplier", "apply_cost_policy"]
