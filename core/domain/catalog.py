from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Supplier:
    id: Optional[int]
    name: str = ""

    @staticmethod
    def create(name: str) -> "Supplier":
        return Supplier(id=None, name=name)


@dataclass
class Destination:
    id: Optional[int]
    name: str = ""
    cost: Optional[int] = None  # flat per-trip cost charged regardless of supplier

    @staticmethod
    def create(name: str, cost: Optional[int] = None) -> "Destination":
        return Destination(id=None, name=name, cost=cost)


__all__ = ["Supplier", "Destination"]
