from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from core.models import Destination, FreightRecord, FreightView, Period, Supplier


class SupplierRepository(ABC):
    @abstractmethod
    def add(self, supplier: Supplier) -> int: ...

    @abstractmethod
    def get(self, supplier_id: int) -> Optional[Supplier]: ...

    @abstractmethod
    def list_all(self) -> List[Supplier]: ...


class DestinationRepository(ABC):
    @abstractmethod
    def add(self, destination: Destination) -> int: ...

    @abstractmethod
    def get(self, destination_id: int) -> Optional[Destination]: ...

    @abstractmethod
    def list_all(self) -> List[Destination]: ...


class FreightRepository(ABC):
    @abstractmethod
    def add(self, record: FreightRecord) -> int: ...

    @abstractmethod
    def update(self, record: FreightRecord) -> None: ...

    @abstractmethod
    def delete(self, freight_id: int) -> None: ...

    @abstractmethod
    def get(self, freight_id: int) -> Optional[FreightRecord]: ...

    @abstractmethod
    def get_view(self, freight_id: int) -> Optional[FreightView]: ...

    @abstractmethod
    def list_views(self) -> List[FreightView]: ...

    @abstractmethod
    def list_in_period(self, period: Period) -> List[FreightView]:
        """Records registered inside the period, in the period's report order."""

    @abstractmethod
    def distinct_months(self) -> List[Tuple[int, int]]: ...
