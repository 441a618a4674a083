from __future__ import annotations

from typing import Callable, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class ServiceBase:
    def __init__(self, session: Session):
        self._session = session

    def _write(self, operation: Callable[[], T]) -> T:
        """Run one storage write and commit it; nothing is left behind on failure."""
        try:
            result = operation()
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            raise e
        return result
