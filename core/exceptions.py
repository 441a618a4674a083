# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when a request is malformed or out of range."""


class NotFoundError(DomainError):
    """Raised when a referenced freight record does not exist."""


class NoDataError(DomainError):
    """Raised when a period query yields no rows, so there is nothing to report."""

    def __init__(self, message: str = "No data for the requested period.", *, code: str | None = "NO_DATA"):
        super().__init__(message, code=code)


class ConcurrencyError(DomainError):
    """Raised when optimistic locking detects a stale update."""
