from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmptyExportError(DomainError):
    """Raised when an export is requested for a table without rows."""


class BackendError(DomainError):
    """Raised when the remote attendance backend fails or reports an error."""

    def __init__(self, message: str, *, details: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.details = details
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.details:
            return f"{message}: {self.details}"
        return message
