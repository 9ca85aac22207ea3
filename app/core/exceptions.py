"""
Domain errors raised by the availability engine and its collaborators.

Handlers in app.main turn these into JSON responses; nothing here knows about HTTP.
"""
from typing import Any


class DomainError(Exception):
    """Base class carrying a message, a machine-readable code and optional details."""

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code, "details": self.details}


class AvailabilityValidationError(DomainError):
    """Availability or booking input rejected at submission time (e.g. start >= end)."""


class NotFoundError(DomainError):
    """Requested prescriber or record does not exist."""
