"""
Domain-specific errors for the bookstore.

Two families live here:

- Persistence signals raised by repository adapters. ``RecordNotFoundError``
  is kept distinct from every other storage failure so services can choose
  between 404 and 500.
- Tagged service errors. Each one carries the HTTP-like ``code`` the
  interface layer answers with, a short remark, and the original cause.

No framework imports allowed.
"""

from typing import Optional


class PersistenceError(Exception):
    """Raised by a repository when a statement fails."""

    def __init__(self, operation: str, original: Optional[BaseException] = None) -> None:
        self.operation = operation
        self.original = original
        if original is None:
            super().__init__(f"{operation} failed")
        else:
            super().__init__(f"{operation} failed: {original}")


class RecordNotFoundError(PersistenceError):
    """Raised by a repository when a lookup matched no row."""

    def __init__(self, operation: str, key: object) -> None:
        super().__init__(operation)
        self.key = key

    def __str__(self) -> str:
        return f"{self.operation}: no row for key {self.key!r}"


class PasswordHashError(Exception):
    """Raised when a password cannot be hashed."""


class ServiceError(Exception):
    """Base tagged error returned by the service layer.

    Subclasses fix ``code``; the set is closed and handlers only look at
    ``code``, never at the concrete class.
    """

    code: int = 500

    def __init__(self, remark: str, original: Optional[BaseException] = None) -> None:
        self.remark = remark
        self.original = original
        super().__init__(remark)

    def __str__(self) -> str:
        return f"{self.code} : {self.remark}"


class ValidationError(ServiceError):
    """Malformed input. Never reaches a service."""

    code = 400


class UnauthorizedError(ServiceError):
    """Missing or wrong shared-secret credential."""

    code = 401


class NotFoundError(ServiceError):
    """No matching row for a single-entity read."""

    code = 404


class InternalError(ServiceError):
    """Every other storage or hashing failure."""

    code = 500
