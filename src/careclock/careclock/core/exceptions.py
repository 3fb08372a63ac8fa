from __future__ import annotations

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""

    code: ErrorCode = ErrorCode.INTERNAL
    retryable: bool = False

    def __init__(self, message: str, *, code: ErrorCode | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = ErrorCode.VALIDATION


class StateConflictError(DomainError):
    """Raised when a clock action does not match the worker's IN/OUT state."""

    @classmethod
    def already_clocked_in(cls, worker_id: str) -> "StateConflictError":
        return cls(f"Worker {worker_id} is already clocked in", code=ErrorCode.ALREADY_CLOCKED_IN)

    @classmethod
    def no_open_shift(cls, worker_id: str) -> "StateConflictError":
        return cls(f"Worker {worker_id} has no open shift", code=ErrorCode.NO_OPEN_SHIFT)


class PerimeterViolationError(DomainError):
    """Raised when a clock-in location is outside the work perimeter."""

    code = ErrorCode.NOT_IN_PERIMETER


class StorageTimeoutError(DomainError):
    """Raised when the backing store did not answer in time. Safe to retry."""

    code = ErrorCode.STORAGE_TIMEOUT
    retryable = True


class AuthenticationError(DomainError):
    """Raised when no trusted identity accompanies the request."""

    code = ErrorCode.UNAUTHENTICATED


class AuthorizationError(DomainError):
    """Raised when a worker lacks permission for an action."""

    code = ErrorCode.FORBIDDEN
