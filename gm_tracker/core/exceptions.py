"""
Exception hierarchy for the Tracker GM console.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TrackerException(Exception):
    """Base exception for all Tracker GM errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StoreError(TrackerException):
    """Raised when a data store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        table: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Operation that failed (fetch, save, delete)
            table: Table or collection involved
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(message, details)


class RemoteBackendError(TrackerException):
    """Raised when the remote backend rejects a request or is unreachable."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize remote backend error.

        Args:
            message: Message reported by the backend or transport
            status_code: HTTP status code, None for transport failures
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class AuthenticationError(TrackerException):
    """Raised when a sign-in, sign-up or sign-out call fails."""

    def __str__(self) -> str:
        return self.message


class InvalidCredentialsError(AuthenticationError):
    """Raised when the identifier/secret pair is rejected."""

    pass


class UnsupportedOperationError(TrackerException):
    """Raised when the active backend has no implementation of an operation."""

    def __init__(
        self,
        operation: str,
        backend: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize unsupported operation error.

        Args:
            operation: Operation name
            backend: Active backend name
            details: Additional context
        """
        details = details or {}
        details["operation"] = operation
        details["backend"] = backend
        super().__init__(f"{operation} is not supported by the {backend} backend", details)


class NotFoundError(TrackerException, LookupError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, entity_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["entity_id"] = entity_id
        super().__init__(f"{entity} not found: {entity_id}", details)
