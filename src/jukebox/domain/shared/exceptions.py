"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all jukebox domain errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an argument is missing, invalid, or not a member where one is required."""

    def __init__(self, message: str, field: str | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code or "INVALID_ARGUMENT")
        self.field = field


class NotFoundError(InvalidArgumentError):
    """Raised when a referenced track or album does not exist."""

    def __init__(self, entity_type: str, identifier: object, message: str | None = None) -> None:
        msg = message or f"{entity_type} '{identifier}' not found"
        super().__init__(msg, code="NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class IllegalOperationError(DomainError):
    """Raised when an operation is not allowed in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None) -> None:
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(msg, code="ILLEGAL_OPERATION")
        self.operation = operation
        self.current_state = current_state
