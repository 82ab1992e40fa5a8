"""Domain errors raised by services and translated by the API layer."""

from __future__ import annotations


class CodexError(Exception):
    """Base class for all domain errors."""


class AuthenticationRequired(CodexError):
    """The operation needs an identified user."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InvalidArgument(CodexError, ValueError):
    """A caller supplied a malformed or out-of-range value."""


class NotFound(CodexError, LookupError):
    """The requested entity does not exist."""


class PermissionDenied(CodexError):
    """The caller is identified but may not touch the entity."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class Conflict(CodexError):
    """A concurrent change kept the operation from applying cleanly."""
