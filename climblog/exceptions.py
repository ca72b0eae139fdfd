"""
Custom exception classes for the climb log.

This module defines the error hierarchy shared by the storage codec, the
collection store and the interactive shell:
- Validation failures are recoverable (the shell re-prompts)
- Duplicate and not-found errors abort a single command
- Storage failures are fatal at startup and shutdown
"""

from typing import Any, Dict, Optional


class ClimbLogError(Exception):
    """
    Base exception class for the climb log.

    All application-specific exceptions inherit from this class so callers
    can catch them in one place.
    """
    def __init__(
        self,
        detail: str,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Initialize the exception with a detail message and optional context.

        Args:
            detail: Error message
            context: Optional additional context for logging
        """
        super().__init__(detail)
        self.detail = detail
        self.context = context or {}


class ValidationFailure(ClimbLogError, ValueError):
    """Raised when a user-entered field is rejected."""
    def __init__(
        self,
        detail: str = "Invalid value",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(detail=detail, context=context)


class DuplicateClimbError(ClimbLogError):
    """Raised when a climb with the same name and location already exists."""
    def __init__(self, name: str, location: str) -> None:
        super().__init__(
            detail=f"climb: `{name}` at `{location}` already exists",
            context={"name": name, "location": location}
        )


class ClimbNotFoundError(ClimbLogError, LookupError):
    """Raised when no climb matches a name and location."""
    def __init__(self, name: str, location: str) -> None:
        super().__init__(
            detail=f"climb: `{name}` at `{location}` not found",
            context={"name": name, "location": location}
        )


class StorageFailure(ClimbLogError, OSError):
    """Raised when the store file cannot be opened, read or written."""
    def __init__(
        self,
        detail: str = "Storage operation failed",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(detail=detail, context=context)


class CorruptStoreError(StorageFailure):
    """Raised when the store file does not decode as a valid collection."""
    def __init__(
        self,
        detail: str = "Store file is corrupt",
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(detail=detail, context=context)


class TagDecodeError(ClimbLogError, ValueError):
    """Raised when an on-disk enumeration tag is not recognized."""
    def __init__(self, kind: str, raw: bytes) -> None:
        super().__init__(
            detail=f"unknown {kind} tag: {raw!r}",
            context={"kind": kind, "raw": raw}
        )


class FieldOverflowError(ClimbLogError, ValueError):
    """Raised when an integer does not fit its fixed-width decimal slot."""
    def __init__(self, value: int, width: int) -> None:
        super().__init__(
            detail=f"value {value} does not fit a {width}-byte decimal field",
            context={"value": value, "width": width}
        )
