"""
Exception classes for MCP Groups.

Defines the exception hierarchy raised by the group tree, the wire
schema validation layer and configuration loading.
"""

from typing import Any, Dict, Optional


class GroupsError(Exception):
    """Base exception for all MCP Groups errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize GroupsError.

        Args:
            message: Error message
            error_code: Optional error code for categorization
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        """String representation of the error."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class InvalidArgumentError(GroupsError, ValueError):
    """A required argument was absent or unusable."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = "INVALID_ARGUMENT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details)


class CycleDetectedError(GroupsError):
    """Attaching a group would make the group tree cyclic."""

    def __init__(
        self,
        message: str,
        parent: Optional[str] = None,
        child: Optional[str] = None,
        error_code: Optional[str] = "CYCLE_DETECTED",
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize CycleDetectedError.

        Args:
            message: Error message
            parent: Fully qualified name of the would-be parent
            child: Fully qualified name of the would-be child
            error_code: Optional error code
            details: Optional additional details
        """
        super().__init__(message, error_code, details)
        self.parent = parent
        self.child = child


class ValidationError(GroupsError):
    """Wire payload validation errors."""
    pass


class ConfigError(GroupsError):
    """Configuration-related errors."""
    pass
