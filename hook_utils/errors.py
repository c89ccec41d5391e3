"""Exceptions raised by hook-utils.

Hook guards raise synchronously; the hosting framework decides whether to
halt, log or translate them for its own callers.
"""

from __future__ import annotations

from typing import Any


class HookUtilsError(Exception):
    """Base exception for all hook-utils errors.

    Attributes:
        message: Human-readable error message
        details: Extra context for logging or API responses
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ContextMismatch(HookUtilsError):
    """A hook was invoked in a phase it does not support."""

    def __init__(self, label: str, phase: str):
        super().__init__(
            f"The '{label}' hook can only be used as a '{phase}' hook.",
            {"label": label, "phase": phase},
        )
        self.label = label
        self.phase = phase


class OperationMismatch(HookUtilsError):
    """A hook was invoked on a service operation it does not support."""

    def __init__(self, label: str, operations: list[str], serialized: str):
        super().__init__(
            f"The '{label}' hook can only be used on the '{serialized}' service method(s).",
            {"label": label, "operations": operations},
        )
        self.label = label
        self.operations = operations


class InvalidPathError(HookUtilsError, ValueError):
    """A dot path has empty segments while strict path checking is on."""

    def __init__(self, path: str):
        super().__init__(f"Invalid dot path: {path!r}", {"path": path})
        self.path = path
