"""Structured exception hierarchy for lookslike.

Only schema construction and path parsing raise. A value failing a check is
never an exception: it is an Outcome recorded in Results.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "LookslikeError",
    "SchemaCompileError",
    "InvalidPathError",
    "DocumentLoadError",
]


class LookslikeError(Exception):
    """Base exception for all lookslike errors.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        self.suggestion = suggestion

        parts = [message]

        if details:
            detail_lines = [f"  {k}: {v}" for k, v in details.items()]
            parts.append("\nDetails:")
            parts.extend(detail_lines)

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class SchemaCompileError(LookslikeError):
    """A schema definition could not be compiled.

    Raised (or returned, see ``compile_schema``) when the top-level schema is
    not a map, a sequence or an IsDef.
    """

    def __init__(
        self,
        message: str,
        *,
        received_type: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.received_type = received_type

        details = kwargs.pop("details", {})
        if received_type:
            details["received_type"] = received_type

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = "Wrap the definition in a dict, a list or an IsDef built with is_def()."

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)


class InvalidPathError(LookslikeError, ValueError):
    """A path string could not be parsed."""

    def __init__(
        self,
        message: str,
        *,
        path_string: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.path_string = path_string

        details = kwargs.pop("details", {})
        if path_string is not None:
            details["path"] = repr(path_string)

        super().__init__(message, details=details, **kwargs)


class DocumentLoadError(LookslikeError):
    """An actual-value document could not be read or decoded."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.path = path
        self.cause = cause

        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__

        super().__init__(message, details=details, **kwargs)
