"""Custom exceptions for markdown rendering."""

from typing import Any


class MarkdownError(Exception):
    """Base exception for markdown rendering."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class MarkdownSettingsError(MarkdownError):
    """Raised when renderer settings contain invalid values."""


class MarkdownEditSpanError(MarkdownError):
    """Raised when deferred edit spans overlap or fall outside the text they edit."""
