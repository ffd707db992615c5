"""Custom exception hierarchy for the character sheet editor.

This module defines the exception hierarchy used across the application.
All exceptions inherit from CharsheetError, enabling unified error handling
at the application boundary while preserving domain-specific context.

Budget violations are deliberately absent: a rejected attribute or skill
adjustment is a disallowed UI action, reported through a ``False`` return
value rather than an exception.

Example:
    >>> from charsheet.core.exceptions import UnknownSkillError
    >>> raise UnknownSkillError("No such skill", skill_name="Juggling")
"""

from __future__ import annotations

from typing import Any


class CharsheetError(Exception):
    """Base exception for all character sheet errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Rules Engine Exceptions
# =============================================================================


class RulesEngineError(CharsheetError):
    """Base exception for rules engine errors.

    Raised when a caller violates a precondition of the rules engine,
    such as naming an attribute, skill or class outside the catalog.
    These are programming errors, not recoverable runtime conditions.
    """


class UnknownAttributeError(RulesEngineError):
    """Raised when an attribute name is not in the attribute catalog."""

    def __init__(
        self,
        message: str,
        *,
        attribute_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown attribute error.

        Args:
            message: Human-readable error description.
            attribute_name: The attribute name that was not recognized.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if attribute_name is not None:
            combined_details["attribute_name"] = attribute_name
        super().__init__(message, details=combined_details)


class UnknownSkillError(RulesEngineError):
    """Raised when a skill name is not in the skill catalog."""

    def __init__(
        self,
        message: str,
        *,
        skill_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown skill error.

        Args:
            message: Human-readable error description.
            skill_name: The skill name that was not recognized.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if skill_name is not None:
            combined_details["skill_name"] = skill_name
        super().__init__(message, details=combined_details)


class UnknownClassError(RulesEngineError):
    """Raised when a class name is not in the class requirement catalog."""

    def __init__(
        self,
        message: str,
        *,
        class_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown class error.

        Args:
            message: Human-readable error description.
            class_name: The class name that was not recognized.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if class_name is not None:
            combined_details["class_name"] = class_name
        super().__init__(message, details=combined_details)


class DiceRollError(RulesEngineError):
    """Raised when a random source produces an unusable draw.

    This typically occurs when an injected random source returns a value
    outside the die's face range.
    """

    def __init__(
        self,
        message: str,
        *,
        value: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with the offending value.

        Args:
            message: Human-readable error description.
            value: The drawn value that was rejected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if value is not None:
            combined_details["value"] = value
        super().__init__(message, details=combined_details)


# =============================================================================
# Sync Exceptions
# =============================================================================


class SyncError(CharsheetError):
    """Base exception for remote character store errors.

    The gateway raises these internally and converts them at its public
    boundary: a failed load degrades to ``None`` and a failed save to
    ``False``.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize sync error with request context.

        Args:
            message: Human-readable error description.
            url: The remote URL involved.
            status_code: HTTP status code, if a response was received.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if url:
            combined_details["url"] = url
        if status_code is not None:
            combined_details["status_code"] = status_code
        super().__init__(message, details=combined_details)


class SyncLoadError(SyncError):
    """Raised when the character cannot be fetched or its payload is malformed."""


class SyncSaveError(SyncError):
    """Raised when the character snapshot cannot be posted to the store."""


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(CharsheetError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# UI Domain Exceptions
# =============================================================================


class UIError(CharsheetError):
    """Base exception for all UI-related errors."""


class SessionStateError(UIError):
    """Raised when session state operations fail.

    This typically occurs when accessing the character sheet before the
    session state has been initialized.
    """


__all__ = [
    # Base exception
    "CharsheetError",
    # Rules engine exceptions
    "RulesEngineError",
    "UnknownAttributeError",
    "UnknownSkillError",
    "UnknownClassError",
    "DiceRollError",
    # Sync exceptions
    "SyncError",
    "SyncLoadError",
    "SyncSaveError",
    # Configuration exceptions
    "ConfigurationError",
    # UI exceptions
    "UIError",
    "SessionStateError",
]
