"""Custom exception classes for the Market Console.

This module provides a hierarchy of exceptions so that event handlers can
reduce every failure to a single user-facing notification.
"""

from typing import Any, Dict, Optional


class ConsoleError(Exception):
    """Base exception for all Market Console errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ConsoleError):
    """Raised when there's a configuration issue."""
    pass


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(self, config_key: str):
        super().__init__(
            f"Missing required configuration: {config_key}",
            {"config_key": config_key}
        )


# =============================================================================
# REST API Errors
# =============================================================================

class ApiError(ConsoleError):
    """Base exception for failed calls to the upstream REST API.

    ``message`` is always safe to show to the user: it is either the
    ``message`` field of the JSON error body or a generic fallback.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None
    ):
        self.operation = operation
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(
            message,
            {
                "operation": operation,
                "status_code": status_code,
            }
        )


class FetchError(ApiError):
    """Raised when reading a collection or a single record fails."""
    pass


class MutationError(ApiError):
    """Raised when an add, update or delete request fails."""
    pass


# =============================================================================
# Validation Errors
# =============================================================================

class FormValidationError(ConsoleError):
    """Raised when a form is submitted with field-level errors."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = {k: v for k, v in errors.items() if v}
        super().__init__(
            f"Form has {len(self.errors)} invalid field(s)",
            {"fields": sorted(self.errors)}
        )
