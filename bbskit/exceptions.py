"""
Custom exception classes for BBSKit.
Provides standardized error handling across the helpers.
"""

from typing import List, Optional


class BBSKitException(Exception):
    """Base exception for all BBSKit errors."""

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        super().__init__(self.message)

    def to_user_message(self) -> str:
        """Return a user-friendly error message."""
        return f"❌ {self.message}"


# ============================================================================
# CONFIGURATION ERRORS
# ============================================================================

class ConfigurationError(BBSKitException):
    """Raised when environment configuration is inconsistent."""
    pass


# ============================================================================
# VALIDATION ERRORS
# ============================================================================

class ValidationError(BBSKitException):
    """Base exception for input validation errors."""
    pass


class UsernameValidationError(ValidationError):
    """Raised by validate_username_or_raise when a username is rejected."""

    def __init__(self, reasons: List[str], value: str = "", context: Optional[dict] = None):
        self.reasons = list(reasons)
        self.value = value
        super().__init__(
            f"Username rejected: {', '.join(self.reasons)}",
            context=context,
        )

    def to_user_message(self) -> str:
        return "❌ This username is not allowed."


# ============================================================================
# DATASTORE ERRORS
# ============================================================================

class DataStoreError(BBSKitException):
    """Base exception for datastore errors."""
    pass


class NonNumericValueError(DataStoreError):
    """Raised when incr() meets a stored value that is not a number."""

    def __init__(self, key: str, value):
        super().__init__(
            f"Value stored at {key!r} is not numeric",
            context={"key": key, "value": value},
        )
        self.key = key
        self.value = value
