"""
BBSKit - helpers for building a bulletin board system.

Text truncation, HTML escaping, username/email/password validation and a
pluggable key/value datastore.
"""

from .text import truncate
from .validators import (
    DEFAULT_ENTITY_MAP,
    EscapeOptions,
    escape_html,
    create_escaper,
    UsernameResult,
    UsernameRules,
    validate_username,
    create_username_validator,
    validate_username_or_raise,
    validate_email,
    PasswordRules,
    PasswordStrength,
    password_strength,
)
from .datastore import DataStoreAdapter, MemoryAdapter, DataStore, StoredValue
from .exceptions import (
    BBSKitException,
    ConfigurationError,
    ValidationError,
    UsernameValidationError,
    DataStoreError,
    NonNumericValueError,
)
from .logging_setup import BBSKitFormatter, setup_logger

__version__ = "1.0.0"

__all__ = [
    "truncate",
    "DEFAULT_ENTITY_MAP",
    "EscapeOptions",
    "escape_html",
    "create_escaper",
    "UsernameResult",
    "UsernameRules",
    "validate_username",
    "create_username_validator",
    "validate_username_or_raise",
    "validate_email",
    "PasswordRules",
    "PasswordStrength",
    "password_strength",
    "DataStoreAdapter",
    "MemoryAdapter",
    "DataStore",
    "StoredValue",
    "BBSKitException",
    "ConfigurationError",
    "ValidationError",
    "UsernameValidationError",
    "DataStoreError",
    "NonNumericValueError",
    "BBSKitFormatter",
    "setup_logger",
]
