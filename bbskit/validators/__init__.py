"""
Unified Validation System
=========================

Escaping and validation helpers for user supplied bulletin board input.
"""

from .html_escaper import DEFAULT_ENTITY_MAP, EscapeOptions, escape_html, create_escaper
from .username_validator import (
    UsernameResult,
    UsernameRules,
    validate_username,
    create_username_validator,
    validate_username_or_raise,
)
from .email_format import validate_email
from .password_strength import PasswordRules, PasswordStrength, password_strength

__all__ = [
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
]
