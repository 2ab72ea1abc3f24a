"""
Email format check for registration and profile forms.
"""

import re
from typing import Any

# Inspired by RFC 5322, intentionally simpler. ASCII only, so IGNORECASE
# does not fold "ſ", "ı" or the Kelvin sign into [A-Z]
EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE | re.ASCII)


def validate_email(email: Any) -> bool:
    """
    Validate whether a string is a properly formatted email address.

    Surrounding whitespace is ignored; non-string input is never valid.

    Example:
        >>> validate_email("user@example.com")
        True
        >>> validate_email("bad@")
        False
    """
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email.strip()) is not None
