"""
Password Strength Module
========================

Scores a password from 0 to 4 and reports which configured requirements
it misses.

Score:
    +1 for each of lowercase, uppercase, digit, symbol
    +1 at 12 characters, +1 more at 16
    capped at 4

Labels by score: weak, fair, good, strong, very_strong. A password outside
the configured length bounds is always "weak"; non-string input is
"invalid".
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .. import config

LABELS = ("weak", "fair", "good", "strong", "very_strong")
INVALID_LABEL = "invalid"
MAX_SCORE = 4

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^A-Za-z0-9]")


class PasswordRules(BaseModel):
    """Password requirements"""

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(default=config.PASSWORD_MIN_LENGTH, ge=0)
    max_length: int = Field(default=config.PASSWORD_MAX_LENGTH, ge=0)
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_number: bool = True
    require_symbol: bool = True


@dataclass
class PasswordStrength:
    """Result of password scoring"""
    score: int
    label: str
    reasons: List[str] = field(default_factory=list)

    @property
    def is_acceptable(self) -> bool:
        """True when no requirement is violated"""
        return self.label != INVALID_LABEL and not self.reasons


def password_strength(
    password: Any,
    rules: Union[PasswordRules, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> PasswordStrength:
    """
    Evaluate the strength of a password.

    Args:
        password: Password to evaluate
        rules: PasswordRules or a mapping with the same fields
        **overrides: Individual rule fields

    Returns:
        PasswordStrength with score, label and reasons

    Example:
        >>> password_strength("abc").label
        'weak'
        >>> password_strength("Abc123!@#").label
        'very_strong'
    """
    if not isinstance(password, str):
        return PasswordStrength(score=0, label=INVALID_LABEL, reasons=["not_a_string"])

    if rules is None:
        rules = PasswordRules(**overrides)
    elif isinstance(rules, PasswordRules):
        if overrides:
            rules = PasswordRules.model_validate({**dict(rules), **overrides})
    else:
        rules = PasswordRules.model_validate({**rules, **overrides})

    reasons = []
    length = len(password)
    out_of_bounds = length < rules.min_length or length > rules.max_length

    if length < rules.min_length:
        reasons.append("too_short")
    if length > rules.max_length:
        reasons.append("too_long")

    has_lower = _LOWER.search(password) is not None
    has_upper = _UPPER.search(password) is not None
    has_number = _DIGIT.search(password) is not None
    has_symbol = _SYMBOL.search(password) is not None

    if rules.require_lowercase and not has_lower:
        reasons.append("missing_lowercase")
    if rules.require_uppercase and not has_upper:
        reasons.append("missing_uppercase")
    if rules.require_number and not has_number:
        reasons.append("missing_number")
    if rules.require_symbol and not has_symbol:
        reasons.append("missing_symbol")

    score = sum((has_lower, has_upper, has_number, has_symbol))
    if length >= 12:
        score += 1
    if length >= 16:
        score += 1
    score = min(score, MAX_SCORE)

    label = "weak" if out_of_bounds else LABELS[score]

    return PasswordStrength(score=score, label=label, reasons=reasons)
