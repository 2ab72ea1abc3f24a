"""
Username Validation Module
==========================

Rule-driven username validation. A rule set is declared once and every
check runs over the (optionally normalized) value; the result lists every
violated rule, not just the first one.

Reasons, in the order they are produced:
    too_short, too_long
    invalid_chars
    bad_start, bad_end
    disallowed_pattern:<pattern>   (one per matching pattern)
    consecutive:<char>             (one per repeated character)
    blacklisted
    <custom reason> / custom_validator_error

A value found in the whitelist is accepted outright and skips every other
rule. Non-string input is rejected with ``not_a_string``.

Usage:
    from bbskit.validators import validate_username

    result = validate_username(" JohnDoe ", min=3, max=12,
                               normalize=lambda s: s.strip().lower())
    if not result:
        print(result.reason_message())
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .. import config
from ..exceptions import UsernameValidationError

logger = logging.getLogger(__name__)

NOT_A_STRING = "not_a_string"
NORMALIZE_ERROR = "normalize_error"
CUSTOM_VALIDATOR_ERROR = "custom_validator_error"


@dataclass
class UsernameResult:
    """Result of username validation"""
    ok: bool
    reasons: List[str] = field(default_factory=list)
    value: str = ""

    def __bool__(self) -> bool:
        return self.ok

    def reason_message(self) -> str:
        """Returns formatted reasons message"""
        if not self.reasons:
            return ""
        return "❌ " + "\n❌ ".join(self.reasons)


class UsernameRules(BaseModel):
    """Declarative username rule set"""

    model_config = ConfigDict(frozen=True)

    min: int = config.USERNAME_MIN_LENGTH
    max: int = config.USERNAME_MAX_LENGTH
    allowed: Optional[re.Pattern] = None
    starts_with: Optional[re.Pattern] = None
    ends_with: Optional[re.Pattern] = None
    disallow: Tuple[re.Pattern, ...] = ()
    no_consecutive: Tuple[str, ...] = ()
    blacklist: FrozenSet[str] = frozenset()
    whitelist: FrozenSet[str] = frozenset()
    normalize: Optional[Callable[[str], str]] = None
    custom: Tuple[Callable[[str], Optional[str]], ...] = ()

    @field_validator("disallow", "custom", mode="before")
    @classmethod
    def wrap_single(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, (str, re.Pattern)) or callable(v):
            return (v,)
        return tuple(v)

    @field_validator("no_consecutive", mode="before")
    @classmethod
    def split_characters(cls, v: Any) -> Tuple[str, ...]:
        if v is None:
            return ()
        if isinstance(v, str):
            return tuple(v)
        return tuple(ch for ch in v if ch)

    @field_validator("blacklist", "whitelist", mode="before")
    @classmethod
    def to_set(cls, v: Any) -> Any:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset((v,))
        return v


RulesLike = Union[UsernameRules, Mapping[str, Any], None]


def _resolve_rules(rules: RulesLike, overrides: Dict[str, Any]) -> UsernameRules:
    if rules is None:
        return UsernameRules(**overrides)
    if isinstance(rules, UsernameRules):
        if not overrides:
            return rules
        return UsernameRules.model_validate({**dict(rules), **overrides})
    return UsernameRules.model_validate({**rules, **overrides})


def _consecutive_pattern(ch: str) -> "re.Pattern[str]":
    return re.compile(f"(?:{re.escape(ch)}){{2,}}")


def _run_rules(username: Any, rules: UsernameRules) -> UsernameResult:
    if not isinstance(username, str):
        return UsernameResult(ok=False, reasons=[NOT_A_STRING], value="")

    value = username
    if rules.normalize is not None:
        try:
            value = rules.normalize(username)
        except Exception as e:
            logger.warning(f"Username normalizer failed: {e}")
            return UsernameResult(ok=False, reasons=[NORMALIZE_ERROR], value=username)
        if not isinstance(value, str):
            logger.warning(f"Username normalizer returned {type(value).__name__}, expected str")
            return UsernameResult(ok=False, reasons=[NORMALIZE_ERROR], value=username)

    # Whitelisted values skip every other rule
    if value in rules.whitelist:
        return UsernameResult(ok=True, reasons=[], value=value)

    reasons = []

    if len(value) < rules.min:
        reasons.append("too_short")
    if len(value) > rules.max:
        reasons.append("too_long")

    if rules.allowed is not None and not rules.allowed.fullmatch(value):
        reasons.append("invalid_chars")

    if rules.starts_with is not None and not rules.starts_with.search(value):
        reasons.append("bad_start")
    if rules.ends_with is not None and not rules.ends_with.search(value):
        reasons.append("bad_end")

    for pattern in rules.disallow:
        if pattern.search(value):
            reasons.append(f"disallowed_pattern:{pattern.pattern}")

    for ch in rules.no_consecutive:
        if _consecutive_pattern(ch).search(value):
            reasons.append(f"consecutive:{ch}")

    if value in rules.blacklist:
        reasons.append("blacklisted")

    for check in rules.custom:
        try:
            res = check(value)
        except Exception as e:
            logger.warning(f"Custom username validator {getattr(check, '__name__', check)!r} failed: {e}")
            reasons.append(CUSTOM_VALIDATOR_ERROR)
            continue
        if isinstance(res, str) and res:
            reasons.append(res)

    return UsernameResult(ok=not reasons, reasons=reasons, value=value)


def validate_username(username: Any, rules: RulesLike = None, **overrides: Any) -> UsernameResult:
    """
    Validate a username against caller-supplied rules.

    Args:
        username: Username to validate
        rules: UsernameRules or a mapping with the same fields
        **overrides: Individual rule fields

    Returns:
        UsernameResult with ok flag, every violated reason and the
        normalized value
    """
    return _run_rules(username, _resolve_rules(rules, overrides))


def create_username_validator(rules: RulesLike = None, **overrides: Any) -> Callable[[Any], UsernameResult]:
    """Create a reusable validator bound to a fixed rule set"""
    bound = _resolve_rules(rules, overrides)
    return lambda username: _run_rules(username, bound)


def validate_username_or_raise(username: Any, rules: RulesLike = None, **overrides: Any) -> str:
    """
    Validates a username or raises exception

    Returns:
        Normalized username

    Raises:
        UsernameValidationError: If any rule fails
    """
    result = validate_username(username, rules, **overrides)
    if not result.ok:
        raise UsernameValidationError(result.reasons, value=result.value)
    return result.value
