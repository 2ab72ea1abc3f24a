"""
HTML Escaping Module
====================

Configurable HTML escaping for user supplied text (post bodies, signatures,
thread titles).

Converts by default:
    &  ->  &amp;
    <  ->  &lt;
    >  ->  &gt;
    "  ->  &quot;
    '  ->  &#39;

Existing entity references (``&amp;``, ``&#39;``, ``&#x27;``) are left alone
unless double-escape prevention is switched off, so escaping the same text
twice gives the same result.

Usage:
    from bbskit.validators import escape_html, create_escaper

    safe = escape_html(post_body)
    attr_escaper = create_escaper(extra="`=", map={"`": "&#96;", "=": "&#61;"})
"""

import re
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENTITY_MAP: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

# Named (&amp;), decimal (&#39;) and hex (&#x27;) references
ENTITY_PATTERN = r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[a-zA-Z][a-zA-Z0-9]+);"


class EscapeOptions(BaseModel):
    """Escaping configuration, immutable once built"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    extra: FrozenSet[str] = frozenset()
    exclude: FrozenSet[str] = frozenset()
    entity_map: Dict[str, str] = Field(default_factory=dict, alias="map")
    prevent_double_escape: bool = True

    @field_validator("extra", "exclude", mode="before")
    @classmethod
    def split_characters(cls, v: Any) -> FrozenSet[str]:
        """Accepts "abc" or ["a", "b", "c"] and returns single characters"""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset(v)
        return frozenset(ch for item in v for ch in str(item))

    def effective_map(self) -> Dict[str, str]:
        """Default entity map with caller overrides applied"""
        return {**DEFAULT_ENTITY_MAP, **self.entity_map}

    def escape_set(self) -> FrozenSet[str]:
        """Characters that will actually be escaped"""
        chars = set(self.effective_map()) | set(self.extra)
        chars -= set(self.exclude)
        chars.discard("")
        return frozenset(chars)


OptionsLike = Union[EscapeOptions, Mapping[str, Any], None]


def _by_field_name(values: Mapping[str, Any]) -> Dict[str, Any]:
    # "map" and "entity_map" name the same field; the later spelling wins
    result: Dict[str, Any] = {}
    for key, value in values.items():
        if key == "map":
            key = "entity_map"
        result.pop(key, None)
        result[key] = value
    return result


def _resolve_options(options: OptionsLike, overrides: Dict[str, Any]) -> EscapeOptions:
    if isinstance(options, EscapeOptions):
        if not overrides:
            return options
        base = options.model_dump()
    else:
        base = _by_field_name(options or {})
    return EscapeOptions.model_validate({**base, **_by_field_name(overrides)})


def _build_escaper(opts: EscapeOptions) -> Callable[[str], str]:
    entity_map = opts.effective_map()
    escape_set = opts.escape_set()

    if not escape_set:
        return lambda text: text

    # Sorted so the same options always compile the same pattern
    char_class = "".join(re.escape(ch) for ch in sorted(escape_set))

    if not opts.prevent_double_escape:
        pattern = re.compile(f"[{char_class}]")
        return lambda text: pattern.sub(lambda m: entity_map.get(m.group(), m.group()), text)

    # Entity references and escapable characters in one left-to-right pass
    pattern = re.compile(f"(?P<entity>{ENTITY_PATTERN})|[{char_class}]", re.DOTALL)

    def replace(match: "re.Match[str]") -> str:
        if match.group("entity") is not None:
            return match.group("entity")
        ch = match.group()
        return entity_map.get(ch, ch)

    return lambda text: pattern.sub(replace, text)


def escape_html(text: Any, options: OptionsLike = None, **overrides: Any) -> str:
    """
    Escape HTML special characters with configurable behavior.

    Args:
        text: Text to escape
        options: EscapeOptions or a mapping with the same fields
        **overrides: Individual option fields (extra, exclude, map,
            prevent_double_escape)

    Returns:
        Escaped text; "" if text is not a string

    Example:
        >>> escape_html('<b>"Hello"&</b>')
        '&lt;b&gt;&quot;Hello&quot;&amp;&lt;/b&gt;'
        >>> escape_html("&lt;safe&gt;", prevent_double_escape=False)
        '&amp;lt;safe&amp;gt;'
    """
    if not isinstance(text, str):
        return ""
    return _build_escaper(_resolve_options(options, overrides))(text)


def create_escaper(options: OptionsLike = None, **overrides: Any) -> Callable[[Any], str]:
    """
    Create a reusable escaper bound to a fixed configuration.

    The pattern is compiled once, here, instead of on every call.

    Example:
        >>> attr_escaper = create_escaper(extra="`", map={"`": "&#96;"})
        >>> attr_escaper("value=`x`")
        'value=&#96;x&#96;'
    """
    escaper = _build_escaper(_resolve_options(options, overrides))

    def escape(text: Any) -> str:
        if not isinstance(text, str):
            return ""
        return escaper(text)

    return escape
