"""
Text helpers for post previews, thread titles and the like.
"""

from typing import Any

from . import config


def truncate(text: Any, max_length: int, word_safe: bool = False, ellipsis: str = None) -> str:
    """
    Truncates text to a maximum length, optionally keeping whole words.

    Args:
        text: Text to truncate
        max_length: Maximum length in characters (before the ellipsis)
        word_safe: Back off to the last space so words are not cut mid-way
        ellipsis: Suffix for truncated text (BBSKIT_DEFAULT_ELLIPSIS if None)

    Returns:
        Truncated text, the original text if it already fits, or "" for
        non-string input or a non-positive length

    Example:
        >>> truncate("Hello world, this is a test.", 10)
        'Hello worl...'
        >>> truncate("Hello world, this is a test.", 10, word_safe=True)
        'Hello...'
    """
    if not isinstance(text, str):
        return ""
    if not isinstance(max_length, int) or max_length <= 0:
        return ""
    if ellipsis is None:
        ellipsis = config.DEFAULT_ELLIPSIS

    if len(text) <= max_length:
        return text

    truncated = text[:max_length]

    if word_safe:
        last_space = truncated.rfind(" ")
        if last_space > 0:
            truncated = truncated[:last_space]

    return truncated.rstrip() + ellipsis
