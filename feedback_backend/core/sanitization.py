"""
Sanitization helpers for user-supplied text.

Dependencies: bs4, re (stdlib)
System role: Neutralize markup in values used as identifiers
"""

import re

from bs4 import BeautifulSoup

_WHITESPACE_PATTERN = re.compile(r"\s+")


def sanitize_name(value: str | None) -> str | None:
    """
    Trim a name and collapse internal whitespace runs to a single space.

    Args:
        value: Raw name (None passes through)

    Returns:
        str | None: Normalized name
    """
    if value is None:
        return None
    return _WHITESPACE_PATTERN.sub(" ", value).strip()


def sanitize_title(value: str | None) -> str | None:
    """
    Sanitize a title used as part of an entity identity.

    Markup is parsed with BeautifulSoup and only its text is kept; angle
    brackets that are not part of a tag are dropped, the words around them
    are not. ``"Midterm<b>"`` becomes ``"Midterm"`` and
    ``"Week 1 < Week 2 > Review"`` becomes ``"Week 1 Week 2 Review"``.

    Args:
        value: Raw title (None passes through)

    Returns:
        str | None: Sanitized title
    """
    if value is None:
        return None
    text = BeautifulSoup(value, "html.parser").get_text()
    text = text.replace("<", "").replace(">", "")
    return sanitize_name(text)
