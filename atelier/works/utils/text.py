"""Plain-text helpers for card labels."""

from __future__ import annotations

import re
from typing import Any

_TAG_RE = re.compile(r"<[^>]*>?")


def strip_markup(value: Any) -> str:
    """Remove HTML tags from rich text. ``None`` becomes an empty string."""
    if value is None:
        return ""
    return _TAG_RE.sub("", str(value))


def truncate(value: Any, max_length: int) -> str:
    """Strip markup and cut to ``max_length`` characters, appending ``...``."""
    text = strip_markup(value)
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_skill(value: Any) -> str:
    """Render a skill descriptor as a label.

    Lists are joined with ``", "`` after dropping empty entries; falsy
    values render as an empty string.
    """
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value if v)
    return str(value)
