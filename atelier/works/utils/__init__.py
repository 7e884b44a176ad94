"""Utility helpers."""

from .http import HTTPClient
from .text import format_skill, strip_markup, truncate

__all__ = ["HTTPClient", "format_skill", "strip_markup", "truncate"]
