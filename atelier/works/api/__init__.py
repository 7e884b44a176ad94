"""High-level catalog API."""

from .catalog import WorksCatalog

__all__ = ["WorksCatalog"]
