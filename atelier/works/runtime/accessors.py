"""Skill accessors, one pure function per schema variant.

The accessor is chosen once from the resolved SchemaVariant; consuming code
never inspects a node to guess where the skill lives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.enums import SchemaVariant

META_SKILL_KEYS = ("skill", "_skill")

# Sentinel for "field not present", distinct from an explicit null
MISSING = object()


def nested_skill(node: dict[str, Any]) -> Any:
    group = node.get("works")
    if isinstance(group, dict) and "skill" in group:
        return group["skill"]
    return MISSING


def direct_skill(node: dict[str, Any]) -> Any:
    if "skill" in node:
        return node["skill"]
    return MISSING


def meta_skill(node: dict[str, Any]) -> Any:
    entries = node.get("metaData")
    if not isinstance(entries, list):
        return MISSING
    for entry in entries:
        if isinstance(entry, dict) and entry.get("key") in META_SKILL_KEYS:
            return entry.get("value")
    return MISSING


def fallback_skill(node: dict[str, Any]) -> Any:
    """Accessor for UNKNOWN: nested first, then direct."""
    value = nested_skill(node)
    if value is MISSING:
        value = direct_skill(node)
    return value


ACCESSORS: dict[SchemaVariant, Callable[[dict[str, Any]], Any]] = {
    SchemaVariant.NESTED: nested_skill,
    SchemaVariant.DIRECT: direct_skill,
    SchemaVariant.META: meta_skill,
    SchemaVariant.UNKNOWN: fallback_skill,
}


def get_accessor(variant: SchemaVariant) -> Callable[[dict[str, Any]], Any]:
    return ACCESSORS[variant]


def extract_skill(node: dict[str, Any], variant: SchemaVariant) -> Any:
    """Return the skill descriptor of ``node`` or None when absent."""
    value = ACCESSORS[variant](node)
    return None if value is MISSING else value


def has_skill(node: dict[str, Any], variant: SchemaVariant) -> bool:
    """True if the skill field is defined (null counts) at the variant's location."""
    return ACCESSORS[variant](node) is not MISSING
