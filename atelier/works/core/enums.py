"""Core enumerations shared by the aggregation pipeline and navigation.

Architecture:
    SchemaVariant tags which of the known response shapes the content API
    uses to expose a work's skill descriptor. It is resolved once per
    aggregation session and then selects both the GraphQL document and the
    accessor used for every item.

    NavigationState is the three-state guard owned by each card's
    navigation controller.
"""

from enum import Enum


class SchemaVariant(str, Enum):
    """Location of the skill descriptor in a work node.

    - NESTED: ``node.works.skill`` (field group)
    - DIRECT: ``node.skill``
    - META: ``node.metaData[key in ("skill", "_skill")].value``
    - UNKNOWN: no probe succeeded
    """

    NESTED = "nested"
    DIRECT = "direct"
    META = "meta"
    UNKNOWN = "unknown"

    @property
    def effective(self) -> "SchemaVariant":
        """Variant used to select queries (UNKNOWN falls back to NESTED)."""
        if self is SchemaVariant.UNKNOWN:
            return SchemaVariant.NESTED
        return self

    @classmethod
    def probe_order(cls) -> tuple["SchemaVariant", ...]:
        """Variants in the priority order they are probed."""
        return (cls.NESTED, cls.DIRECT, cls.META)


class NavigationState(str, Enum):
    """Lifecycle of a pending card navigation."""

    IDLE = "idle"
    ARMED = "armed"
    FIRED = "fired"


class NavigationTrigger(str, Enum):
    """Source that completed a navigation."""

    ANIMATION_END = "animation_end"
    TIMEOUT = "timeout"
    IMMEDIATE = "immediate"
