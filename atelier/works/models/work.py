"""Work (portfolio entry) data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.text import format_skill, strip_markup, truncate

SkillValue = str | list[str] | None


class Category(BaseModel):
    """Category attached to a work."""

    id: str = ""
    name: str = ""
    slug: str = ""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class MediaRef(BaseModel):
    """Featured image reference."""

    source_url: str = Field(..., min_length=1)
    alt_text: str = ""

    model_config = ConfigDict(frozen=True)


class WorkItem(BaseModel):
    """One catalog entry.

    ``menu_order`` is the ordering key; upstream omits it or sends null for
    unordered entries, both of which are normalized to 0.
    """

    id: str = Field(..., min_length=1)
    title: str = ""
    slug: str = ""
    menu_order: int = 0
    excerpt: str | None = None
    category: Category | None = None
    skill: SkillValue = None
    media: MediaRef | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("title", "slug", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("menu_order", mode="before")
    @classmethod
    def default_menu_order(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("skill", mode="before")
    @classmethod
    def normalize_skill(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (list, tuple)):
            return [str(s) for s in v if s is not None]
        return str(v)

    @property
    def plain_title(self) -> str:
        return strip_markup(self.title)

    def display_title(self, max_length: int = 25) -> str:
        """Title with markup removed, truncated for cards."""
        return truncate(self.title, max_length)

    def display_excerpt(self, max_length: int = 30) -> str:
        """Excerpt with markup removed, truncated for cards."""
        return truncate(self.excerpt, max_length)

    @property
    def skill_label(self) -> str:
        return format_skill(self.skill)

    @property
    def category_name(self) -> str:
        return self.category.name if self.category else ""

    @classmethod
    def from_node(cls, node: dict[str, Any], skill: SkillValue = None) -> WorkItem:
        """Build a work from a raw GraphQL node.

        Args:
            node: ``works.nodes[i]`` payload
            skill: Skill descriptor already extracted by the variant accessor

        Returns:
            Parsed WorkItem
        """
        categories = ((node.get("categories") or {}).get("nodes")) or []
        category = Category(**_pick(categories[0], "id", "name", "slug")) if categories else None

        media = None
        image = (node.get("featuredImage") or {}).get("node") or {}
        if image.get("sourceUrl"):
            media = MediaRef(source_url=image["sourceUrl"], alt_text=image.get("altText") or "")

        return cls(
            id=node.get("id"),
            title=node.get("title"),
            slug=node.get("slug"),
            menu_order=node.get("menuOrder"),
            excerpt=node.get("excerpt"),
            category=category,
            skill=skill,
            media=media,
        )


def _pick(source: dict[str, Any], *keys: str) -> dict[str, Any]:
    return {k: source[k] for k in keys if source.get(k) is not None}
