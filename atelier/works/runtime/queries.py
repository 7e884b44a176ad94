"""GraphQL query definitions and response adapters for the works connection.

Each QuerySpec renders one document per schema variant; only the skill
selection differs between variants. WorksPageAdapter turns a ``data``
payload into a WorksPage using the variant's accessor.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.enums import SchemaVariant
from ..core.exceptions import SchemaError
from ..models import WorkItem, WorksPage
from .accessors import extract_skill

SKILL_SELECTIONS: dict[SchemaVariant, str] = {
    SchemaVariant.NESTED: "works {\n          skill\n        }",
    SchemaVariant.DIRECT: "skill",
    SchemaVariant.META: "metaData {\n          key\n          value\n        }",
}

_NODE_FIELDS = """
        id
        title
        slug
        menuOrder
        excerpt(format: RENDERED)
        featuredImage {{
          node {{
            sourceUrl(size: MEDIUM)
            altText
          }}
        }}
        {skill}
        categories {{
          nodes {{
            id
            name
            slug
          }}
        }}"""


def _skill_selection(variant: SchemaVariant) -> str:
    return SKILL_SELECTIONS[variant.effective]


def _operation_name(prefix: str, variant: SchemaVariant) -> str:
    return f"{prefix}{variant.effective.value.capitalize()}"


def build_connection_document(variant: SchemaVariant) -> str:
    """Cursor-paginated works listing ordered by menu order."""
    name = _operation_name("GetWorks", variant)
    fields = _NODE_FIELDS.format(skill=_skill_selection(variant))
    return f"""query {name}($first: Int!, $after: String) {{
  works(
    first: $first
    after: $after
    where: {{ orderby: {{ field: MENU_ORDER, order: ASC }} }}
  ) {{
    nodes {{{fields}
    }}
    pageInfo {{
      hasNextPage
      endCursor
    }}
  }}
}}"""


def build_related_document(variant: SchemaVariant) -> str:
    """Short works listing that excludes the given ids."""
    name = _operation_name("GetRelatedWorks", variant)
    fields = _NODE_FIELDS.format(skill=_skill_selection(variant))
    return f"""query {name}($first: Int!, $exclude: [ID]) {{
  works(
    first: $first
    where: {{ notIn: $exclude, orderby: {{ field: MENU_ORDER, order: ASC }} }}
  ) {{
    nodes {{{fields}
    }}
    pageInfo {{
      hasNextPage
      endCursor
    }}
  }}
}}"""


def build_gallery_document(variant: SchemaVariant) -> str:
    """First works in the upstream default order, no ordering argument."""
    name = _operation_name("GetGalleryWorks", variant)
    fields = _NODE_FIELDS.format(skill=_skill_selection(variant))
    return f"""query {name}($first: Int!) {{
  works(first: $first) {{
    nodes {{{fields}
    }}
    pageInfo {{
      hasNextPage
      endCursor
    }}
  }}
}}"""


@dataclass(frozen=True)
class QuerySpec:
    id: str
    build_document: Callable[[SchemaVariant], str]
    build_variables: Callable[[dict[str, Any]], dict[str, Any]]

    def render(self, variant: SchemaVariant, params: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        return self.build_document(variant), self.build_variables(params)


WORKS_CONNECTION = QuerySpec(
    id="works_connection",
    build_document=build_connection_document,
    build_variables=lambda p: {"first": p["first"], "after": p.get("after")},
)

RELATED_WORKS = QuerySpec(
    id="related_works",
    build_document=build_related_document,
    build_variables=lambda p: {"first": p["first"], "exclude": list(p.get("exclude") or [])},
)

GALLERY_WORKS = QuerySpec(
    id="gallery_works",
    build_document=build_gallery_document,
    build_variables=lambda p: {"first": p["first"]},
)


def connection_nodes(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Return ``works.nodes`` from a data payload.

    Raises:
        SchemaError: If the connection is missing or malformed
    """
    works = data.get("works")
    if not isinstance(works, dict):
        raise SchemaError("Response has no works connection")
    nodes = works.get("nodes") or []
    if not isinstance(nodes, list):
        raise SchemaError("works.nodes is not a list")
    return nodes


class WorksPageAdapter:
    """Adapter for parsing a works connection payload into a WorksPage."""

    def parse(self, data: dict[str, Any], variant: SchemaVariant) -> WorksPage:
        """Parse a ``data`` payload.

        Args:
            data: GraphQL ``data`` object
            variant: Resolved schema variant selecting the skill accessor

        Returns:
            WorksPage with parsed items and pagination metadata
        """
        nodes = connection_nodes(data)
        items = [
            WorkItem.from_node(node, skill=extract_skill(node, variant))
            for node in nodes
            if isinstance(node, dict)
        ]
        page_info = data["works"].get("pageInfo") or {}
        return WorksPage(
            items=items,
            has_next_page=bool(page_info.get("hasNextPage")),
            end_cursor=page_info.get("endCursor"),
        )
