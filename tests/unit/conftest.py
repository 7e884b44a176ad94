"""Shared fakes for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class FakeTransport:
    """ContentTransport double that replays scripted responses.

    ``handler(document, variables)`` returns a ``data`` dict or an exception
    instance, which is raised.
    """

    def __init__(self, handler: Callable[[str, dict[str, Any]], Any]) -> None:
        self.handler = handler
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    async def query(self, document: str, variables: dict[str, Any] | None = None) -> dict:
        variables = dict(variables or {})
        self.calls.append((document, variables))
        result = self.handler(document, variables)
        if isinstance(result, BaseException):
            raise result
        return result

    async def close(self) -> None:
        self.closed = True

    def operations(self) -> list[str]:
        """Operation names of the recorded queries, in call order."""
        return [doc.split("(", 1)[0].removeprefix("query ").strip() for doc, _ in self.calls]


def make_node(
    index: int,
    *,
    menu_order: int | None = 0,
    skill: Any = "Design",
    shape: str = "nested",
    **overrides: Any,
) -> dict[str, Any]:
    """Raw GraphQL work node with the skill placed according to ``shape``."""
    node: dict[str, Any] = {
        "id": f"work-{index}",
        "title": f"<p>Work {index}</p>",
        "slug": f"work-{index}",
        "menuOrder": menu_order,
        "excerpt": f"<p>Excerpt {index}</p>",
        "featuredImage": {"node": {"sourceUrl": f"https://cdn.example.com/{index}.jpg", "altText": ""}},
        "categories": {"nodes": [{"id": "cat-1", "name": "Web", "slug": "web"}]},
    }
    if shape == "nested":
        node["works"] = {"skill": skill}
    elif shape == "direct":
        node["skill"] = skill
    elif shape == "meta":
        node["metaData"] = [{"key": "color", "value": "red"}, {"key": "skill", "value": skill}]
    node.update(overrides)
    return node


def connection(
    nodes: list[dict[str, Any]], has_next_page: bool = False, end_cursor: str | None = None
) -> dict[str, Any]:
    """``data`` payload for a works connection page."""
    return {
        "works": {
            "nodes": nodes,
            "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
        }
    }


def paged_handler(
    nodes: list[dict[str, Any]], *, probe_nodes: list[dict[str, Any]] | None = None
) -> Callable[[str, dict[str, Any]], Any]:
    """Handler serving ``nodes`` through integer-offset cursors ``"c<offset>"``."""

    def handler(document: str, variables: dict[str, Any]) -> Any:
        first = variables["first"]
        if first == 1 and variables.get("after") is None and probe_nodes is not None:
            return connection(probe_nodes[:1])
        after = variables.get("after")
        start = int(after[1:]) if after else 0
        chunk = nodes[start : start + first]
        end = start + len(chunk)
        has_next = end < len(nodes)
        return connection(chunk, has_next_page=has_next, end_cursor=f"c{end}" if chunk else None)

    return handler


@pytest.fixture
def fake_transport() -> type[FakeTransport]:
    return FakeTransport


@pytest.fixture
def node_factory() -> Callable[..., dict[str, Any]]:
    return make_node


@pytest.fixture
def connection_factory() -> Callable[..., dict[str, Any]]:
    return connection


@pytest.fixture
def paged_handler_factory() -> Callable[..., Callable[[str, dict[str, Any]], Any]]:
    return paged_handler
