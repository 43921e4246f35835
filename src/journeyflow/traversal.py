"""Reachability queries for hover highlighting.

Every query walks the finished graph from scratch with its own visited
set. Results are plain id sets; dimming whatever is not in them is up to
the renderer.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Union

from journeyflow.graph.core import FlowGraph
from journeyflow.graph.types import Link, LinkKey, Node, NodeKey


class Direction(str, Enum):
    """Which way to follow links from a starting link."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class Highlight:
    """Nodes and links connected to a hovered element.

    Attributes:
        node_ids: Keys of highlighted nodes
        link_ids: Keys of highlighted links
    """

    node_ids: frozenset[NodeKey] = frozenset()
    link_ids: frozenset[LinkKey] = frozenset()

    def __bool__(self) -> bool:
        return bool(self.node_ids or self.link_ids)

    def includes_node(self, node: Node | NodeKey) -> bool:
        key = node.key if isinstance(node, Node) else node
        return key in self.node_ids

    def includes_link(self, link: Link | LinkKey) -> bool:
        key = link.key if isinstance(link, Link) else link
        return key in self.link_ids

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "nodes": sorted(str(key) for key in self.node_ids),
            "links": sorted(str(key) for key in self.link_ids),
        }

    @classmethod
    def from_links(cls, links: list[Link], extra_nodes: tuple[NodeKey, ...] = ()) -> Highlight:
        node_ids = set(extra_nodes)
        for link in links:
            node_ids.add(link.source)
            node_ids.add(link.target)
        return cls(node_ids=frozenset(node_ids), link_ids=frozenset(link.key for link in links))


Seed = Union[Node, Link, NodeKey, LinkKey, str]


def connected_links(
    graph: FlowGraph,
    start: Link,
    direction: Direction | str,
) -> list[Link]:
    """Breadth-first walk over links starting from ``start``.

    Forward follows the outgoing links of each link's target node; backward
    follows the incoming links of each link's source node.

    Args:
        graph: The graph ``start`` belongs to
        start: Seed link (always part of the result)
        direction: "forward" or "backward"

    Returns:
        Links in visitation order, each at most once
    """
    direction = Direction(direction)
    visited: set[LinkKey] = set()
    result: list[Link] = []
    queue: deque[Link] = deque([start])

    while queue:
        link = queue.popleft()
        key = link.key
        if key in visited:
            continue
        visited.add(key)
        result.append(link)

        if direction is Direction.FORWARD:
            node = graph.target_of(link)
            following = node.outgoing if node is not None else []
        else:
            node = graph.source_of(link)
            following = node.incoming if node is not None else []
        queue.extend(following)

    return result


def _union(*groups: list[Link]) -> list[Link]:
    seen: dict[LinkKey, Link] = {}
    for group in groups:
        for link in group:
            seen.setdefault(link.key, link)
    return list(seen.values())


def highlight_link(graph: FlowGraph, link: Link) -> Highlight:
    """Everything upstream and downstream of one link."""
    links = _union(
        [link],
        connected_links(graph, link, Direction.FORWARD),
        connected_links(graph, link, Direction.BACKWARD),
    )
    return Highlight.from_links(links)


def highlight_node(graph: FlowGraph, node: Node) -> Highlight:
    """Everything reachable through any link touching the node.

    The node itself is always included, even when it has no links.
    """
    groups: list[list[Link]] = []
    for link in graph.links_touching(node):
        groups.append([link])
        groups.append(connected_links(graph, link, Direction.FORWARD))
        groups.append(connected_links(graph, link, Direction.BACKWARD))
    return Highlight.from_links(_union(*groups), extra_nodes=(node.key,))


def compute_highlight(graph: FlowGraph, seed: Seed) -> Highlight:
    """Highlight sets for a hovered node or link.

    Accepts records, keys, or external id strings. A string is tried as a
    node id first, then as a link id. Seeds that do not resolve to an
    element of ``graph`` give an empty Highlight.
    """
    if isinstance(seed, LinkKey):
        resolved: Node | Link | None = graph.get_link(seed)
    elif isinstance(seed, NodeKey):
        resolved = graph.get_node(seed)
    elif isinstance(seed, str):
        resolved = graph.get_node(seed) or graph.get_link(seed)
    elif isinstance(seed, (Node, Link)):
        resolved = seed if seed in graph else None
    else:
        resolved = None

    if isinstance(resolved, Node):
        return highlight_node(graph, resolved)
    if isinstance(resolved, Link):
        return highlight_link(graph, resolved)
    return Highlight()
