"""FlowGraph: the owning index of nodes and links for one rendering pass."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import networkx as nx

from journeyflow.exceptions import FlowGraphError
from journeyflow.graph.types import Link, LinkKey, Node, NodeKey

if TYPE_CHECKING:
    from journeyflow.journeys import Journey


class FlowGraph:
    """Layered flow graph built from journeys.

    Owns every Node and Link through key-indexed dicts. Iteration order is
    creation order, which is also the stacking order used by layout.

    Attributes:
        journeys: The full journey input the graph was built from
        max_journeys: Cutoff applied when building (None = no cutoff)

    Example:
        >>> g = FlowGraph()
        >>> a = g.get_or_create_node(0, "/")
        >>> b = g.get_or_create_node(1, "/docs")
        >>> g.add_flow(a, b, 3).value
        3
    """

    def __init__(
        self,
        journeys: tuple[Journey, ...] = (),
        max_journeys: int | None = None,
    ) -> None:
        self.journeys = journeys
        self.max_journeys = max_journeys
        self._nodes: dict[NodeKey, Node] = {}
        self._links: dict[LinkKey, Link] = {}

    def __repr__(self) -> str:
        return f"FlowGraph(nodes={len(self._nodes)}, links={len(self._links)}, layers={self.layer_count})"

    def __len__(self) -> int:
        return len(self._nodes)

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, node: Node) -> Node:
        """Add a node, refusing a second node with the same (layer, label)."""
        if node.key in self._nodes:
            raise FlowGraphError(
                f"Duplicate node: {node.key}\n\n"
                f"  -> A node for step {node.layer} labelled '{node.label}' already exists\n\n"
                f"How to fix: use get_or_create_node() instead of add_node()"
            )
        self._nodes[node.key] = node
        return node

    def add_link(self, link: Link) -> Link:
        """Add a link between two existing nodes exactly one layer apart."""
        if link.key in self._links:
            raise FlowGraphError(
                f"Duplicate link: {link.key}\n\n"
                f"How to fix: use add_flow() to accumulate value on the existing link"
            )
        for end in (link.source, link.target):
            if end not in self._nodes:
                raise FlowGraphError(f"Link {link.key} references unknown node {end}")
        if link.target.layer != link.source.layer + 1:
            raise FlowGraphError(
                f"Link {link.key} does not advance one layer\n\n"
                f"  -> source layer {link.source.layer}, target layer {link.target.layer}"
            )
        self._links[link.key] = link
        self._nodes[link.source].outgoing.append(link)
        self._nodes[link.target].incoming.append(link)
        return link

    def get_or_create_node(self, layer: int, label: str) -> Node:
        """Return the node for (layer, label), creating it on first use."""
        node = self._nodes.get(NodeKey(layer, label))
        if node is None:
            node = self.add_node(Node(label=label, layer=layer))
        return node

    def add_flow(self, source: Node, target: Node, value: int) -> Link:
        """Accumulate value on the source->target link, creating it if new."""
        link = self._links.get(LinkKey(source.key, target.key))
        if link is None:
            return self.add_link(Link(source=source.key, target=target.key, value=value))
        link.value += value
        return link

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_node(self, key: NodeKey | str) -> Node | None:
        """Look up a node by key or external id; None if absent."""
        if isinstance(key, str):
            parsed = NodeKey.parse(key)
            if parsed is None:
                return None
            key = parsed
        return self._nodes.get(key)

    def get_link(self, key: LinkKey | str) -> Link | None:
        """Look up a link by key or external id; None if absent."""
        if isinstance(key, str):
            parsed = LinkKey.parse(key)
            if parsed is None:
                return None
            key = parsed
        return self._links.get(key)

    def source_of(self, link: Link) -> Node | None:
        return self._nodes.get(link.source)

    def target_of(self, link: Link) -> Node | None:
        return self._nodes.get(link.target)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return self._nodes.get(item.key) is item
        if isinstance(item, Link):
            return self._links.get(item.key) is item
        return False

    # =========================================================================
    # Views
    # =========================================================================

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def links(self) -> list[Link]:
        return list(self._links.values())

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def iter_links(self) -> Iterator[Link]:
        return iter(self._links.values())

    @property
    def layers(self) -> dict[int, list[Node]]:
        """Nodes grouped by layer, layers in first-seen order."""
        grouped: dict[int, list[Node]] = {}
        for node in self._nodes.values():
            grouped.setdefault(node.layer, []).append(node)
        return grouped

    @property
    def layer_count(self) -> int:
        if not self._nodes:
            return 0
        return max(key.layer for key in self._nodes) + 1

    @property
    def max_link_value(self) -> int:
        """Largest single link value, 0 for a graph without links."""
        return max((link.value for link in self._links.values()), default=0)

    @property
    def total_link_value(self) -> int:
        return sum(link.value for link in self._links.values())

    def links_touching(self, node: Node) -> list[Link]:
        """Links that have the node as target, then those that have it as source."""
        return [*node.incoming, *node.outgoing]

    def to_nx_graph(self) -> nx.DiGraph:
        """Return a NetworkX view of the graph.

        Node ids are the external "{layer}_{label}" strings. Node attributes:
        label, layer, total_flow, percentage. Edge attribute: value.
        """
        G = nx.DiGraph()
        for node in self._nodes.values():
            G.add_node(
                str(node.key),
                label=node.label,
                layer=node.layer,
                total_flow=node.total_flow,
                percentage=node.percentage,
            )
        for link in self._links.values():
            G.add_edge(str(link.source), str(link.target), value=link.value)
        return G
