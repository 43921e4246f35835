"""Record types for the flow graph.

Nodes and links are plain records. Layout fields start as None and are
filled in by a single layout pass; they are never read before that.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class NodeKey(NamedTuple):
    """Identity of a node: the step index and the label at that step.

    Example:
        >>> str(NodeKey(1, "/pricing"))
        '1_/pricing'
    """

    layer: int
    label: str

    def __str__(self) -> str:
        return f"{self.layer}_{self.label}"

    @classmethod
    def parse(cls, node_id: str) -> NodeKey | None:
        """Parse an external node id ("{layer}_{label}"), or None if malformed."""
        layer, sep, label = node_id.partition("_")
        if not sep or not (layer.isascii() and layer.isdigit()):
            return None
        return cls(int(layer), label)


class LinkKey(NamedTuple):
    """Identity of a link: the ordered (source, target) node pair."""

    source: NodeKey
    target: NodeKey

    def __str__(self) -> str:
        return f"{self.source}|{self.target}"

    @classmethod
    def parse(cls, link_id: str) -> LinkKey | None:
        """Parse an external link id ("{source}|{target}"), or None if malformed.

        Labels may themselves contain "|", so every split point is tried
        and the first one where the target advances one layer wins.
        """
        parts = link_id.split("|")
        for i in range(1, len(parts)):
            source = NodeKey.parse("|".join(parts[:i]))
            target = NodeKey.parse("|".join(parts[i:]))
            if source is not None and target is not None and target.layer == source.layer + 1:
                return cls(source, target)
        return None


@dataclass(eq=False)
class Link:
    """A weighted transition between a node and a node one layer ahead.

    Equality and hashing are by identity; the owning FlowGraph keeps
    exactly one Link per LinkKey, so identity and key coincide.
    """

    source: NodeKey
    target: NodeKey
    value: int = 0

    # Layout
    thickness: float | None = None
    source_y: float | None = None
    target_y: float | None = None

    @property
    def key(self) -> LinkKey:
        return LinkKey(self.source, self.target)

    def __repr__(self) -> str:
        return f"Link({self.source} -> {self.target}, value={self.value})"


@dataclass(eq=False)
class Node:
    """A unique (layer, label) step in the flow graph."""

    label: str
    layer: int
    incoming: list[Link] = field(default_factory=list)
    outgoing: list[Link] = field(default_factory=list)
    total_flow: int = 0
    percentage: float = 0.0

    # Layout
    height: float | None = None
    x: float | None = None
    y: float | None = None

    @property
    def key(self) -> NodeKey:
        return NodeKey(self.layer, self.label)

    @property
    def incoming_value(self) -> int:
        return sum(link.value for link in self.incoming)

    @property
    def outgoing_value(self) -> int:
        return sum(link.value for link in self.outgoing)

    @property
    def top(self) -> float | None:
        """Y coordinate of the node's top edge, once laid out."""
        if self.y is None or self.height is None:
            return None
        return self.y - self.height / 2

    def __repr__(self) -> str:
        return f"Node({self.key}, flow={self.total_flow})"
