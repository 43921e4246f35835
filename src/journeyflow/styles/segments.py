"""Segment-based node coloring.

Nodes are colored by the first segment of their label ("/docs/intro" ->
"/docs"). Segments that appear on more than one node get a palette color,
handed out round-robin in the order segments are first seen. Segments
seen on a single node stay neutral so one-off pages do not use up the
palette.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from journeyflow.graph.core import FlowGraph
    from journeyflow.graph.types import Link, Node

# ============================================================
# PALETTE
# ============================================================

PALETTE: tuple[str, ...] = (
    "hsl(160, 45%, 40%)",  # teal
    "hsl(220, 45%, 50%)",  # blue
    "hsl(270, 40%, 50%)",  # purple
    "hsl(25, 50%, 50%)",  # orange
    "hsl(340, 40%, 50%)",  # pink
    "hsl(190, 45%, 45%)",  # cyan
    "hsl(45, 45%, 50%)",  # yellow
    "hsl(0, 45%, 50%)",  # red
)

DEFAULT_COLOR = "hsl(0, 0%, 50%)"

# Used for links whose source node cannot be resolved
FALLBACK_LINK_COLOR = "hsl(0, 0%, 60%)"

SEPARATOR = "/"


def segment_key(label: str) -> str:
    """First non-empty path segment with a leading separator.

    Example:
        >>> segment_key("/docs/intro")
        '/docs'
        >>> segment_key("/")
        '/'
    """
    for part in label.split(SEPARATOR):
        if part:
            return f"{SEPARATOR}{part}"
    return label


class SegmentColorer:
    """Assigns colors to nodes from their label segments.

    Built once per graph; lookups after that are dict reads.

    Args:
        labels: Node labels, one per node, in node order
        palette: Colors for recurring segments
        default: Color for segments seen only once
    """

    def __init__(
        self,
        labels: Iterable[str],
        palette: tuple[str, ...] = PALETTE,
        default: str = DEFAULT_COLOR,
    ) -> None:
        self.palette = palette
        self.default = default
        counts = Counter(segment_key(label) for label in labels)
        recurring = [segment for segment, count in counts.items() if count > 1]
        self._colors: dict[str, str] = {
            segment: palette[i % len(palette)] for i, segment in enumerate(recurring)
        }
        self._graph: FlowGraph | None = None

    @classmethod
    def for_graph(cls, graph: FlowGraph, **kwargs) -> SegmentColorer:
        colorer = cls((node.label for node in graph.iter_nodes()), **kwargs)
        colorer._graph = graph
        return colorer

    @property
    def segment_colors(self) -> dict[str, str]:
        """Palette assignments for recurring segments, in first-seen order."""
        return dict(self._colors)

    def color_for_label(self, label: str) -> str:
        return self._colors.get(segment_key(label), self.default)

    def color_for(self, node: Node | None) -> str:
        if node is None:
            return self.default
        return self.color_for_label(node.label)

    def link_color(self, link: Link) -> str:
        """A link takes its source node's color."""
        source = self._graph.source_of(link) if self._graph is not None else None
        if source is None:
            return FALLBACK_LINK_COLOR
        return self.color_for(source)
