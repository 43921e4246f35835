"""Render-ready diagram export.

Runs build -> scale -> layout -> colorize in one call and flattens the
result into plain data a renderer can draw without knowing about the
graph types: bars for nodes, ribbon paths for links, colors, and the
numbers shown on hover.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from journeyflow.graph.builder import build_flow_graph
from journeyflow.graph.core import FlowGraph
from journeyflow.graph.types import Link, Node
from journeyflow.journeys import Journey
from journeyflow.layout.engine import Layout, LayoutConfig, layout_graph
from journeyflow.styles.segments import SegmentColorer
from journeyflow.traversal import Highlight, Seed, compute_highlight

logger = logging.getLogger(__name__)


@dataclass
class Diagram:
    """One rendering pass: the positioned graph plus its colors.

    Attributes:
        layout: Layout result (holds the graph and canvas size)
        colorer: Segment colorer built for this graph
        domain: Site domain used to turn labels into links (optional)
    """

    layout: Layout
    colorer: SegmentColorer
    domain: str | None = None

    @property
    def graph(self) -> FlowGraph:
        return self.layout.graph

    def highlight(self, seed: Seed) -> Highlight:
        return compute_highlight(self.graph, seed)

    def node_href(self, node: Node) -> str | None:
        if not self.domain:
            return None
        return f"https://{self.domain}{node.label}"

    def link_share(self, link: Link) -> float:
        """Link value as a percentage of all link values."""
        total = self.graph.total_link_value
        if total == 0:
            return 0.0
        return link.value / total * 100

    def node_to_dict(self, node: Node) -> dict[str, Any]:
        data = {
            "id": str(node.key),
            "label": node.label,
            "layer": node.layer,
            "x": node.x,
            "y": node.y,
            "top": node.top,
            "width": self.layout.config.node_width,
            "height": node.height,
            "color": self.colorer.color_for(node),
            "count": node.total_flow,
            "percentage": node.percentage,
        }
        href = self.node_href(node)
        if href is not None:
            data["href"] = href
        return data

    def link_to_dict(self, link: Link) -> dict[str, Any]:
        return {
            "id": str(link.key),
            "source": str(link.source),
            "target": str(link.target),
            "value": link.value,
            "share": self.link_share(link),
            "thickness": link.thickness,
            "hit_width": max(link.thickness or 0.0, self.layout.config.hit_area_width),
            "color": self.colorer.link_color(link),
            "path": self.layout.link_path(link),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.layout.width,
            "height": self.layout.height,
            "layer_width": self.layout.layer_width,
            "nodes": [self.node_to_dict(node) for node in self.graph.iter_nodes()],
            "links": [self.link_to_dict(link) for link in self.graph.iter_links()],
        }


def build_diagram(
    journeys: Sequence[Journey],
    *,
    max_journeys: int | None = None,
    config: LayoutConfig | None = None,
    domain: str | None = None,
) -> Diagram:
    """Build, lay out and color a diagram from journeys.

    Args:
        journeys: Journeys in display priority order
        max_journeys: Cutoff on how many journeys to draw (None = all)
        config: Layout parameters
        domain: Site domain for label hyperlinks

    Example:
        >>> d = build_diagram([Journey(("/a", "/b"), 10, 100.0)], config=LayoutConfig(steps=2))
        >>> [n["id"] for n in d.to_dict()["nodes"]]
        ['0_/a', '1_/b']
    """
    graph = build_flow_graph(journeys, max_journeys)
    layout = layout_graph(graph, config)
    colorer = SegmentColorer.for_graph(graph)
    logger.debug("Colored %d recurring segments", len(colorer.segment_colors))
    return Diagram(layout=layout, colorer=colorer, domain=domain)
