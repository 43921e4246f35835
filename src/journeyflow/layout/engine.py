"""Layered layout for flow graphs.

Each layer is a vertical column. Nodes are stacked top-aligned in the
order they were created, and links are stacked inside each node's bar,
largest first, so the heaviest flows hug the top edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from journeyflow.graph.core import FlowGraph
from journeyflow.graph.types import Link, Node
from journeyflow.layout.geometry import LinkCurve, ribbon_curve
from journeyflow.layout.scale import FlowScale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    """Layout parameters, in pixels unless noted."""

    width: float = 1000
    steps: int = 1  # expected path length; sets the column width
    node_width: float = 30
    node_gap: float = 20
    min_height: float = 200
    vertical_padding: float = 10
    min_link_thickness: float = 0
    max_link_thickness: float = 100
    min_node_height: float = 2
    hit_area_width: float = 16

    @property
    def layer_width(self) -> float:
        return self.width / max(self.steps, 1)

    @property
    def layer_spacing(self) -> float:
        """Horizontal gap between a bar's right edge and the next column."""
        return self.layer_width - self.node_width

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def with_overrides(self, overrides: dict[str, Any]) -> LayoutConfig:
        """Copy with known fields replaced; None values are skipped."""
        known = self.field_names()
        return replace(self, **{k: v for k, v in overrides.items() if k in known and v is not None})


@dataclass
class Layout:
    """Result of one layout pass.

    Attributes:
        graph: The laid-out graph (nodes and links carry positions)
        config: Parameters used
        scale: Flow scale shared by nodes and links
        width: Canvas width
        height: Canvas height (never below config.min_height)
    """

    graph: FlowGraph
    config: LayoutConfig
    scale: FlowScale
    width: float
    height: float

    @property
    def layer_width(self) -> float:
        return self.config.layer_width

    def link_curve(self, link: Link) -> LinkCurve | None:
        """Ribbon curve for a link, or None if an endpoint is missing."""
        source = self.graph.source_of(link)
        target = self.graph.target_of(link)
        if source is None or target is None or source.x is None or target.x is None:
            return None

        source_y = link.source_y if link.source_y is not None else source.y
        target_y = link.target_y if link.target_y is not None else target.y
        return ribbon_curve(
            source.x + self.config.node_width,
            source_y,
            target.x,
            target_y,
            self.config.layer_spacing,
        )

    def link_path(self, link: Link) -> str:
        """SVG path for a link; empty string when it cannot be resolved."""
        curve = self.link_curve(link)
        return curve.to_svg_path() if curve is not None else ""


def layout_graph(graph: FlowGraph, config: LayoutConfig | None = None) -> Layout:
    """Position every node and link anchor in the graph.

    Mutates the graph's layout fields in place and returns a Layout
    describing the canvas.

    Args:
        graph: Graph from build_flow_graph
        config: Layout parameters (defaults to LayoutConfig())
    """
    config = config or LayoutConfig()
    scale = FlowScale.for_graph(
        graph,
        min_thickness=config.min_link_thickness,
        max_thickness=config.max_link_thickness,
        min_node_height=config.min_node_height,
    )

    for node in graph.iter_nodes():
        node.height = scale.node_height(node)
    for link in graph.iter_links():
        link.thickness = scale(link.value)

    layers = graph.layers
    tallest = max((_layer_extent(nodes, config.node_gap) for nodes in layers.values()), default=0.0)
    height = max(config.min_height, tallest + config.vertical_padding * 2)

    for layer, nodes in layers.items():
        _position_layer(layer, nodes, config)
    for node in graph.iter_nodes():
        _stack_links(node)

    logger.debug(
        "Laid out %d layers on %.0fx%.0f canvas (layer width %.1f)",
        len(layers),
        config.width,
        height,
        config.layer_width,
    )
    return Layout(graph=graph, config=config, scale=scale, width=config.width, height=height)


def _layer_extent(nodes: list[Node], gap: float) -> float:
    return sum(node.height for node in nodes) + (len(nodes) - 1) * gap


def _position_layer(layer: int, nodes: list[Node], config: LayoutConfig) -> None:
    x = layer * config.layer_width
    offset = 0.0
    for node in nodes:
        node.x = x
        node.y = offset + node.height / 2
        offset += node.height + config.node_gap


def _stack_links(node: Node) -> None:
    """Sort both sides by descending value and stack anchors from the top edge."""
    node.incoming.sort(key=lambda link: link.value, reverse=True)
    node.outgoing.sort(key=lambda link: link.value, reverse=True)

    offset = node.top
    for link in node.outgoing:
        link.source_y = offset + link.thickness / 2
        offset += link.thickness

    offset = node.top
    for link in node.incoming:
        link.target_y = offset + link.thickness / 2
        offset += link.thickness
