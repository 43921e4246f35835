"""journeyflow - Sankey layout and reachability for weighted user journeys."""

from journeyflow.diagram import Diagram, build_diagram
from journeyflow.exceptions import FlowGraphError, JourneyInputError
from journeyflow.graph import FlowGraph, Link, LinkKey, Node, NodeKey, build_flow_graph
from journeyflow.journeys import Journey, load_journeys, sort_journeys
from journeyflow.layout import FlowScale, Layout, LayoutConfig, LinkCurve, layout_graph
from journeyflow.styles import SegmentColorer, segment_key
from journeyflow.traversal import (
    Direction,
    Highlight,
    compute_highlight,
    connected_links,
    highlight_link,
    highlight_node,
)

__all__ = [
    # Input
    "Journey",
    "load_journeys",
    "sort_journeys",
    # Graph
    "FlowGraph",
    "Node",
    "NodeKey",
    "Link",
    "LinkKey",
    "build_flow_graph",
    # Layout
    "FlowScale",
    "Layout",
    "LayoutConfig",
    "LinkCurve",
    "layout_graph",
    # Colors
    "SegmentColorer",
    "segment_key",
    # Reachability
    "Direction",
    "Highlight",
    "compute_highlight",
    "connected_links",
    "highlight_link",
    "highlight_node",
    # Diagram
    "Diagram",
    "build_diagram",
    # Errors
    "FlowGraphError",
    "JourneyInputError",
]
