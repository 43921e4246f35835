"""Graph package - flow graph records, index and builder."""

from journeyflow.graph.builder import build_flow_graph
from journeyflow.graph.core import FlowGraph
from journeyflow.graph.types import Link, LinkKey, Node, NodeKey

__all__ = [
    "FlowGraph",
    "Link",
    "LinkKey",
    "Node",
    "NodeKey",
    "build_flow_graph",
]
