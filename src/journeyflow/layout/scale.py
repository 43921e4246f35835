"""Linear flow-volume to thickness scale shared by nodes and links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from journeyflow.graph.core import FlowGraph
    from journeyflow.graph.types import Node


@dataclass(frozen=True)
class FlowScale:
    """Maps flow values in [0, domain_max] onto [min_thickness, max_thickness].

    The mapping is not clamped; values above domain_max extrapolate.

    Example:
        >>> s = FlowScale(domain_max=50, max_thickness=100)
        >>> s(25)
        50.0
    """

    domain_max: float = 1.0
    min_thickness: float = 0.0
    max_thickness: float = 100.0
    min_node_height: float = 2.0

    def __post_init__(self) -> None:
        if self.domain_max <= 0:
            object.__setattr__(self, "domain_max", 1.0)

    @classmethod
    def for_graph(
        cls,
        graph: FlowGraph,
        *,
        min_thickness: float = 0.0,
        max_thickness: float = 100.0,
        min_node_height: float = 2.0,
    ) -> FlowScale:
        """Scale whose domain ends at the graph's largest link value."""
        return cls(
            domain_max=graph.max_link_value or 1,
            min_thickness=min_thickness,
            max_thickness=max_thickness,
            min_node_height=min_node_height,
        )

    def __call__(self, value: float) -> float:
        t = value / self.domain_max
        return self.min_thickness + t * (self.max_thickness - self.min_thickness)

    def node_height(self, node: Node) -> float:
        """Scaled larger of the node's in/out flow, floored at min_node_height."""
        flow = max(node.incoming_value, node.outgoing_value)
        return max(self(flow), self.min_node_height)
