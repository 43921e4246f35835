"""Layout package - flow scale, layered positioning and ribbon geometry."""

from journeyflow.layout.engine import Layout, LayoutConfig, layout_graph
from journeyflow.layout.geometry import LinkCurve, ribbon_curve
from journeyflow.layout.scale import FlowScale

__all__ = [
    "FlowScale",
    "Layout",
    "LayoutConfig",
    "LinkCurve",
    "layout_graph",
    "ribbon_curve",
]
