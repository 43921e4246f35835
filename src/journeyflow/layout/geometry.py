"""Ribbon geometry for links.

A link is drawn as a horizontal cubic Bezier from the right edge of its
source bar to the left edge of its target bar. Both control points sit at
the endpoint heights, a third of the layer spacing in from each end.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkCurve:
    """Cubic Bezier for one link ribbon.

    Attributes:
        start: (x, y) at the source bar's right edge
        control1: First control point, level with start
        control2: Second control point, level with end
        end: (x, y) at the target bar's left edge
    """

    start: tuple[float, float]
    control1: tuple[float, float]
    control2: tuple[float, float]
    end: tuple[float, float]

    def to_svg_path(self) -> str:
        """SVG path data.

        Example:
            >>> LinkCurve((30, 5), (60, 5), (90, 8), (120, 8)).to_svg_path()
            'M 30,5 C 60,5 90,8 120,8'
        """
        return (
            f"M {_fmt(self.start)} "
            f"C {_fmt(self.control1)} {_fmt(self.control2)} {_fmt(self.end)}"
        )


def ribbon_curve(
    source_x: float,
    source_y: float,
    target_x: float,
    target_y: float,
    layer_spacing: float,
) -> LinkCurve:
    """Build the ribbon curve between two anchors.

    Args:
        source_x: Right edge of the source bar
        source_y: Anchor height at the source
        target_x: Left edge of the target bar
        target_y: Anchor height at the target
        layer_spacing: Horizontal gap between adjacent layers' bars
    """
    return LinkCurve(
        start=(source_x, source_y),
        control1=(source_x + layer_spacing / 3, source_y),
        control2=(target_x - layer_spacing / 3, target_y),
        end=(target_x, target_y),
    )


def _fmt(point: tuple[float, float]) -> str:
    return f"{_num(point[0])},{_num(point[1])}"


def _num(value: float) -> str:
    """Render integral floats without a trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 4))
