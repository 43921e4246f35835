"""Build a layered flow graph from weighted journeys."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from journeyflow.graph.core import FlowGraph
from journeyflow.journeys import Journey

logger = logging.getLogger(__name__)


def build_flow_graph(journeys: Sequence[Journey], max_journeys: int | None = None) -> FlowGraph:
    """Turn journeys into a FlowGraph.

    Only the first ``max_journeys`` journeys contribute nodes and links;
    the rest are ignored. Each path position i yields the node (i, path[i])
    and each consecutive pair yields a link carrying the journey's count.

    Args:
        journeys: Journeys in caller order (typically by descending count)
        max_journeys: How many leading journeys to consider (None = all)

    Returns:
        FlowGraph with wired incoming/outgoing lists, total_flow and
        percentage set on every node. Layout fields are left unset.

    Example:
        >>> g = build_flow_graph([Journey(("/a", "/b"), 10, 100.0)])
        >>> [(str(l.key), l.value) for l in g.links]
        [('0_/a|1_/b', 10)]
    """
    journeys = tuple(journeys)
    considered = journeys if max_journeys is None else journeys[: max(max_journeys, 0)]
    graph = FlowGraph(journeys=journeys, max_journeys=max_journeys)

    for journey in considered:
        previous = None
        for i, label in enumerate(journey.path):
            node = graph.get_or_create_node(i, label)
            if previous is not None:
                graph.add_flow(previous, node, journey.count)
            previous = node

    _assign_flow_totals(graph)
    _assign_percentages(graph, journeys)

    if len(considered) < len(journeys):
        logger.debug("Ignored %d journeys past cutoff %s", len(journeys) - len(considered), max_journeys)
    logger.debug(
        "Built flow graph: %d nodes, %d links, %d layers from %d journeys",
        len(graph),
        len(graph.links),
        graph.layer_count,
        len(considered),
    )
    return graph


def _assign_flow_totals(graph: FlowGraph) -> None:
    """First-step nodes count what leaves them; later nodes count what arrives."""
    for node in graph.iter_nodes():
        node.total_flow = node.outgoing_value if node.layer == 0 else node.incoming_value


def _assign_percentages(graph: FlowGraph, journeys: Sequence[Journey]) -> None:
    """Take the percentage of the first journey that has the node's label at its layer."""
    first_match: dict[tuple[int, str], float] = {}
    for journey in journeys:
        for i, label in enumerate(journey.path):
            first_match.setdefault((i, label), journey.percentage)

    for node in graph.iter_nodes():
        node.percentage = first_match.get((node.layer, node.label), 0.0)
