"""Diagram CLI commands: layout, highlight, inspect."""

from __future__ import annotations

import logging
from typing import Annotated

import networkx as nx
import typer

from journeyflow.cli._config import load_config
from journeyflow.cli._format import (
    format_count,
    format_visits,
    print_json,
    print_lines,
    print_table,
    truncate_label,
)
from journeyflow.diagram import Diagram, build_diagram
from journeyflow.exceptions import JourneyInputError
from journeyflow.journeys import load_journeys, sort_journeys

FileArg = Annotated[str, typer.Argument(help="Journey JSON file")]
StepsOpt = Annotated[int | None, typer.Option("--steps", help="Expected path length (column count)")]
MaxJourneysOpt = Annotated[int | None, typer.Option("--max-journeys", help="Only draw the N most frequent journeys")]
WidthOpt = Annotated[float | None, typer.Option("--width", help="Container width in pixels")]
DomainOpt = Annotated[str | None, typer.Option("--domain", help="Site domain for label links")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Output as JSON")]
OutputOpt = Annotated[str | None, typer.Option("--output", help="Write JSON to file")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_diagram(
    file: str,
    steps: int | None,
    max_journeys: int | None,
    width: float | None,
    domain: str | None,
) -> Diagram:
    """Load journeys, most frequent first, and build the diagram.

    CLI options take precedence over pyproject config.
    """
    config = load_config()

    try:
        journeys = sort_journeys(load_journeys(file))
    except JourneyInputError as e:
        print(f"Error: {e}")
        raise typer.Exit(1) from e

    if steps is None and config.steps is None:
        steps = max((len(j) for j in journeys), default=1)

    return build_diagram(
        journeys,
        max_journeys=max_journeys if max_journeys is not None else config.max_journeys,
        config=config.layout_config(steps=steps, width=width),
        domain=domain if domain is not None else config.domain,
    )


def register_commands(app: typer.Typer) -> None:
    """Register `layout`, `highlight` and `inspect` as top-level commands."""

    @app.command("layout")
    def layout_cmd(
        file: FileArg,
        steps: StepsOpt = None,
        max_journeys: MaxJourneysOpt = None,
        width: WidthOpt = None,
        domain: DomainOpt = None,
        as_json: JsonOpt = False,
        output: OutputOpt = None,
        verbose: VerboseOpt = False,
    ):
        """Build the positioned, colored diagram."""
        _configure_logging(verbose)
        diagram = _load_diagram(file, steps, max_journeys, width, domain)

        if as_json:
            print_json("layout", diagram.to_dict(), output)
            return

        graph = diagram.graph
        print(
            f"\nDiagram: {diagram.layout.width:.0f}x{diagram.layout.height:.0f} | "
            f"{len(graph)} nodes | {len(graph.links)} links\n"
        )
        if not len(graph):
            print("  No journeys to draw.")
            return

        headers = ["Step", "Label", "Visits", "Height", "Color"]
        rows = [
            [
                str(node.layer + 1),
                truncate_label(node.label),
                format_visits(node.total_flow, node.percentage),
                f"{node.height:.1f}",
                diagram.colorer.color_for(node),
            ]
            for node in graph.iter_nodes()
        ]
        print_lines(print_table(headers, rows))
        print(f"\n  For JSON: journeyflow layout {file} --json")

    @app.command("highlight")
    def highlight_cmd(
        file: FileArg,
        node: Annotated[str | None, typer.Option("--node", help="Node id, e.g. '1_/pricing'")] = None,
        link: Annotated[str | None, typer.Option("--link", help="Link id, e.g. '0_/|1_/pricing'")] = None,
        steps: StepsOpt = None,
        max_journeys: MaxJourneysOpt = None,
        as_json: JsonOpt = False,
        output: OutputOpt = None,
        verbose: VerboseOpt = False,
    ):
        """Show which nodes and links a hovered node or link highlights."""
        _configure_logging(verbose)
        if (node is None) == (link is None):
            print("Error: Pass exactly one of --node or --link")
            raise typer.Exit(1)

        diagram = _load_diagram(file, steps, max_journeys, None, None)
        graph = diagram.graph
        seed = graph.get_node(node) if node is not None else graph.get_link(link)
        if seed is None:
            kind, value = ("node", node) if node is not None else ("link", link)
            print(f"Error: No {kind} '{value}' in the diagram")
            raise typer.Exit(1)

        result = diagram.highlight(seed)
        if as_json:
            print_json("highlight", {"seed": str(seed.key), **result.to_dict()}, output)
            return

        print(f"\nHovering {seed.key}: {len(result.node_ids)} nodes, {len(result.link_ids)} links highlighted\n")
        for node_id in result.to_dict()["nodes"]:
            print(f"  node  {node_id}")
        for link_id in result.to_dict()["links"]:
            print(f"  link  {link_id}")
        dimmed = len(graph) - len(result.node_ids)
        print(f"\n  Dimmed nodes: {dimmed}")

    @app.command("inspect")
    def inspect_cmd(
        file: FileArg,
        max_journeys: MaxJourneysOpt = None,
        as_json: JsonOpt = False,
        output: OutputOpt = None,
        verbose: VerboseOpt = False,
    ):
        """Summarize the flow graph structure."""
        _configure_logging(verbose)
        diagram = _load_diagram(file, None, max_journeys, None, None)
        graph = diagram.graph
        G = graph.to_nx_graph()

        considered = len(graph.journeys) if graph.max_journeys is None else min(len(graph.journeys), max(graph.max_journeys, 0))
        layers = graph.layers
        data = {
            "journeys": len(graph.journeys),
            "journeys_considered": considered,
            "nodes": G.number_of_nodes(),
            "links": G.number_of_edges(),
            "layers": {str(layer): len(nodes) for layer, nodes in layers.items()},
            "components": nx.number_weakly_connected_components(G) if len(G) else 0,
            "is_dag": nx.is_directed_acyclic_graph(G),
            "total_flow": graph.total_link_value,
            "max_link_value": graph.max_link_value,
        }

        if as_json:
            print_json("inspect", data, output)
            return

        print(f"\nJourneys: {data['journeys_considered']} of {data['journeys']} considered")
        print(f"Graph: {data['nodes']} nodes | {data['links']} links | {data['components']} components\n")
        headers = ["Step", "Nodes"]
        rows = [[str(layer + 1), str(len(nodes))] for layer, nodes in layers.items()]
        print_lines(print_table(headers, rows))
        print(f"\n  Total link flow: {format_count(data['total_flow'])}")
        print(f"  Largest link: {format_count(data['max_link_value'])}")
        if not data["is_dag"]:
            print("  Warning: graph contains a cycle")
