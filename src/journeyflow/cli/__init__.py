"""journeyflow CLI: lay out journey diagrams and query highlights.

Entry point for the `journeyflow` command. Requires ``pip install journeyflow[cli]``.

Commands:
    layout      Build the positioned, colored diagram
    highlight   Show what a hovered node or link highlights
    inspect     Summarize the flow graph structure
"""

from __future__ import annotations


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install journeyflow[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all commands."""
    _require_typer()

    import typer

    from journeyflow.cli.diagram_cmd import register_commands

    app = typer.Typer(
        name="journeyflow",
        help="Journey flow diagram layout and exploration CLI.",
        no_args_is_help=True,
    )
    register_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
