"""Show command: print a navigation graph as rich tables."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from navgraph.analysis.reachability import ReachabilityAnalyzer
from navgraph.cli.build import RECOVERABLE_BUILD_ERRORS, build_graph_from_args
from navgraph.graph.model import NavigationGraph

logger = logging.getLogger("navgraph.cli.show")


def _display_path(node_id: str, root: Optional[Path]) -> str:
    if root is None:
        return node_id
    try:
        return Path(node_id).relative_to(root).as_posix()
    except ValueError:
        return node_id


def render_graph(graph: NavigationGraph, console: Console, root: Optional[Path] = None) -> None:
    """Print node, edge and reachability tables for ``graph``."""
    labels = {node.id: node.label for node in graph.nodes}

    nodes_table = Table(title=f"Views ({len(graph.nodes)})")
    nodes_table.add_column("Index", justify="right", style="cyan", no_wrap=True)
    nodes_table.add_column("Label", style="green")
    nodes_table.add_column("Type", style="magenta")
    nodes_table.add_column("Path")
    for i, node in enumerate(graph.nodes):
        nodes_table.add_row(str(i), node.label, node.type.value, _display_path(node.id, root))
    console.print(nodes_table)

    edges_table = Table(title=f"Navigations ({len(graph.edges)})")
    edges_table.add_column("From", style="green")
    edges_table.add_column("Kind", style="magenta")
    edges_table.add_column("To", style="green")
    for edge in graph.edges:
        edges_table.add_row(labels[edge.source], edge.kind.value, labels[edge.target])
    console.print(edges_table)

    analyzer = ReachabilityAnalyzer(graph)
    entries = [labels[node_id] for node_id in analyzer.entry_views()]
    unreachable = [labels[node_id] for node_id in analyzer.unreachable_views()]
    console.print(f"Entry views: {', '.join(entries) or '-'}")
    console.print(f"Unreachable views: {', '.join(unreachable) or '-'}")


def show_command(args, console: Optional[Console] = None) -> int:
    """Execute show command.

    Args:
        args: Parsed command-line arguments.
        console: Console to print to; defaults to stdout.

    Returns:
        int: Exit code.
    """
    console = console or Console()
    try:
        graph = build_graph_from_args(args)
    except RECOVERABLE_BUILD_ERRORS as e:
        logger.error("Build failed: %s", e)
        return 1

    if graph.is_empty():
        console.print(f"[yellow]No markup files found under {args.root}[/yellow]")
        return 0

    render_graph(graph, console, Path(args.root).resolve())
    return 0
