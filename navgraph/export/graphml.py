"""GraphML export for navigation graphs."""

import logging
from pathlib import Path

import networkx as nx

from navgraph.graph.model import NavigationGraph

logger = logging.getLogger("navgraph.export.graphml")


def export_graphml(graph: NavigationGraph, output_path: Path) -> None:
    """Export graph to GraphML format.

    Args:
        graph: Graph to export.
        output_path: Output file path.
    """
    output_path = Path(output_path)
    logger.info("Exporting graph to GraphML: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    nx.write_graphml(graph.to_networkx(), str(output_path))

    logger.info("GraphML export completed: %d nodes, %d edges",
                len(graph.nodes), len(graph.edges))
