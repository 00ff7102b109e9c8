"""JSON export for navigation graphs."""

import json
import logging
from pathlib import Path

import networkx as nx

from navgraph.errors import GraphIntegrityError
from navgraph.graph.model import NavigationGraph

logger = logging.getLogger("navgraph.export.json")


def export_json(graph: NavigationGraph, output_path: Path, style: str = "plain") -> None:
    """Export graph to JSON format.

    Args:
        graph: Graph to export.
        output_path: Output file path.
        style: ``plain`` writes ``{"nodes": [...], "edges": [...]}`` as
            consumed by viewers; ``node_link`` writes networkx node-link data.
    """
    output_path = Path(output_path)
    logger.info("Exporting graph to JSON (%s): %s", style, output_path)

    if style == "plain":
        data = graph.to_dict()
    elif style == "node_link":
        data = nx.readwrite.json_graph.node_link_data(graph.to_networkx(), edges="edges")
    else:
        raise ValueError(f"Unknown JSON export style: {style}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("JSON export completed: %d nodes, %d edges",
                len(graph.nodes), len(graph.edges))


def load_json(input_path: Path) -> NavigationGraph:
    """Load a graph previously written with ``export_json(style="plain")``.

    Raises:
        GraphIntegrityError: If the file does not hold a consistent graph.
    """
    with open(input_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise GraphIntegrityError(f"Invalid graph JSON in {input_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise GraphIntegrityError(f"Graph JSON in {input_path} must be an object")
    return NavigationGraph.from_dict(data)
