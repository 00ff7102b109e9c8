"""Build command implementation."""

import logging
from pathlib import Path
from typing import Optional

from navgraph.config.schema import ResolutionMode
from navgraph.errors import NavGraphError
from navgraph.export.graphml import export_graphml
from navgraph.export.json import export_json
from navgraph.graph.model import NavigationGraph
from navgraph.runtime.assembler import GraphAssembler
from navgraph.runtime.config_loader import load_navigation_config

logger = logging.getLogger("navgraph.cli.build")

RECOVERABLE_BUILD_ERRORS = (
    NavGraphError,
    OSError,
    ValueError,
)


def build_graph_from_args(args) -> NavigationGraph:
    """Load configuration, apply CLI overrides and build the graph.

    Args:
        args: Parsed arguments with ``root`` and optional ``config``,
            ``two_pass`` and ``max_files`` attributes.

    Returns:
        NavigationGraph: The built graph.
    """
    config = load_navigation_config(getattr(args, "config", None))

    overrides = {}
    if getattr(args, "two_pass", False):
        overrides["resolution"] = ResolutionMode.TWO_PASS
    max_files: Optional[int] = getattr(args, "max_files", None)
    if max_files is not None:
        overrides["max_files"] = max_files
    if overrides:
        config = config.model_validate({**config.model_dump(), **overrides})

    logger.debug("Resolution mode: %s", config.resolution.value)
    logger.debug("Max files: %d", config.max_files)

    return GraphAssembler(config).build(args.root)


def build_command(args) -> int:
    """Execute build command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code.
    """
    logger.debug("=== Navgraph Build ===")
    logger.debug("Root: %s", args.root)

    try:
        graph = build_graph_from_args(args)

        output_path = Path(args.output)
        export_format = getattr(args, "format", "json")
        if export_format == "graphml":
            export_graphml(graph, output_path)
        elif export_format == "node_link":
            export_json(graph, output_path, style="node_link")
        else:
            export_json(graph, output_path)

    except RECOVERABLE_BUILD_ERRORS as e:
        logger.error("Build failed: %s", e, exc_info=logger.isEnabledFor(logging.DEBUG))
        return 1

    if graph.is_empty():
        logger.warning("No markup files found under %s", args.root)

    logger.info("Graph written to %s (%d nodes, %d edges)",
                output_path, len(graph.nodes), len(graph.edges))
    return 0
