"""Navigation graph assembly.

The assembler walks markup files in enumeration order. For every file it
classifies the markup, appends a node, reads the code-behind companion,
extracts navigation calls and resolves them to nodes.

In the default single-pass mode a file's calls are resolved right after
its own node is appended, against nodes ``0..i`` only. A call to a view
that is enumerated later is dropped even though that view ends up in the
graph. The two-pass mode resolves against the complete node set instead
and must be requested explicitly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from navgraph.config.schema import MAX_MARKUP_FILES, NavigationConfig, ResolutionMode
from navgraph.graph.model import NavigationGraph, NodeArena
from navgraph.graph.resolver import resolve_target
from navgraph.graph.schema import EdgeSpec, NodeSpec
from navgraph.parsers.codebehind.extractor import RawCall, extract_navigation_calls
from navgraph.parsers.markup.classifier import classify_markup
from navgraph.runtime.config_loader import ConfigSource, load_navigation_config
from navgraph.utils.path_utils import (
    canonical_path,
    companion_path,
    markup_label,
    read_companion,
)
from navgraph.utils.scanner import MarkupFile, iter_markup_files

logger = logging.getLogger("navgraph.runtime.assembler")

# Maps a markup file path to its companion source text, or None.
CompanionReader = Callable[[Path], Optional[str]]


class GraphAssembler:
    """Build navigation graphs from markup files and their companions.

    An assembler holds configuration only; every build starts from a new
    node arena and edge list, so builds never share state.
    """

    def __init__(
        self,
        config: ConfigSource = None,
        companion_reader: Optional[CompanionReader] = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            config: Navigation config, or any source accepted by
                ``load_navigation_config``.
            companion_reader: Override for loading companion text. Defaults
                to reading ``<markup path><companion_suffix>`` from disk.
        """
        self.config = load_navigation_config(config)
        self._read_companion = companion_reader or self._read_companion_from_disk

    @property
    def max_files(self) -> int:
        return min(self.config.max_files, MAX_MARKUP_FILES)

    def build(self, root: Optional[Union[str, Path]]) -> NavigationGraph:
        """Build the navigation graph for a workspace root.

        Args:
            root: Workspace root directory. None or empty yields an empty graph.

        Returns:
            NavigationGraph: Complete graph for this build.
        """
        if not root:
            logger.debug("No workspace root supplied; returning empty graph")
            return NavigationGraph.empty()

        root_path = Path(root)
        if not root_path.is_dir():
            logger.warning("Workspace root %s is not a directory; returning empty graph", root_path)
            return NavigationGraph.empty()

        logger.info("Building navigation graph for %s", root_path)
        return self.build_from_files(iter_markup_files(root_path, self.config))

    def build_from_files(self, files: Iterable[MarkupFile]) -> NavigationGraph:
        """Build a graph from already enumerated markup files.

        Files are processed strictly in the given order. At most
        ``max_files`` nodes are created; later files are dropped.

        Args:
            files: Markup files with their text, in enumeration order.

        Returns:
            NavigationGraph: Complete graph for this build.
        """
        arena = NodeArena()
        edges: List[EdgeSpec] = []
        pending: List[Tuple[NodeSpec, List[RawCall]]] = []
        two_pass = self.config.resolution == ResolutionMode.TWO_PASS
        cap = self.max_files

        for markup in files:
            if len(arena) >= cap:
                logger.info("Markup file cap of %d reached; remaining files skipped", cap)
                break

            node_id = canonical_path(markup.path)
            if node_id in arena:
                logger.debug("Duplicate markup file %s, skipping", node_id)
                continue

            node = NodeSpec(
                id=node_id,
                label=markup_label(markup.path),
                type=classify_markup(markup.text),
                source_path=node_id,
            )
            index = arena.append(node)
            logger.debug("Added node %s (type=%s)", node.label, node.type.value)

            calls = self._load_calls(markup.path)
            if two_pass:
                pending.append((node, calls))
            else:
                edges.extend(self._resolve_calls(node, calls, arena.visible(index)))

        if two_pass:
            all_nodes = arena.snapshot()
            for node, calls in pending:
                edges.extend(self._resolve_calls(node, calls, all_nodes))

        graph = NavigationGraph(nodes=arena.snapshot(), edges=tuple(edges))
        logger.info(
            "Navigation graph built: %d nodes, %d edges (%s)",
            len(graph.nodes),
            len(graph.edges),
            self.config.resolution.value,
        )
        return graph

    def _load_calls(self, markup_path: Path) -> List[RawCall]:
        """Extract calls from a markup file's companion; [] on any read failure."""
        try:
            text = self._read_companion(Path(markup_path))
        except (OSError, ValueError) as exc:
            logger.debug("Companion for %s unreadable: %s", markup_path, exc)
            return []
        return extract_navigation_calls(text)

    def _read_companion_from_disk(self, markup_path: Path) -> Optional[str]:
        return read_companion(
            companion_path(markup_path, self.config.companion_suffix),
            self.config.max_companion_bytes,
        )

    @staticmethod
    def _resolve_calls(
        node: NodeSpec, calls: List[RawCall], visible: Sequence[NodeSpec]
    ) -> List[EdgeSpec]:
        edges = []
        for call in calls:
            target = resolve_target(call, visible)
            if target is None:
                continue
            edges.append(EdgeSpec(source=node.id, target=target.id, kind=call.kind))
        return edges


def build_navigation_graph(
    root: Optional[Union[str, Path]],
    config: ConfigSource = None,
) -> NavigationGraph:
    """Build a navigation graph for ``root`` with a fresh assembler."""
    return GraphAssembler(config).build(root)


__all__ = ["CompanionReader", "GraphAssembler", "build_navigation_graph"]
