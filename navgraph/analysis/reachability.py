"""View reachability analysis.

Entry views are views nothing navigates to. Starting from the entry
windows, a forward traversal marks every view the user can reach; the
rest are unreachable (dead or only opened from code the scanner cannot
see).
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple

import networkx as nx

from navgraph.graph.model import NavigationGraph
from navgraph.graph.schema import EdgeKind, NodeType

logger = logging.getLogger("navgraph.analysis.reachability")


class ReachabilityAnalyzer:
    """Reachability queries over a NavigationGraph."""

    def __init__(self, graph: NavigationGraph) -> None:
        """Initialize analyzer.

        Args:
            graph: Built navigation graph.
        """
        self.graph = graph
        self._nx = graph.to_networkx()

    def entry_views(self) -> List[str]:
        """Return ids of views with no incoming navigation, in node order."""
        return [node.id for node in self.graph.nodes if self._nx.in_degree(node.id) == 0]

    def default_roots(self) -> List[str]:
        """Entry windows, or every entry view when there is no entry window."""
        entries = self.entry_views()
        windows = [
            node_id
            for node_id in entries
            if self._nx.nodes[node_id]["type"] == NodeType.WINDOW.value
        ]
        return windows or entries

    def reachable_from(self, roots: Iterable[str]) -> Set[str]:
        """Return ids reachable from ``roots`` (roots included)."""
        reachable: Set[str] = set()
        for root in roots:
            if root not in self._nx or root in reachable:
                continue
            reachable.add(root)
            reachable.update(nx.descendants(self._nx, root))
        return reachable

    def unreachable_views(self, roots: Optional[Iterable[str]] = None) -> List[str]:
        """Return ids not reachable from ``roots``, in node order.

        Args:
            roots: Starting views; defaults to ``default_roots()``.
        """
        roots = list(roots) if roots is not None else self.default_roots()
        reachable = self.reachable_from(roots)
        unreachable = [node.id for node in self.graph.nodes if node.id not in reachable]
        logger.info(
            "Reachability: %d root(s), %d reachable, %d unreachable",
            len(roots),
            len(reachable),
            len(unreachable),
        )
        return unreachable


def find_entry_views(graph: NavigationGraph) -> List[str]:
    return ReachabilityAnalyzer(graph).entry_views()


def find_unreachable_views(
    graph: NavigationGraph, entries: Optional[Iterable[str]] = None
) -> List[str]:
    return ReachabilityAnalyzer(graph).unreachable_views(entries)


def navigation_targets(graph: NavigationGraph, node_id: str) -> List[Tuple[str, EdgeKind]]:
    """Ordered ``(target_id, kind)`` pairs for edges leaving ``node_id``."""
    return [(edge.target, edge.kind) for edge in graph.outgoing(node_id)]
