"""Navigation graph containers.

``NodeArena`` is the ordered, append-only node store used while a build
is in progress: nodes live in a list and an id->index map gives O(1)
membership. Resolution only ever looks at a prefix of the arena, which
is what makes single-pass builds order dependent.

``NavigationGraph`` is the immutable result handed to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from navgraph.errors import GraphIntegrityError
from navgraph.graph.schema import EdgeSpec, NodeSpec, edge_from_dict, node_from_dict

logger = logging.getLogger("navgraph.graph.model")


class NodeArena:
    """Ordered node list with an id->index lookup."""

    def __init__(self) -> None:
        self._nodes: List[NodeSpec] = []
        self._index: Dict[str, int] = {}

    def append(self, node: NodeSpec) -> int:
        """Append a node and return its index.

        Raises:
            GraphIntegrityError: If a node with the same id already exists.
        """
        if node.id in self._index:
            raise GraphIntegrityError(f"Duplicate node id: {node.id}")
        self._index[node.id] = len(self._nodes)
        self._nodes.append(node)
        return self._index[node.id]

    def index_of(self, node_id: str) -> Optional[int]:
        return self._index.get(node_id)

    def visible(self, upto: int) -> Sequence[NodeSpec]:
        """Return nodes ``0..upto`` inclusive, in insertion order."""
        return self._nodes[: upto + 1]

    def snapshot(self) -> Tuple[NodeSpec, ...]:
        return tuple(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> NodeSpec:
        return self._nodes[index]


@dataclass(frozen=True)
class NavigationGraph:
    """Immutable navigation graph: ordered nodes and ordered edges.

    Construction checks that node ids are pairwise distinct and that every
    edge endpoint names a node of this graph.
    """

    nodes: Tuple[NodeSpec, ...] = ()
    edges: Tuple[EdgeSpec, ...] = ()
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable but always store tuples.
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

        index: Dict[str, int] = {}
        for position, node in enumerate(self.nodes):
            if node.id in index:
                raise GraphIntegrityError(f"Duplicate node id: {node.id}")
            index[node.id] = position
        object.__setattr__(self, "_index", index)

        for edge in self.edges:
            for endpoint in (edge.source, edge.target):
                if endpoint not in index:
                    raise GraphIntegrityError(
                        f"Edge {edge.source} -> {edge.target} references "
                        f"unknown node {endpoint}"
                    )

    @classmethod
    def empty(cls) -> "NavigationGraph":
        return cls()

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def index_of(self, node_id: str) -> Optional[int]:
        return self._index.get(node_id)

    def get_node(self, node_id: str) -> Optional[NodeSpec]:
        position = self._index.get(node_id)
        return None if position is None else self.nodes[position]

    def outgoing(self, node_id: str) -> List[EdgeSpec]:
        """Edges leaving ``node_id``, in build order."""
        return [edge for edge in self.edges if edge.source == node_id]

    def is_empty(self) -> bool:
        return not self.nodes

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form: ``{"nodes": [...], "edges": [...]}``."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NavigationGraph":
        """Rebuild a graph from its plain-data form.

        Raises:
            GraphIntegrityError: If the data is structurally inconsistent.
        """
        try:
            nodes: Iterable[NodeSpec] = [node_from_dict(n) for n in data.get("nodes", [])]
            edges: Iterable[EdgeSpec] = [edge_from_dict(e) for e in data.get("edges", [])]
        except (KeyError, TypeError, ValueError) as exc:
            raise GraphIntegrityError(f"Malformed graph data: {exc}") from exc
        return cls(nodes=tuple(nodes), edges=tuple(edges))

    def to_networkx(self) -> nx.MultiDiGraph:
        """Return a networkx view of this graph.

        Parallel edges are kept, so a view that both shows and navigates to
        the same target yields two edges.
        """
        graph = nx.MultiDiGraph()
        for node in self.nodes:
            graph.add_node(
                node.id,
                label=node.label,
                type=node.type.value,
                source_path=node.source_path,
            )
        for edge in self.edges:
            graph.add_edge(edge.source, edge.target, kind=edge.kind.value)
        return graph

    def __len__(self) -> int:
        return len(self.nodes)


__all__ = ["NavigationGraph", "NodeArena"]
