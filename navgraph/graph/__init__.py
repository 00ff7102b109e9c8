"""Public graph API surface."""

from navgraph.graph.schema import (
    EdgeKind,
    EdgeSpec,
    NodeSpec,
    NodeType,
    edge_from_dict,
    node_from_dict,
)
from navgraph.graph.model import NavigationGraph, NodeArena
from navgraph.graph.resolver import resolve_target

__all__ = [
    "EdgeKind",
    "EdgeSpec",
    "NavigationGraph",
    "NodeArena",
    "NodeSpec",
    "NodeType",
    "edge_from_dict",
    "node_from_dict",
    "resolve_target",
]
