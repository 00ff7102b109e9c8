"""navgraph - navigation graph builder for XAML projects.

Scans markup files (``*.xaml``) and their code-behind companions
(``*.xaml.cs``) and derives a directed graph of which views open which.

Layout:
- parsers/: markup classification and code-behind call extraction
- graph/: node/edge schema, immutable graph model, target resolution
- runtime/: graph assembly and configuration loading
- export/: JSON and GraphML writers
- analysis/: reachability queries over a built graph
- cli/: command implementations behind ``navgraph.main``
"""

from navgraph.graph import (
    EdgeKind,
    EdgeSpec,
    NavigationGraph,
    NodeSpec,
    NodeType,
)
from navgraph.runtime.assembler import GraphAssembler, build_navigation_graph

__version__ = "0.1.0"

__all__ = [
    "EdgeKind",
    "EdgeSpec",
    "GraphAssembler",
    "NavigationGraph",
    "NodeSpec",
    "NodeType",
    "build_navigation_graph",
]
