"""Graph assembly and configuration loading."""

from navgraph.runtime.assembler import (
    CompanionReader,
    GraphAssembler,
    build_navigation_graph,
)
from navgraph.runtime.config_loader import load_navigation_config

__all__ = [
    "CompanionReader",
    "GraphAssembler",
    "build_navigation_graph",
    "load_navigation_config",
]
