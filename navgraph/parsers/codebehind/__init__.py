"""Code-behind (C#) navigation call extraction."""

from navgraph.parsers.codebehind.extractor import (
    RawCall,
    extract_navigation_calls,
    iter_navigation_calls,
)

__all__ = ["RawCall", "extract_navigation_calls", "iter_navigation_calls"]
