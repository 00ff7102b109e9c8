"""Text scanners for markup files and their code-behind companions."""

from navgraph.parsers.codebehind.extractor import (
    RawCall,
    extract_navigation_calls,
    iter_navigation_calls,
)
from navgraph.parsers.markup.classifier import classify_markup

__all__ = [
    "RawCall",
    "classify_markup",
    "extract_navigation_calls",
    "iter_navigation_calls",
]
