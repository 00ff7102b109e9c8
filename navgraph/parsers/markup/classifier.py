"""Classify XAML markup files into view types.

Classification is substring based rather than a structural parse, since
markup being edited is often not well-formed XML.
"""

from __future__ import annotations

import logging
from typing import Tuple

from navgraph.graph.schema import NodeType

logger = logging.getLogger("navgraph.parsers.markup.classifier")

# Checked in order; first match wins. The bare "Dialog" marker can fire on
# comments or resource names, which is tolerated.
CLASSIFICATION_RULES: Tuple[Tuple[str, NodeType], ...] = (
    ("<Window", NodeType.WINDOW),
    ("<Page", NodeType.PAGE),
    ("Dialog", NodeType.DIALOG),
    ("<UserControl", NodeType.USER_CONTROL),
)

DEFAULT_NODE_TYPE = NodeType.USER_CONTROL


def classify_markup(text: str) -> NodeType:
    """Return the view type for a markup file's raw text.

    Args:
        text: Raw markup content; may be empty or malformed.

    Returns:
        NodeType: Matched type, or UserControl when nothing matches.
    """
    for marker, node_type in CLASSIFICATION_RULES:
        if marker in text:
            return node_type
    return DEFAULT_NODE_TYPE


__all__ = ["CLASSIFICATION_RULES", "DEFAULT_NODE_TYPE", "classify_markup"]
