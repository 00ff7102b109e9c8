"""Resolve raw navigation targets to known nodes."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from navgraph.graph.schema import NodeSpec
from navgraph.parsers.codebehind.extractor import RawCall

logger = logging.getLogger("navgraph.graph.resolver")


def resolve_target(call: RawCall, nodes: Sequence[NodeSpec]) -> Optional[NodeSpec]:
    """Return the first node a navigation call refers to.

    A node matches when its label equals the call target exactly
    (case-sensitive), or when its source path contains the target as a
    substring, which covers URI targets such as ``Views/Page2.xaml``.

    Args:
        call: Extracted navigation call.
        nodes: Candidate nodes, searched in order.

    Returns:
        The first matching node, or None when the target is unknown.
    """
    for node in nodes:
        if node.label == call.target or call.target in node.source_path:
            return node

    logger.debug("Unresolved navigation target: %s (%s)", call.target, call.kind.value)
    return None


__all__ = ["resolve_target"]
