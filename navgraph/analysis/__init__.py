"""Queries over built navigation graphs."""

from navgraph.analysis.reachability import (
    ReachabilityAnalyzer,
    find_entry_views,
    find_unreachable_views,
    navigation_targets,
)

__all__ = [
    "ReachabilityAnalyzer",
    "find_entry_views",
    "find_unreachable_views",
    "navigation_targets",
]
