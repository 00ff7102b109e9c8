"""Extract navigation calls from C# code-behind text.

Two regex patterns are scanned independently over the whole text:

* construct-and-show: ``new LoginWindow().Show()`` / ``.ShowDialog()``
* navigate-by-URI: ``NavigationService.Navigate(new Uri("Views/Page2.xaml"))``

Patterns are compiled once at module level and applied with ``finditer``,
so every call starts a fresh scan and no matcher state leaks between
invocations.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, NamedTuple, Optional

from navgraph.graph.schema import EdgeKind

logger = logging.getLogger("navgraph.parsers.codebehind.extractor")


SHOW_RE = re.compile(
    r"new\s+(?P<type>\w+)\s*\(\s*\)\s*\.\s*(?P<method>ShowDialog|Show)\s*\(\s*\)"
)

NAVIGATE_RE = re.compile(
    r"NavigationService\.Navigate\s*\(\s*new\s+Uri\s*\(\s*[\"'](?P<uri>[^\"']+)[\"']"
)


class RawCall(NamedTuple):
    """Navigation call as written in source, before target resolution."""

    target: str
    kind: EdgeKind


def iter_navigation_calls(text: Optional[str]) -> Iterator[RawCall]:
    """Yield navigation calls found in ``text``.

    All construct-and-show matches are yielded first, left to right,
    followed by all navigate-by-URI matches. Text that matches neither
    pattern yields nothing.
    """
    if not text:
        return

    for match in SHOW_RE.finditer(text):
        kind = EdgeKind.SHOW_DIALOG if match.group("method") == "ShowDialog" else EdgeKind.SHOW
        yield RawCall(target=match.group("type"), kind=kind)

    for match in NAVIGATE_RE.finditer(text):
        yield RawCall(target=match.group("uri"), kind=EdgeKind.NAVIGATE)


def extract_navigation_calls(text: Optional[str]) -> List[RawCall]:
    """Return all navigation calls in ``text`` as a list.

    Args:
        text: Code-behind source, or None when no companion file exists.

    Returns:
        List[RawCall]: Calls in scan order; empty for None or unmatched text.
    """
    calls = list(iter_navigation_calls(text))
    logger.debug("Extracted %d navigation call(s)", len(calls))
    return calls


__all__ = [
    "NAVIGATE_RE",
    "SHOW_RE",
    "RawCall",
    "extract_navigation_calls",
    "iter_navigation_calls",
]
