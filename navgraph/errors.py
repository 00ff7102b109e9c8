"""Exception hierarchy for navgraph.

None of these are raised by a normal build: the assembler degrades to a
best-effort graph instead. They surface when callers hand the library
inconsistent data or a broken configuration.
"""


class NavGraphError(Exception):
    """Base class for navgraph errors."""
    pass


class GraphIntegrityError(NavGraphError, ValueError):
    """Graph data violates node-id uniqueness or references unknown nodes.

    Raised when a NavigationGraph is constructed (or loaded from disk)
    from nodes and edges that do not belong together.
    """
    pass


class ConfigError(NavGraphError, ValueError):
    """Configuration source could not be parsed or failed validation."""
    pass
