"""Configuration schema and validation for navgraph."""

from .schema import (
    DEFAULT_MAX_COMPANION_BYTES,
    MAX_MARKUP_FILES,
    NavigationConfig,
    ResolutionMode,
)

__all__ = [
    "DEFAULT_MAX_COMPANION_BYTES",
    "MAX_MARKUP_FILES",
    "NavigationConfig",
    "ResolutionMode",
]
