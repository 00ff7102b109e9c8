"""Configuration schema for navigation graph builds.

Pydantic validates configuration up front so a bad value fails with a
clear message before any file is scanned.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

# Hard upper bound on markup files per build, regardless of configuration.
MAX_MARKUP_FILES = 100

DEFAULT_MAX_COMPANION_BYTES = 1024 * 1024


class ResolutionMode(str, Enum):
    """When navigation targets are resolved against the node set.

    SINGLE_PASS resolves each file's calls right after its own node is
    added, so only earlier files (and the file itself) are visible.
    TWO_PASS collects every node first and then resolves all calls.
    """

    SINGLE_PASS = "single_pass"
    TWO_PASS = "two_pass"


class NavigationConfig(BaseModel):
    """Options controlling file discovery and graph assembly.

    Attributes:
        markup_patterns: Glob patterns selecting markup files.
        companion_suffix: Suffix appended to a markup path to find its
            code-behind file.
        ignore_patterns: Extra glob patterns to skip during discovery.
        respect_gitignore: Whether to honor the root's .gitignore.
        max_files: Markup file cap; never above MAX_MARKUP_FILES.
        max_companion_bytes: Companion files larger than this are skipped
            (0 = unlimited).
        resolution: Target resolution mode.
    """

    markup_patterns: List[str] = Field(default_factory=lambda: ["*.xaml"])
    companion_suffix: str = ".cs"
    ignore_patterns: List[str] = Field(default_factory=list)
    respect_gitignore: bool = True
    max_files: int = Field(default=MAX_MARKUP_FILES, ge=1, le=MAX_MARKUP_FILES)
    max_companion_bytes: int = Field(default=DEFAULT_MAX_COMPANION_BYTES, ge=0)
    resolution: ResolutionMode = ResolutionMode.SINGLE_PASS

    model_config = {"extra": "forbid"}

    @field_validator("markup_patterns")
    @classmethod
    def validate_patterns(cls, v: List[str]) -> List[str]:
        """Require at least one non-empty pattern."""
        patterns = [p for p in v if p and p.strip()]
        if not patterns:
            raise ValueError("markup_patterns must contain at least one pattern")
        return patterns

    @field_validator("companion_suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"Invalid companion suffix {v!r}")
        return v

    @classmethod
    def default(cls) -> "NavigationConfig":
        return cls()
