"""Path helpers for markup files and their code-behind companions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger("navgraph.utils.path_utils")

MARKUP_SUFFIX = ".xaml"


def canonical_path(path: Union[Path, str]) -> str:
    """Return the canonical identity of a file.

    The path is made absolute and normalized, then rendered with forward
    slashes so ids compare equal across platforms.

    Examples:
        >>> canonical_path("/workspace/app/../app/Views/Main.xaml")
        '/workspace/app/Views/Main.xaml'
    """
    return Path(path).resolve().as_posix()


def markup_label(path: Union[Path, str]) -> str:
    """Display name of a markup file: its name without the ``.xaml`` suffix."""
    name = Path(path).name
    if name.lower().endswith(MARKUP_SUFFIX):
        return name[: -len(MARKUP_SUFFIX)]
    return Path(name).stem


def companion_path(markup_path: Union[Path, str], suffix: str = ".cs") -> Path:
    """Return the code-behind path paired with a markup file.

    >>> companion_path("/app/MainWindow.xaml").as_posix()
    '/app/MainWindow.xaml.cs'
    """
    markup_path = Path(markup_path)
    return markup_path.with_name(markup_path.name + suffix)


def read_companion(path: Union[Path, str], max_bytes: int = 0) -> Optional[str]:
    """Read a code-behind file, returning None when it cannot be used.

    Missing files, unreadable files and files larger than ``max_bytes``
    (when non-zero) all read as None; callers treat that as "no calls".

    Args:
        path: Companion file path.
        max_bytes: Size limit in bytes, 0 for unlimited.

    Returns:
        Decoded text, or None.
    """
    path = Path(path)
    try:
        if not path.is_file():
            logger.debug("No companion file at %s", path)
            return None
        size = path.stat().st_size
        if max_bytes and size > max_bytes:
            logger.info(
                "Skipping companion %s: %d bytes exceeds limit of %d",
                path,
                size,
                max_bytes,
            )
            return None
        content = path.read_bytes()
    except OSError as exc:
        logger.debug("Failed to read companion %s: %s", path, exc)
        return None

    return content.decode("utf-8-sig", errors="ignore")


__all__ = [
    "MARKUP_SUFFIX",
    "canonical_path",
    "companion_path",
    "markup_label",
    "read_companion",
]
