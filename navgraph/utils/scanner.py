"""Deterministic markup file discovery using scandir and generators."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Generator, Iterable, List, NamedTuple, Optional, Set, Tuple, Union

from navgraph.config.schema import NavigationConfig

logger = logging.getLogger("navgraph.utils.scanner")

# Version control metadata, IDE state and MSBuild output directories.
DEFAULT_IGNORES = [".git", ".svn", ".hg", ".vs", "bin", "obj", "node_modules"]


class MarkupFile(NamedTuple):
    """A candidate markup file with its content."""

    path: Path
    text: str


def load_gitignore_patterns(root_path: Path) -> List[str]:
    """Load patterns from .gitignore in the root path."""
    gitignore = root_path / ".gitignore"
    patterns = []
    if gitignore.is_file():
        try:
            with open(gitignore, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith(("#", "!")):
                        patterns.append(line)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to read .gitignore at %s: %s", gitignore, exc)
    return patterns


def _is_ignored(path: Path, is_dir: bool, root_path: Path, ignore_patterns: List[str]) -> bool:
    """Check if path matches any ignore pattern.

    This is a simplified take on gitignore matching: each pattern is
    globbed against the root-relative path and against any trailing part.
    """
    str_path = path.relative_to(root_path).as_posix()

    for pattern in ignore_patterns:
        if pattern.endswith("/"):
            if not is_dir:
                continue
            pattern = pattern.rstrip("/")
        pattern = pattern.lstrip("/")

        if (
            fnmatch.fnmatch(str_path, pattern)
            or fnmatch.fnmatch(str_path, f"*/{pattern}")
            or fnmatch.fnmatch(path.name, pattern)
        ):
            return True

    return False


def scan_files(
    root_path: Path,
    patterns: Iterable[str],
    ignore_patterns: Optional[List[str]] = None,
    recursive: bool = True,
) -> Generator[Path, None, None]:
    """Scan files matching patterns, respecting ignores.

    Entries are visited depth-first with each directory's entries sorted
    by name, so the yield order is stable for an unchanged tree. Within a
    directory, files come before subdirectories.
    Each physical directory is listed at most once, so symlink loops end.

    Args:
        root_path: Root directory to scan.
        patterns: Glob patterns to include (e.g. ['*.xaml']).
        ignore_patterns: Glob patterns to ignore.
        recursive: Whether to scan recursively.

    Yields:
        Path objects for matching files.
    """
    root_path = root_path.resolve()
    patterns = list(patterns)
    ignores = (ignore_patterns or []) + DEFAULT_IGNORES

    stack = [root_path]
    # (st_dev, st_ino) of listed directories; symlinked cycles are entered once.
    visited: Set[Tuple[int, int]] = set()

    while stack:
        current_dir = stack.pop()

        try:
            stat = current_dir.stat()
        except OSError as exc:
            logger.debug("Cannot stat %s: %s", current_dir, exc)
            continue
        dir_key = (stat.st_dev, stat.st_ino)
        if dir_key in visited:
            logger.debug("Skipping already visited directory %s", current_dir)
            continue
        visited.add(dir_key)

        try:
            entries = sorted(os.scandir(current_dir), key=lambda e: e.name)
        except OSError as exc:
            logger.debug("Cannot list %s: %s", current_dir, exc)
            continue

        dirs = []
        files = []

        for entry in entries:
            path = Path(entry.path)
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue

            if _is_ignored(path, is_dir, root_path, ignores):
                continue

            if is_dir:
                if recursive:
                    dirs.append(path)
            else:
                files.append(path)

        # Reversed so the alphabetically first directory is popped first.
        stack.extend(reversed(dirs))

        for file_path in files:
            str_path = file_path.relative_to(root_path).as_posix()
            for pattern in patterns:
                if fnmatch.fnmatch(file_path.name, pattern) or fnmatch.fnmatch(
                    str_path, pattern
                ):
                    yield file_path
                    break


def iter_markup_files(
    root_path: Union[Path, str],
    config: Optional[NavigationConfig] = None,
) -> Generator[MarkupFile, None, None]:
    """Yield candidate markup files under ``root_path`` with their text.

    Markup files that cannot be read are skipped with a warning; they do
    not count against the build's file cap.
    """
    config = config or NavigationConfig.default()
    root_path = Path(root_path)

    ignores = list(config.ignore_patterns)
    if config.respect_gitignore:
        ignores.extend(load_gitignore_patterns(root_path))

    for path in scan_files(root_path, config.markup_patterns, ignores):
        try:
            text = path.read_bytes().decode("utf-8-sig", errors="ignore")
        except OSError as exc:
            logger.warning("Skipping unreadable markup file %s: %s", path, exc)
            continue
        yield MarkupFile(path=path, text=text)


__all__ = [
    "DEFAULT_IGNORES",
    "MarkupFile",
    "iter_markup_files",
    "load_gitignore_patterns",
    "scan_files",
]
