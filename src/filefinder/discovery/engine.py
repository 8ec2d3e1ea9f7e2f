"""Discovery engine for FileFinder.

Walks a directory tree depth first and yields every entry that matches a
``SearchQuery``.  Instead of recursing, the walker keeps an explicit stack
of pending directory listings, so very deep trees cannot exhaust the
interpreter's call stack.  Entries are still visited in the same pre-order a
recursive walk would produce: a directory is reported before its contents,
and its contents before its later siblings.

Directories that cannot be listed are skipped silently together with their
whole subtree.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from ..metadata.scanner import get_size_bytes, to_megabytes
from ..query.builder import SearchQuery

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    path: str
    elapsed: float
    size_bytes: Optional[int] = None

    @property
    def size_mb(self) -> Optional[float]:
        if self.size_bytes is None:
            return None
        return to_megabytes(self.size_bytes)


@dataclass
class SearchStats:
    """Match counter and timer for a single search.

    Created by the caller and handed to exactly one ``search`` call, which
    increments ``count`` for every match it yields.
    """

    clock: Callable[[], float] = time.perf_counter
    count: int = 0
    started: float = field(init=False)

    def __post_init__(self) -> None:
        self.started = self.clock()

    @property
    def elapsed(self) -> float:
        return self.clock() - self.started


def split_name(name: str) -> Tuple[str, str]:
    """Split an entry name into its lowercase stem and extension.

    The extension is whatever follows the last dot, without the dot.  A dot
    in first position does not count, so ``.bashrc`` has no extension while
    ``..a`` has the stem ``.`` and the extension ``a``.
    """
    dot = name.rfind('.')
    if dot <= 0 or name == '..':
        return name.lower(), ''
    return name[:dot].lower(), name[dot + 1:].lower()


def matches(query: SearchQuery, stem: str, ext: str, is_dir: bool, is_file: bool) -> bool:
    """Apply the match rules to a single filesystem entry.

    * Directories match by name only, and only when no extensions were given.
    * With no name, files match when their extension is in the set.
    * Otherwise regular files must contain the name and, if extensions were
      given, also carry one of them.
    """
    if is_dir:
        return query.name_only and query.name_fragment in stem
    if query.extensions_only:
        return ext in query.extensions
    if is_file and query.name_fragment in stem:
        return query.name_only or ext in query.extensions
    return False


def _list_dir(path: str) -> Optional[List[os.DirEntry]]:
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as exc:
        logger.debug('Skipping unreadable directory %s: %s', path, exc)
        return None


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def search(query: SearchQuery, stats: SearchStats) -> Iterator[MatchResult]:
    """Yield a ``MatchResult`` for every entry under ``query.root`` that matches.

    Args:
        query: The validated search query.
        stats: Accumulator owned by the caller; its ``count`` is incremented
            once per yielded result and its clock timestamps each match.

    Yields:
        Matches as they are discovered, with absolute paths.

    Symlinked directories are followed.  No error raised while listing a
    directory or reading a size aborts the search.
    """
    root = os.path.abspath(os.path.expanduser(query.root))
    entries = _list_dir(root)
    if entries is None:
        return
    pending: List[Iterator[os.DirEntry]] = [iter(entries)]
    while pending:
        entry = next(pending[-1], None)
        if entry is None:
            pending.pop()
            continue

        stem, ext = split_name(entry.name)
        is_dir = _is_dir(entry)
        if matches(query, stem, ext, is_dir, not is_dir and _is_file(entry)):
            stats.count += 1
            yield MatchResult(
                path=entry.path,
                elapsed=stats.elapsed,
                size_bytes=get_size_bytes(entry.path),
            )

        if is_dir:
            children = _list_dir(entry.path)
            if children is not None:
                pending.append(iter(children))
