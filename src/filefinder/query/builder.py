"""Query building for FileFinder.

Turns the three raw strings read from the console (search root, name
fragment and a whitespace separated list of extensions) into an immutable
``SearchQuery``.  Name and extensions are lowercased here so that the walker
only ever compares lowercase text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet

logger = logging.getLogger(__name__)


class QueryError(ValueError):
    """Raised when the collected input cannot form a valid query."""


@dataclass(frozen=True)
class SearchQuery:
    root: str
    name_fragment: str
    extensions: FrozenSet[str]

    @property
    def name_only(self) -> bool:
        return not self.extensions

    @property
    def extensions_only(self) -> bool:
        return not self.name_fragment


def parse_extensions(text: str) -> FrozenSet[str]:
    """Split ``text`` on whitespace into a set of lowercase extension tokens.

    Tokens are kept verbatim otherwise: a leading dot is neither stripped nor
    added, so ``.txt`` will never equal the extension ``txt`` of a file.
    """
    return frozenset(word.lower() for word in text.split())


def build_query(root: str, name: str, extensions_text: str) -> SearchQuery:
    """Validate and normalize raw console input.

    Raises:
        QueryError: if the root is empty, or if both the name and the
            extension list are empty.
    """
    root = root.strip()
    name = name.strip().lower()
    extensions = parse_extensions(extensions_text)

    if not root:
        raise QueryError('You must enter the path to search')
    if not name and not extensions:
        raise QueryError('You must enter either a filename or extensions')

    query = SearchQuery(root=root, name_fragment=name, extensions=extensions)
    logger.debug('Built query %r', query)
    return query
