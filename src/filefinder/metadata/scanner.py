"""Metadata scanning for FileFinder.

Reads the size of matched entries.  Sizes are reported in decimal
megabytes, so a 2,000,000 byte file is ``2`` MB.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Divisor turning a size in bytes into (decimal) megabytes
FILE_SIZE_BASE = 1e6


def get_size_bytes(path: Union[str, os.PathLike]) -> Optional[int]:
    """Return the size of ``path`` in bytes, or ``None`` if it cannot be read.

    Symlinks are followed, so a dangling link has no size.
    """
    try:
        return os.stat(path).st_size
    except OSError as exc:
        logger.debug('Cannot read metadata of %s: %s', path, exc)
        return None


def to_megabytes(size_bytes: int) -> float:
    return size_bytes / FILE_SIZE_BASE
