"""Logging utilities for FileFinder.

``configure_logging`` routes diagnostic messages through ``rich`` on
stderr, keeping them apart from search results on stdout.  ``CSVLogger``
records every match of a run to a CSV file, writing each row immediately.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

from ..discovery.engine import MatchResult
from ..query.builder import SearchQuery

FIELDNAMES = (
    'run_id',
    'query_root',
    'query_name',
    'query_extensions',
    'path',
    'elapsed_s',
    'size_bytes',
)


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Install a ``RichHandler`` on the ``filefinder`` logger."""
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger('filefinder')
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)
    logger.setLevel(level)


class CSVLogger:
    def __init__(self, path: Path):
        self.path = path
        self.file = path.open('a', newline='', encoding='utf-8')
        self.writer = csv.DictWriter(self.file, fieldnames=FIELDNAMES)
        if self.file.tell() == 0:
            self.writer.writeheader()

    def log_match(self, result: MatchResult, query: SearchQuery, run_id: str) -> None:
        record = {
            'run_id': run_id,
            'query_root': query.root,
            'query_name': query.name_fragment,
            'query_extensions': ' '.join(sorted(query.extensions)),
            'path': result.path,
            'elapsed_s': result.elapsed,
            'size_bytes': '' if result.size_bytes is None else result.size_bytes,
        }
        self.writer.writerow(record)
        self.file.flush()

    def close(self) -> None:
        self.file.close()

    def __enter__(self) -> 'CSVLogger':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
