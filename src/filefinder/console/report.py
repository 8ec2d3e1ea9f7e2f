"""Console formatting for FileFinder search results."""

from __future__ import annotations

from decimal import Decimal

from ..discovery.engine import MatchResult, SearchStats


def format_number(value: float) -> str:
    """Render a float in plain positional notation.

    Whole numbers lose their fractional part (``2.0`` becomes ``2``) and small
    values are never written in scientific notation (``1.2e-05`` becomes
    ``0.000012``).
    """
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_match(result: MatchResult) -> str:
    line = f'{result.path} - Found in {format_number(result.elapsed)} seconds'
    size_mb = result.size_mb
    if size_mb is not None:
        line += f' - {format_number(size_mb)} MB'
    return line


def format_summary(stats: SearchStats) -> str:
    return f'\nTotal time: {format_number(stats.elapsed)} seconds\n{stats.count} results found\n'
