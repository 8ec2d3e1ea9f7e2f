"""Pytest configuration and fixtures for the test suite."""

import itertools
from pathlib import Path
from typing import Callable, Iterable

import pytest


def make_tree(root: Path, entries: Iterable[str]) -> Path:
    """Create files (and directories, for names ending in ``/``) under ``root``."""
    for entry in entries:
        path = root / entry
        if entry.endswith('/'):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text('x')
    return root


@pytest.fixture
def tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a directory tree inside a fresh ``search_root`` directory."""

    def _tree(*entries: str) -> Path:
        root = tmp_path / 'search_root'
        root.mkdir(exist_ok=True)
        return make_tree(root, entries)

    return _tree


@pytest.fixture
def fake_clock() -> Callable[[], float]:
    """Clock that advances by one second on every reading."""
    ticks = itertools.count()
    return lambda: float(next(ticks))
