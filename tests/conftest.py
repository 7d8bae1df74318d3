"""
Pytest fixtures for PSR tests.
"""

from pathlib import Path
from typing import List

import pytest


class FixedRandom:
    """Stand-in random source returning scripted draws, clamped to range."""

    def __init__(self, *draws: int) -> None:
        self._draws = list(draws)
        self.calls: List[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        draw = self._draws.pop(0) if self._draws else 0
        return min(max(draw, 0), stop - 1)


class MaxRandom:
    """Always draws the largest value in range."""

    def randrange(self, stop: int) -> int:
        return stop - 1


@pytest.fixture
def max_random() -> MaxRandom:
    return MaxRandom()


@pytest.fixture
def fixed_random():
    """Factory for random sources with scripted draws."""
    return FixedRandom


@pytest.fixture
def min_random() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def grammar_file(tmp_path: Path) -> Path:
    """A small grammar written to disk."""
    path = tmp_path / "greeting.psr"
    path.write_text("* greeting\nHello, [^name]!\n\n* name\nworld\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path, grammar_file: Path) -> Path:
    path = tmp_path / "psr.toml"
    path.write_text(
        '[psr]\nfiles = ["greeting.psr"]\ncount = 2\nseed = 7\n\n[web]\nport = 9000\n',
        encoding="utf-8",
    )
    return path
