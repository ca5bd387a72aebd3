from typing import Callable, Iterable

import pytest

from data import Segment


def _segments(weights: Iterable[float]) -> list[Segment]:
    return [
        Segment(id=f"seg_{i}", label=f"Option {i + 1}", color="#FF6384", weight=w)
        for i, w in enumerate(weights)
    ]


def _sequence(values: Iterable[float]) -> Callable[[], float]:
    it = iter(values)
    return lambda: next(it)


@pytest.fixture
def make_segments() -> Callable[[Iterable[float]], list[Segment]]:
    return _segments


@pytest.fixture
def seq_rng() -> Callable[[Iterable[float]], Callable[[], float]]:
    """RNG stub returning the given draws in order."""
    return _sequence
