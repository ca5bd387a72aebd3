from dataclasses import dataclass
from typing import Callable, Sequence

from data.constants import LANDING_MARGIN
from data.segment import Segment

from .geometry import cumulative_offsets

Rng = Callable[[], float]


@dataclass(frozen=True)
class Target:
    segment_index: int
    # clockwise from the start of the layout, in [0, 2pi)
    landing_offset: float


def pick_index(segments: Sequence[Segment], draw: float) -> int | None:
    """
    Inverse-CDF walk over the weights: the first segment whose cumulative
    weight reaches ``draw * total`` wins. The last segment closes the range.
    """
    total: float = float(sum(s.weight for s in segments))
    if not segments or total <= 0:
        return None
    r: float = draw * total
    cumulative: float = 0.0
    for i, s in enumerate(segments):
        cumulative += s.weight
        if r <= cumulative:
            return i
    return len(segments) - 1


def select_target(segments: Sequence[Segment], rng: Rng) -> Target | None:
    idx: int | None = pick_index(segments, rng())
    if idx is None:
        return None
    ends: list[float] = cumulative_offsets(segments)
    start: float = ends[idx - 1] if idx > 0 else 0.0
    width: float = ends[idx] - start
    inner: float = 1.0 - 2 * LANDING_MARGIN
    landing: float = start + (LANDING_MARGIN + rng() * inner) * width
    return Target(idx, landing)
