import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Sequence

from data.segment import Segment

TAU: float = math.tau

# Top of the wheel, clockwise from 3 o'clock with the y axis pointing down.
# Spans start here and the pointer never moves from here.
POINTER_ANGLE: float = 1.5 * math.pi


@dataclass(frozen=True)
class Span:
    segment: Segment
    start: float
    end: float

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def middle(self) -> float:
        return self.start + self.width / 2.0


def normalize_angle(angle: float) -> float:
    a: float = angle % TAU
    # a tiny negative input rounds up to exactly TAU
    if a >= TAU:
        a = 0.0
    return a


def total_weight(segments: Sequence[Segment]) -> float:
    return float(sum(s.weight for s in segments))


def cumulative_offsets(segments: Sequence[Segment]) -> list[float]:
    """
    End offset of each span, measured clockwise from the pointer angle.
    The last entry is pinned to exactly TAU so no angle falls past the end.
    """
    total: float = total_weight(segments)
    if not segments or total <= 0:
        return []
    ends: list[float] = []
    running: float = 0.0
    for s in segments:
        running += s.weight
        ends.append(running / total * TAU)
    ends[-1] = TAU
    return ends


def layout(segments: Sequence[Segment]) -> list[Span]:
    ends: list[float] = cumulative_offsets(segments)
    spans: list[Span] = []
    start: float = 0.0
    for segment, end in zip(segments, ends):
        spans.append(Span(segment, POINTER_ANGLE + start, POINTER_ANGLE + end))
        start = end
    return spans


def index_at_offset(ends: Sequence[float], offset: float) -> int | None:
    # spans are half-open [start, end): a boundary belongs to the later span
    if not ends:
        return None
    idx: int = bisect_right(ends, normalize_angle(offset))
    return min(idx, len(ends) - 1)


def rotation_for_offset(offset: float) -> float:
    """Rest rotation that puts the given layout offset under the pointer."""
    return normalize_angle(-offset)


def offset_under_pointer(rotation: float) -> float:
    # wheel-frame angle under the pointer is POINTER_ANGLE - rotation
    return normalize_angle(-rotation)


def resolve_index(segments: Sequence[Segment], rotation: float) -> int | None:
    return index_at_offset(cumulative_offsets(segments), offset_under_pointer(rotation))


def resolve(segments: Sequence[Segment], rotation: float) -> Segment | None:
    idx: int | None = resolve_index(segments, rotation)
    if idx is None:
        return None
    return segments[idx]
