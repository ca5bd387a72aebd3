from collections import deque
from dataclasses import dataclass
from typing import Iterator, Sequence

from .constants import HISTORY_LIMIT, RECENT_RESULTS
from .results import SpinResult
from .segment import Segment


@dataclass(frozen=True)
class SegmentTally:
    segment_id: str
    label: str
    color: str
    count: int
    percentage: float


class SpinHistory:
    """
    In-process log of completed spins, newest first. Storage of spin
    records belongs to whoever owns the wheel; this only keeps what the
    current session has seen.
    """

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        self._results: deque[SpinResult] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[SpinResult]:
        return iter(self._results)

    def record(self, result: SpinResult) -> None:
        self._results.appendleft(result)

    def clear(self) -> None:
        self._results.clear()

    def recent(self, limit: int = RECENT_RESULTS) -> list[SpinResult]:
        return list(self._results)[:limit]

    def counts(self) -> dict[str, int]:
        totals: dict[str, int] = {}
        for r in self._results:
            totals[r.segment.id] = totals.get(r.segment.id, 0) + 1
        return totals

    def distribution(self, segments: Sequence[Segment]) -> list[SegmentTally]:
        totals: dict[str, int] = self.counts()
        spins: int = sum(totals.values())
        tallies: list[SegmentTally] = []
        for s in segments:
            count: int = totals.get(s.id, 0)
            pct: float = round(count / spins * 100, 1) if spins else 0.0
            tallies.append(SegmentTally(s.id, s.label, s.color, count, pct))
        return tallies
