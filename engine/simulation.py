"""
Headless Monte Carlo runs of the full spin pipeline.

Each round goes through a real SpinEngine on a virtual clock, so the
winner counted is the one read back from the settled angle, not the one
the selector picked.
"""

import random
from dataclasses import dataclass, field
from typing import Sequence

from data.results import SpinResult
from data.segment import Segment
from data.spin_config import SpinConfig

from .driver import SpinEngine
from .geometry import total_weight
from .scheduler import ManualScheduler


@dataclass
class SimulationReport:
    rounds: int
    observed: dict[str, int]
    expected: dict[str, float]
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def chi_square(self) -> float:
        stat: float = 0.0
        for seg_id, exp in self.expected.items():
            if exp > 0:
                stat += (self.observed.get(seg_id, 0) - exp) ** 2 / exp
        return stat

    @property
    def degrees_of_freedom(self) -> int:
        return max(0, len(self.expected) - 1)

    def frequency(self, segment_id: str) -> float:
        return self.observed.get(segment_id, 0) / self.rounds if self.rounds else 0.0

    def to_dict(self) -> dict:
        return {
            "rounds": self.rounds,
            "chi_square": round(self.chi_square, 4),
            "degrees_of_freedom": self.degrees_of_freedom,
            "segments": [
                {
                    "id": seg_id,
                    "label": self.labels.get(seg_id, ""),
                    "observed": self.observed.get(seg_id, 0),
                    "expected": round(exp, 2),
                    "frequency": round(self.frequency(seg_id), 4),
                }
                for seg_id, exp in self.expected.items()
            ],
        }


def simulate(
    segments: Sequence[Segment],
    config: SpinConfig | None = None,
    rounds: int = 10_000,
    seed: int | None = 42,
) -> SimulationReport:
    cfg: SpinConfig = config or SpinConfig()
    rng: random.Random = random.Random(seed)
    scheduler: ManualScheduler = ManualScheduler()
    results: list[SpinResult] = []
    engine: SpinEngine = SpinEngine(scheduler, rng=rng.random, config=cfg, on_complete=results.append)

    observed: dict[str, int] = {s.id: 0 for s in segments}
    for _ in range(rounds):
        if engine.spin(segments) is None:
            break
        # completion is keyed on elapsed time, one late frame settles the spin
        scheduler.advance(cfg.duration_ms)
    for r in results:
        observed[r.segment.id] = observed.get(r.segment.id, 0) + 1

    total: float = total_weight(segments)
    played: int = len(results)
    expected: dict[str, float] = {
        s.id: (s.weight / total * played if total > 0 else 0.0) for s in segments
    }
    return SimulationReport(
        rounds=played,
        observed=observed,
        expected=expected,
        labels={s.id: s.label for s in segments},
    )
