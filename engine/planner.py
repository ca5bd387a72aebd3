from dataclasses import dataclass

from data.spin_config import SpinConfig

from .geometry import TAU, normalize_angle, rotation_for_offset
from .selector import Rng, Target


@dataclass(frozen=True)
class SpinPlan:
    target: Target
    start_angle: float
    target_angle: float
    turns: float

    @property
    def travel(self) -> float:
        return self.target_angle - self.start_angle


def draw_turns(config: SpinConfig, rng: Rng) -> float:
    return config.min_turns + rng() * (config.max_turns - config.min_turns)


def alignment_offset(base_angle: float, landing_offset: float) -> float:
    # forward distance from base_angle to where the landing point sits under
    # the pointer, always in [0, 2pi)
    rest: float = rotation_for_offset(landing_offset)
    return normalize_angle(rest - base_angle)


def plan_rotation(current_angle: float, target: Target, config: SpinConfig, rng: Rng) -> SpinPlan:
    turns: float = draw_turns(config, rng)
    # travel lands in [turns, turns + 1) revolutions
    base: float = current_angle + turns * TAU
    final: float = base + alignment_offset(base, target.landing_offset)
    return SpinPlan(target, current_angle, final, turns)
