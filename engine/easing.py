import math
from typing import Callable

from data.spin_config import Easing

BACK_OVERSHOOT: float = 1.70158


def linear(t: float) -> float:
    return t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_out_quart(t: float) -> float:
    return 1 - (1 - t) ** 4


def ease_out_expo(t: float) -> float:
    if t >= 1:
        return 1.0
    return 1 - 2 ** (-10 * t)


def ease_out_back(t: float) -> float:
    # overshoots past 1 before settling; callers must not clamp mid-flight
    c3: float = BACK_OVERSHOOT + 1
    return 1 + c3 * (t - 1) ** 3 + BACK_OVERSHOOT * (t - 1) ** 2


def ease_out_elastic(t: float) -> float:
    if t <= 0 or t >= 1:
        return float(t >= 1)
    return 2 ** (-10 * t) * math.sin((t * 10 - 0.75) * (2 * math.pi / 3)) + 1


EASING_FUNCTIONS: dict[Easing, Callable[[float], float]] = {
    Easing.LINEAR: linear,
    Easing.EASE_OUT_QUAD: ease_out_quad,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.EASE_OUT_QUART: ease_out_quart,
    Easing.EASE_OUT_EXPO: ease_out_expo,
    Easing.EASE_OUT_BACK: ease_out_back,
    Easing.EASE_OUT_ELASTIC: ease_out_elastic,
}

OVERSHOOTING: frozenset[Easing] = frozenset({Easing.EASE_OUT_BACK, Easing.EASE_OUT_ELASTIC})


def ease(kind: Easing, progress: float) -> float:
    return EASING_FUNCTIONS[kind](progress)
