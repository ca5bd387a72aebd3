from .geometry import (
    POINTER_ANGLE,
    TAU,
    Span,
    layout,
    normalize_angle,
    resolve,
    resolve_index,
    rotation_for_offset,
)
from .easing import EASING_FUNCTIONS, OVERSHOOTING, ease
from .selector import Target, pick_index, select_target
from .planner import SpinPlan, alignment_offset, plan_rotation
from .scheduler import FrameScheduler, ManualScheduler
from .driver import SpinEngine, SpinInProgressError, SpinState
from .simulation import SimulationReport, simulate

__all__ = [
    "POINTER_ANGLE",
    "TAU",
    "Span",
    "layout",
    "normalize_angle",
    "resolve",
    "resolve_index",
    "rotation_for_offset",
    "EASING_FUNCTIONS",
    "OVERSHOOTING",
    "ease",
    "Target",
    "pick_index",
    "select_target",
    "SpinPlan",
    "alignment_offset",
    "plan_rotation",
    "FrameScheduler",
    "ManualScheduler",
    "SpinEngine",
    "SpinInProgressError",
    "SpinState",
    "SimulationReport",
    "simulate",
]
