import logging
import random
from dataclasses import replace
from enum import Enum
from typing import Callable, Sequence

from data.results import SpinResult
from data.segment import Segment
from data.spin_config import SpinConfig

from .easing import ease
from .geometry import normalize_angle, resolve, total_weight
from .planner import SpinPlan, plan_rotation
from .scheduler import FrameScheduler
from .selector import Rng, select_target

logger = logging.getLogger("spinwheel.engine")

StartCallback = Callable[[SpinPlan], None]
FrameListener = Callable[[float, float], None]
CompleteCallback = Callable[[SpinResult], None]


class SpinState(Enum):
    IDLE = "idle"
    SPINNING = "spinning"


class SpinInProgressError(RuntimeError):
    pass


class SpinEngine:
    """
    Drives one wheel through Idle -> Spinning -> Idle.

    Time comes only from the injected scheduler and randomness only from
    ``rng``. While spinning, every frame reports ``(angle, progress)`` to
    ``on_frame``; once elapsed time reaches the configured duration the
    rotation is normalized, the winner is read back from the final angle and
    ``on_complete`` fires exactly once.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        rng: Rng | None = None,
        config: SpinConfig | None = None,
        on_start: StartCallback | None = None,
        on_frame: FrameListener | None = None,
        on_complete: CompleteCallback | None = None,
    ) -> None:
        self.scheduler: FrameScheduler = scheduler
        self.rng: Rng = rng or random.random
        self.config: SpinConfig = config or SpinConfig()
        self.on_start: StartCallback | None = on_start
        self.on_frame: FrameListener | None = on_frame
        self.on_complete: CompleteCallback | None = on_complete

        self.rotation: float = 0.0
        self.state: SpinState = SpinState.IDLE
        self.last_result: SpinResult | None = None

        self._plan: SpinPlan | None = None
        self._segments: tuple[Segment, ...] = ()
        self._active_config: SpinConfig | None = None
        self._started_at: float = 0.0
        self._frame_handle: int | None = None

    @property
    def is_spinning(self) -> bool:
        return self.state is SpinState.SPINNING

    @property
    def plan(self) -> SpinPlan | None:
        return self._plan

    def configure(self, **changes) -> SpinConfig:
        if self.is_spinning:
            raise SpinInProgressError("spin configuration cannot change mid-spin")
        self.config = replace(self.config, **changes)
        return self.config

    def spin(self, segments: Sequence[Segment], config: SpinConfig | None = None) -> SpinPlan | None:
        if self.is_spinning:
            logger.debug("spin rejected: already spinning")
            return None
        if not segments:
            logger.debug("spin rejected: wheel has no segments")
            return None
        if total_weight(segments) <= 0:
            logger.warning("spin rejected: wheel has no positive weight")
            return None

        cfg: SpinConfig = config or self.config
        target = select_target(segments, self.rng)
        if target is None:
            return None
        plan: SpinPlan = plan_rotation(self.rotation, target, cfg, self.rng)

        self.state = SpinState.SPINNING
        self._plan = plan
        self._segments = tuple(segments)
        self._active_config = cfg
        self._started_at = self.scheduler.now()
        self._frame_handle = self.scheduler.request_frame(self._on_frame)
        logger.debug(
            "spin started: segment %d, %.2f turns, %.4f -> %.4f rad over %d ms",
            target.segment_index,
            plan.turns,
            plan.start_angle,
            plan.target_angle,
            cfg.duration_ms,
        )
        if self.on_start is not None:
            self.on_start(plan)
        return plan

    def stop(self) -> None:
        if not self.is_spinning:
            return
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None
        self.rotation = normalize_angle(self.rotation)
        self._reset()
        logger.debug("spin stopped at %.4f rad", self.rotation)

    def _reset(self) -> None:
        self.state = SpinState.IDLE
        self._plan = None
        self._segments = ()
        self._active_config = None

    def _on_frame(self, timestamp: float) -> None:
        # a frame delivered after stop() or for an earlier spin is ignored
        if not self.is_spinning or self._plan is None or self._active_config is None:
            return
        self._frame_handle = None
        plan: SpinPlan = self._plan
        cfg: SpinConfig = self._active_config

        elapsed: float = timestamp - self._started_at
        progress: float = min(max(elapsed / cfg.duration_ms, 0.0), 1.0)
        if progress >= 1.0:
            self.rotation = plan.target_angle
        else:
            self.rotation = plan.start_angle + plan.travel * ease(cfg.easing, progress)

        if self.on_frame is not None:
            self.on_frame(self.rotation, progress)
        # the frame listener may have stopped the spin
        if not self.is_spinning or self._plan is not plan:
            return

        if progress < 1.0:
            self._frame_handle = self.scheduler.request_frame(self._on_frame)
            return
        self._finish(cfg)

    def _finish(self, cfg: SpinConfig) -> None:
        self.rotation = normalize_angle(self.rotation)
        segments: tuple[Segment, ...] = self._segments
        self._reset()

        winner: Segment | None = resolve(segments, self.rotation)
        if winner is None:
            return
        result: SpinResult = SpinResult(winner, self.rotation, cfg.duration_ms)
        self.last_result = result
        logger.debug("spin finished on %r at %.4f rad", winner.label, self.rotation)
        if self.on_complete is not None:
            self.on_complete(result)
