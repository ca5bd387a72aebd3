from typing import Callable, Protocol

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """
    Per-frame tick source. Timestamps are wall-clock milliseconds from an
    arbitrary origin; ``now`` and the value passed to callbacks share it.
    """

    def now(self) -> float: ...

    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...


class ManualScheduler:
    """Virtual clock for tests and headless runs; frames fire on ``advance``."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now: float = start_ms
        self._next_handle: int = 1
        self._pending: dict[int, FrameCallback] = {}

    def now(self) -> float:
        return self._now

    def request_frame(self, callback: FrameCallback) -> int:
        handle: int = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def advance(self, ms: float) -> int:
        """Move the clock forward and deliver one frame to every waiting callback."""
        self._now += ms
        due: dict[int, FrameCallback] = self._pending
        self._pending = {}
        for callback in due.values():
            callback(self._now)
        return len(due)

    def run_until_idle(self, frame_ms: float = 16.0, max_frames: int = 100_000) -> int:
        frames: int = 0
        while self._pending and frames < max_frames:
            self.advance(frame_ms)
            frames += 1
        return frames
