from PySide6 import QtCore

from engine.scheduler import FrameCallback

FRAME_INTERVAL_MS = 16


class QtFrameScheduler(QtCore.QObject):
    """Delivers engine frames from the Qt event loop with wall-clock timestamps."""

    def __init__(self, parent: QtCore.QObject | None = None, interval_ms: int = FRAME_INTERVAL_MS) -> None:
        super().__init__(parent)
        self.interval_ms: int = interval_ms
        self._clock: QtCore.QElapsedTimer = QtCore.QElapsedTimer()
        self._clock.start()
        self._next_handle: int = 1
        self._timers: dict[int, QtCore.QTimer] = {}

    def now(self) -> float:
        return self._clock.nsecsElapsed() / 1_000_000.0

    def request_frame(self, callback: FrameCallback) -> int:
        handle: int = self._next_handle
        self._next_handle += 1
        timer: QtCore.QTimer = QtCore.QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(self.interval_ms)
        timer.timeout.connect(lambda h=handle, cb=callback: self._fire(h, cb))
        self._timers[handle] = timer
        timer.start()
        return handle

    def cancel_frame(self, handle: int) -> None:
        timer: QtCore.QTimer | None = self._timers.pop(handle, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def _fire(self, handle: int, callback: FrameCallback) -> None:
        timer: QtCore.QTimer | None = self._timers.pop(handle, None)
        if timer is None:
            return
        timer.deleteLater()
        callback(self.now())
