import math
from typing import Sequence

from PySide6 import QtCore, QtGui, QtWidgets

from data import Segment, SpinConfig, SpinResult, default_color
from engine import SpinEngine, SpinPlan, layout, resolve
from utils import elide_label

from .scheduler import QtFrameScheduler


class WheelWidget(QtWidgets.QWidget):
    spin_started: QtCore.Signal = QtCore.Signal(object)
    spin_finished: QtCore.Signal = QtCore.Signal(object)
    spin_stopped: QtCore.Signal = QtCore.Signal()

    def __init__(self, parent=None, engine: SpinEngine | None = None) -> None:
        super().__init__(parent)
        self.segments: list[Segment] = []
        self.engine: SpinEngine = engine or SpinEngine(QtFrameScheduler(self))
        self.engine.on_start = self._on_spin_start
        self.engine.on_frame = self._on_frame
        self.engine.on_complete = self._on_spin_complete
        self.setMinimumSize(420, 420)

    @property
    def rotation(self) -> float:
        return self.engine.rotation

    @property
    def is_spinning(self) -> bool:
        return self.engine.is_spinning

    def set_segments(self, segments: Sequence[Segment]) -> None:
        # the engine keeps its own copy, but the drawing would no longer match it
        self._halt()
        self.segments = list(segments)
        self.update()

    def spin(self, config: SpinConfig | None = None) -> bool:
        return self.engine.spin(self.segments, config) is not None

    def stop(self) -> None:
        self._halt()
        self.update()

    def segment_under_pointer(self) -> Segment | None:
        return resolve(self.segments, self.rotation)

    def hideEvent(self, event: QtGui.QHideEvent) -> None:
        self._halt()
        super().hideEvent(event)

    def _halt(self) -> None:
        # listeners only hear about spins that were actually cut short
        if not self.engine.is_spinning:
            return
        self.engine.stop()
        self.spin_stopped.emit()

    def _on_spin_start(self, plan: SpinPlan) -> None:
        self.spin_started.emit(plan)

    def _on_frame(self, angle: float, progress: float) -> None:
        self.update()

    def _on_spin_complete(self, result: SpinResult) -> None:
        self.update()
        self.spin_finished.emit(result)

    def paintEvent(self, event) -> None:
        painter: QtGui.QPainter = QtGui.QPainter(self)
        painter.setRenderHints(
            QtGui.QPainter.RenderHint.Antialiasing
            | QtGui.QPainter.RenderHint.TextAntialiasing
        )

        rect: QtCore.QRect = self.rect()
        size: int = min(rect.width(), rect.height()) - 60
        radius: float = size / 2
        center: QtCore.QPointF = QtCore.QPointF(rect.center())

        # --- Wheel body, rotated so every span moves together ---
        painter.save()
        painter.translate(center)
        painter.rotate(math.degrees(self.rotation))

        wheel_rect: QtCore.QRectF = QtCore.QRectF(-radius, -radius, size, size)
        painter.setPen(QtGui.QPen(QtGui.QColor("#333333"), 4))
        painter.setBrush(QtGui.QBrush(QtGui.QColor("#1e293b")))
        painter.drawEllipse(wheel_rect)

        spans = layout(self.segments)
        if not spans:
            painter.restore()
            painter.setPen(QtGui.QPen(QtGui.QColor("#64748b")))
            painter.drawText(rect, QtCore.Qt.AlignmentFlag.AlignCenter, "Add segments")
            painter.end()
            return

        painter.setPen(QtGui.QPen(QtGui.QColor(0, 0, 0, 50), 1))
        for i, span in enumerate(spans):
            color: QtGui.QColor = QtGui.QColor(span.segment.color)
            if not color.isValid():
                color = QtGui.QColor(default_color(i))
            painter.setBrush(QtGui.QBrush(color))
            # Qt measures arcs counter-clockwise in degrees; spans run clockwise
            path: QtGui.QPainterPath = QtGui.QPainterPath()
            path.moveTo(0, 0)
            path.arcTo(wheel_rect, -math.degrees(span.start), -math.degrees(span.width))
            path.closeSubpath()
            painter.drawPath(path)

        painter.restore()

        # --- Labels, placed in widget coordinates along each span's middle ---
        font: QtGui.QFont = QtGui.QFont()
        font.setPointSize(12)
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QtGui.QPen(QtCore.Qt.GlobalColor.white))
        label_radius: float = radius * 0.65
        for span in spans:
            mid: float = span.middle + self.rotation
            px: float = center.x() + math.cos(mid) * label_radius
            py: float = center.y() + math.sin(mid) * label_radius
            painter.save()
            painter.translate(px, py)
            painter.rotate(math.degrees(mid) + 90.0)
            text_rect: QtCore.QRectF = QtCore.QRectF(-radius * 0.3, -12, radius * 0.6, 24)
            painter.drawText(
                text_rect, QtCore.Qt.AlignmentFlag.AlignCenter, elide_label(span.segment.label)
            )
            painter.restore()

        # --- Hub and fixed pointer ---
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(QtGui.QBrush(QtGui.QColor("#333333")))
        painter.drawEllipse(center, 40, 40)
        painter.setBrush(QtGui.QBrush(QtGui.QColor("#1e293b")))
        painter.drawEllipse(center, 35, 35)

        pointer: QtGui.QPolygonF = QtGui.QPolygonF(
            [
                QtCore.QPointF(center.x(), center.y() - radius + 12),
                QtCore.QPointF(center.x() - 14, center.y() - radius - 20),
                QtCore.QPointF(center.x() + 14, center.y() - radius - 20),
            ]
        )
        painter.setPen(QtGui.QPen(QtCore.Qt.GlobalColor.white, 2))
        painter.setBrush(QtGui.QBrush(QtGui.QColor("#ef4444")))
        painter.drawPolygon(pointer)
        painter.end()
