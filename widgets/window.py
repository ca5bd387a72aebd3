import logging

from PySide6 import QtCore, QtGui, QtWidgets

from data import (
    PRESENTER_KEY_DOWN,
    PRESENTER_KEY_UP,
    Easing,
    SpinConfigError,
    SpinHistory,
    SpinResult,
    Wheel,
)
from engine import SpinEngine, SpinPlan
from utils import fmt_degrees, fmt_percent

from .sounds import SoundsManager
from .wheel import WheelWidget

logger = logging.getLogger("spinwheel.ui")


class SpinWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        wheel: Wheel,
        sounds: SoundsManager | None = None,
        history: SpinHistory | None = None,
        engine: SpinEngine | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(f"Spin Wheel: {wheel.name}")
        self.resize(1000, 640)

        self.wheel_def: Wheel = wheel
        self.sounds: SoundsManager | None = sounds
        self.history: SpinHistory = history if history is not None else SpinHistory()

        self._build_ui(engine)
        self.wheel.set_segments(wheel.segments)
        self.wheel.engine.config = wheel.spin_config
        self._load_config_controls()
        self._refresh_history()

        app = QtWidgets.QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    # -------------------------
    # Event filter for Space / presenter keys
    # -------------------------
    def eventFilter(self, obj, event) -> bool:
        if event.type() == QtCore.QEvent.Type.KeyPress:
            key = event.key()
            if key in {QtCore.Qt.Key.Key_Space, PRESENTER_KEY_UP}:
                if self.spin_btn.isEnabled():
                    self.spin_btn.click()
                return True
            if key == PRESENTER_KEY_DOWN:
                # swallow it so the config controls don't step while presenting
                return True
        return super().eventFilter(obj, event)

    # -------------------------
    # UI building
    # -------------------------
    def _build_ui(self, engine: SpinEngine | None) -> None:
        central: QtWidgets.QWidget = QtWidgets.QWidget()
        h: QtWidgets.QHBoxLayout = QtWidgets.QHBoxLayout()
        central.setLayout(h)

        # Left: wheel and spin button
        self.wheel: WheelWidget = WheelWidget(self, engine=engine)
        self.wheel.spin_started.connect(self.on_spin_started)
        self.wheel.spin_finished.connect(self.on_wheel_result)
        self.wheel.spin_stopped.connect(self.on_spin_stopped)
        left_v: QtWidgets.QVBoxLayout = QtWidgets.QVBoxLayout()
        left_v.addWidget(self.wheel)
        self.spin_btn: QtWidgets.QPushButton = QtWidgets.QPushButton("SPIN")
        self.spin_btn.clicked.connect(self.do_spin)
        left_v.addWidget(self.spin_btn)
        left_w: QtWidgets.QWidget = QtWidgets.QWidget()
        left_w.setLayout(left_v)
        h.addWidget(left_w, 3)

        # Right: result, settings, history
        right_v: QtWidgets.QVBoxLayout = QtWidgets.QVBoxLayout()
        title: QtWidgets.QLabel = QtWidgets.QLabel(self.wheel_def.name)
        title.setFont(QtGui.QFont("", 14, QtGui.QFont.Weight.Bold))
        right_v.addWidget(title)
        if self.wheel_def.description:
            right_v.addWidget(QtWidgets.QLabel(self.wheel_def.description))

        self.result_label: QtWidgets.QLabel = QtWidgets.QLabel("Spin the wheel!")
        self.result_label.setFont(QtGui.QFont("", 16, QtGui.QFont.Weight.Bold))
        right_v.addWidget(self.result_label)

        settings_group: QtWidgets.QGroupBox = QtWidgets.QGroupBox("Spin Settings")
        form: QtWidgets.QFormLayout = QtWidgets.QFormLayout()
        self.duration_spin: QtWidgets.QSpinBox = QtWidgets.QSpinBox()
        self.duration_spin.setRange(100, 60000)
        self.duration_spin.setSingleStep(500)
        self.duration_spin.setSuffix(" ms")
        self.min_turns_spin: QtWidgets.QDoubleSpinBox = QtWidgets.QDoubleSpinBox()
        self.min_turns_spin.setRange(0, 100)
        self.max_turns_spin: QtWidgets.QDoubleSpinBox = QtWidgets.QDoubleSpinBox()
        self.max_turns_spin.setRange(0, 100)
        self.easing_cb: QtWidgets.QComboBox = QtWidgets.QComboBox()
        for e in Easing:
            self.easing_cb.addItem(e.value, e)
        form.addRow("Duration:", self.duration_spin)
        form.addRow("Min Turns:", self.min_turns_spin)
        form.addRow("Max Turns:", self.max_turns_spin)
        form.addRow("Easing:", self.easing_cb)
        apply_btn: QtWidgets.QPushButton = QtWidgets.QPushButton("Apply Settings")
        apply_btn.clicked.connect(self.apply_settings)
        form.addRow(apply_btn)
        settings_group.setLayout(form)
        self.settings_group: QtWidgets.QGroupBox = settings_group
        right_v.addWidget(settings_group)

        right_v.addWidget(QtWidgets.QLabel("Recent Results"))
        self.recent_list: QtWidgets.QListWidget = QtWidgets.QListWidget()
        right_v.addWidget(self.recent_list)

        right_v.addWidget(QtWidgets.QLabel("Distribution"))
        self.distribution_list: QtWidgets.QListWidget = QtWidgets.QListWidget()
        right_v.addWidget(self.distribution_list)

        self.status_label: QtWidgets.QLabel = QtWidgets.QLabel("Status: Ready")
        right_v.addWidget(self.status_label)

        right_w: QtWidgets.QWidget = QtWidgets.QWidget()
        right_w.setLayout(right_v)
        h.addWidget(right_w, 2)

        self.setCentralWidget(central)

    def _load_config_controls(self) -> None:
        cfg = self.wheel.engine.config
        self.duration_spin.setValue(cfg.duration_ms)
        self.min_turns_spin.setValue(cfg.min_turns)
        self.max_turns_spin.setValue(cfg.max_turns)
        self.easing_cb.setCurrentIndex(max(0, self.easing_cb.findData(cfg.easing)))

    # -------------------------
    # Actions
    # -------------------------
    def apply_settings(self) -> bool:
        try:
            cfg = self.wheel.engine.configure(
                duration_ms=self.duration_spin.value(),
                min_turns=self.min_turns_spin.value(),
                max_turns=self.max_turns_spin.value(),
                easing=self.easing_cb.currentData(),
            )
        except SpinConfigError as e:
            self.status_label.setText(f"Status: {e}")
            self._load_config_controls()
            return False
        self.wheel_def.spin_config = cfg
        self.status_label.setText("Status: Settings applied")
        return True

    def do_spin(self) -> None:
        if not self.wheel.spin():
            self.status_label.setText("Status: Nothing to spin")

    def on_spin_started(self, plan: SpinPlan) -> None:
        self.spin_btn.setEnabled(False)
        self.settings_group.setEnabled(False)
        self.spin_btn.setText("...")
        self.result_label.setText("Spinning...")
        self.status_label.setText("Status: Spinning")
        if self.sounds is not None:
            self.sounds.play("SPIN")

    def on_wheel_result(self, result: SpinResult) -> None:
        self.history.record(result)
        self._unlock_controls()
        self.result_label.setText(result.segment.label)
        self.result_label.setStyleSheet(f"color: {result.segment.color}")
        self.status_label.setText(f"Status: Landed at {fmt_degrees(result.final_angle)}")
        logger.info("result: %s", result.segment.label)
        if self.sounds is not None:
            self.sounds.stop("SPIN")
            self.sounds.play("RESULT")
        self._refresh_history()

    def on_spin_stopped(self) -> None:
        self._unlock_controls()
        self.result_label.setText("Spin the wheel!")
        self.status_label.setText("Status: Spin cancelled")
        if self.sounds is not None:
            self.sounds.stop("SPIN")

    def _unlock_controls(self) -> None:
        self.spin_btn.setEnabled(True)
        self.settings_group.setEnabled(True)
        self.spin_btn.setText("SPIN")

    def _refresh_history(self) -> None:
        self.recent_list.clear()
        recent = self.history.recent()
        if not recent:
            self.recent_list.addItem("No spins yet. Be the first!")
        for r in recent:
            item = QtWidgets.QListWidgetItem(r.segment.label)
            item.setForeground(QtGui.QBrush(QtGui.QColor(r.segment.color)))
            self.recent_list.addItem(item)

        self.distribution_list.clear()
        for tally in self.history.distribution(self.wheel.segments):
            self.distribution_list.addItem(
                f"{tally.label}: {tally.count} ({fmt_percent(tally.percentage)})"
            )

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self.wheel.stop()
        super().closeEvent(event)
