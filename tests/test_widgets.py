import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")
QtTest = pytest.importorskip("PySide6.QtTest")

from data import Segment, SpinConfig, Wheel  # noqa: E402
from engine import ManualScheduler, SpinEngine  # noqa: E402
from widgets import QtFrameScheduler, SpinWindow, WheelWidget  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def segments() -> list[Segment]:
    return [
        Segment("a", "Alpha", "#FF6384", 1),
        Segment("b", "Bravo", "#36A2EB", 2),
        Segment("c", "Charlie with a very long label", "not-a-color", 1),
    ]


def test_wheel_widget_spins_and_reports(qapp, segments):
    scheduler = ManualScheduler()
    engine = SpinEngine(scheduler, rng=random.Random(3).random, config=SpinConfig(duration_ms=400))
    widget = WheelWidget(engine=engine)
    widget.resize(400, 400)
    widget.set_segments(segments)

    started: list = []
    finished: list = []
    widget.spin_started.connect(started.append)
    widget.spin_finished.connect(finished.append)

    assert widget.spin()
    assert widget.is_spinning
    assert not widget.spin()
    scheduler.advance(200)
    widget.grab()
    scheduler.run_until_idle(16)

    assert len(started) == 1
    assert len(finished) == 1
    assert finished[0].segment == widget.segment_under_pointer()
    assert not widget.is_spinning
    widget.grab()


def test_empty_wheel_widget(qapp):
    widget = WheelWidget(engine=SpinEngine(ManualScheduler()))
    widget.resize(300, 300)
    widget.grab()
    assert not widget.spin()
    assert widget.segment_under_pointer() is None


def test_set_segments_cancels_running_spin(qapp, segments):
    scheduler = ManualScheduler()
    widget = WheelWidget(engine=SpinEngine(scheduler))
    widget.set_segments(segments)
    widget.spin()
    widget.set_segments(segments[:2])
    assert not widget.is_spinning
    assert scheduler.pending == 0


def test_qt_frame_scheduler_fires_and_cancels(qapp):
    scheduler = QtFrameScheduler(interval_ms=5)
    fired: list[float] = []
    scheduler.request_frame(fired.append)
    cancelled = scheduler.request_frame(fired.append)
    scheduler.cancel_frame(cancelled)

    QtTest.QTest.qWait(100)
    assert len(fired) == 1
    assert fired[0] <= scheduler.now()


def test_spin_window_records_results(qapp, segments):
    scheduler = ManualScheduler()
    engine = SpinEngine(scheduler, rng=random.Random(8).random)
    wheel = Wheel("Test Wheel", segments, SpinConfig(duration_ms=300))
    window = SpinWindow(wheel, engine=engine)

    assert window.wheel.engine.config.duration_ms == 300
    window.do_spin()
    assert not window.spin_btn.isEnabled()
    scheduler.run_until_idle(16)

    assert window.spin_btn.isEnabled()
    assert len(window.history) == 1
    result = window.history.recent()[0]
    assert window.result_label.text() == result.segment.label
    assert window.recent_list.count() == 1
    assert window.distribution_list.count() == 3
    window.close()


def test_spin_window_rejects_bad_settings(qapp, segments):
    window = SpinWindow(Wheel("W", segments), engine=SpinEngine(ManualScheduler()))
    window.min_turns_spin.setValue(8)
    window.max_turns_spin.setValue(2)
    assert not window.apply_settings()
    assert window.wheel.engine.config.min_turns == 5

    window.duration_spin.setValue(1200)
    window.min_turns_spin.setValue(1)
    window.max_turns_spin.setValue(2)
    assert window.apply_settings()
    assert window.wheel_def.spin_config.duration_ms == 1200
    window.close()


def test_sounds_manager_without_files_is_silent(qapp, tmp_path):
    from widgets import SoundsManager

    sounds = SoundsManager(tmp_path)
    assert sounds.effects == {}
    sounds.play("SPIN")
    sounds.stop("RESULT")


def test_stop_emits_spin_stopped_only_mid_spin(qapp, segments):
    scheduler = ManualScheduler()
    widget = WheelWidget(engine=SpinEngine(scheduler))
    widget.set_segments(segments)
    stopped: list = []
    widget.spin_stopped.connect(lambda: stopped.append(True))

    widget.stop()
    assert stopped == []

    widget.spin()
    widget.stop()
    widget.stop()
    assert stopped == [True]
    assert scheduler.pending == 0


def test_hiding_wheel_mid_spin_unlocks_window(qapp, segments):
    scheduler = ManualScheduler()
    engine = SpinEngine(scheduler, rng=random.Random(5).random)
    window = SpinWindow(Wheel("Hide Me", segments, SpinConfig(duration_ms=1000)), engine=engine)
    window.show()

    window.do_spin()
    scheduler.advance(100)
    assert not window.spin_btn.isEnabled()

    window.wheel.hide()
    window.wheel.show()
    assert not window.wheel.is_spinning
    assert window.spin_btn.isEnabled()
    assert window.settings_group.isEnabled()
    assert window.spin_btn.text() == "SPIN"
    assert len(window.history) == 0

    scheduler.advance(5000)
    assert len(window.history) == 0
    window.do_spin()
    scheduler.run_until_idle(16)
    assert len(window.history) == 1
    window.close()


def test_sounds_manager_loads_present_cues_only(qapp, tmp_path):
    import wave

    from PySide6.QtMultimedia import QSoundEffect

    from widgets import SoundsManager

    with wave.open(str(tmp_path / "RESULT.wav"), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(8000)
        w.writeframes(b"\x00\x00" * 800)

    sounds = SoundsManager(tmp_path, volume=0.5)
    assert list(sounds.files) == ["RESULT"]
    assert isinstance(sounds.effects["RESULT"], QSoundEffect)
    assert sounds.effects["RESULT"].volume() == pytest.approx(0.5)
    sounds.stop("RESULT")
    sounds.play("SPIN")
