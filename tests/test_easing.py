import math

import pytest

from data import Easing
from engine.easing import EASING_FUNCTIONS, OVERSHOOTING, ease


def test_every_easing_kind_has_a_curve():
    assert set(EASING_FUNCTIONS) == set(Easing)


@pytest.mark.parametrize("kind", list(Easing))
def test_curves_start_at_zero_and_end_at_one(kind):
    assert math.isclose(ease(kind, 0.0), 0.0, abs_tol=1e-9)
    assert ease(kind, 1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("kind", [k for k in Easing if k not in OVERSHOOTING])
def test_plain_curves_are_monotonic_and_bounded(kind):
    values = [ease(kind, i / 200) for i in range(201)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert all(-1e-12 <= v <= 1 + 1e-12 for v in values)


def test_back_easing_overshoots_then_settles():
    values = [ease(Easing.EASE_OUT_BACK, i / 200) for i in range(201)]
    assert max(values) > 1.0
    assert max(values) < 1.11


def test_elastic_easing_overshoots():
    values = [ease(Easing.EASE_OUT_ELASTIC, i / 200) for i in range(201)]
    assert max(values) > 1.0


def test_easing_parse_accepts_stored_names():
    assert Easing.parse("easeOutQuart") is Easing.EASE_OUT_QUART
    assert Easing.parse("LINEAR") is Easing.LINEAR
    assert Easing.parse("ease_out_back") is Easing.EASE_OUT_BACK
    assert Easing.parse(Easing.EASE_OUT_EXPO) is Easing.EASE_OUT_EXPO
    assert Easing.parse("bounce") is Easing.EASE_OUT_CUBIC
    assert Easing.parse(None) is Easing.EASE_OUT_CUBIC
