import math
import random

from engine.geometry import cumulative_offsets
from engine.selector import pick_index, select_target

# chi-square critical value, 3 degrees of freedom, 99.9% confidence
CHI2_CRITICAL_DF3 = 16.266


def test_example_three_segments_draw_lands_in_second(make_segments):
    segs = make_segments([1, 2, 1])
    # r = 2.5 out of 4, cumulative weights 1, 3, 4
    assert pick_index(segs, 2.5 / 4) == 1


def test_cumulative_upper_bound_is_inclusive(make_segments):
    segs = make_segments([1, 2, 1])
    assert pick_index(segs, 0.25) == 0
    assert pick_index(segs, 0.75) == 1
    assert pick_index(segs, 0.0) == 0


def test_draw_past_total_still_selects_last_segment(make_segments):
    segs = make_segments([0.1] * 10)
    assert pick_index(segs, 1.0) == 9
    assert pick_index(segs, 1.0 + 1e-12) == 9


def test_no_selection_on_empty_or_weightless_wheel(make_segments, seq_rng):
    assert pick_index([], 0.5) is None
    assert pick_index(make_segments([0, 0]), 0.5) is None
    assert select_target([], seq_rng([0.5, 0.5])) is None


def test_example_two_segments_lands_mid_first(make_segments, seq_rng):
    segs = make_segments([1, 1])
    target = select_target(segs, seq_rng([0.3, 0.5]))
    assert target.segment_index == 0
    assert math.isclose(target.landing_offset, math.pi / 2)


def test_landing_stays_inside_middle_of_span(make_segments, seq_rng):
    segs = make_segments([1, 2, 1])
    ends = cumulative_offsets(segs)
    for landing_draw in (0.0, 0.5, 0.999999):
        target = select_target(segs, seq_rng([0.5, landing_draw]))
        start, end = ends[0], ends[1]
        width = end - start
        assert target.segment_index == 1
        assert start + 0.2 * width - 1e-12 <= target.landing_offset <= start + 0.8 * width + 1e-12


def test_selection_frequencies_match_weights(make_segments):
    weights = [1, 2, 3, 4]
    segs = make_segments(weights)
    rng = random.Random(1234)
    draws = 40_000
    counts = [0] * len(weights)
    for _ in range(draws):
        counts[pick_index(segs, rng.random())] += 1

    total = sum(weights)
    chi2 = sum((c - draws * w / total) ** 2 / (draws * w / total) for c, w in zip(counts, weights))
    assert chi2 < CHI2_CRITICAL_DF3
