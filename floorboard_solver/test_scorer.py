# floorboard_solver/test_scorer.py
# Sub-scores, weighted total and the unique-cut penalty.

from __future__ import annotations

import math
import random
from dataclasses import replace

import pytest

from floorboard_solver.layout import generate_random
from floorboard_solver.scorer import (
    combine_scores,
    randomness_score,
    reuse_score,
    score,
    waste_score,
)
from floorboard_solver.types import AllocationResult, GeometryConfig, Layout, ObjectiveWeights


def _config(**kw) -> GeometryConfig:
    base = dict(plank_full_length=2.0, plank_width=0.2, room_height=5.0, saw_kerf=0.0, min_cut_length=0.1)
    base.update(kw)
    return GeometryConfig(**base)


EQUAL = ObjectiveWeights(1.0, 1.0, 1.0)


def test_single_row_scores() -> None:
    s = score(_config(), EQUAL, Layout([0.0]))
    assert s.waste_score == pytest.approx(6.0 / 7.0)
    assert s.cutting_score == pytest.approx(0.5)  # (0 + 1) / (1 + 1)
    assert s.randomness_score == 0.5
    assert s.total_score == pytest.approx((0.5 + 6.0 / 7.0 + 0.5) / 3.0)
    assert s.layout == Layout([0.0])


def test_neutral_values_without_material_or_offcuts() -> None:
    nothing = AllocationResult(waste=0.0, total_material=0.0, offcuts_reused=0, offcuts_wasted=0, unique_cuts=0)
    assert waste_score(nothing) == 0.5
    assert reuse_score(nothing) == 0.5
    s = score(_config(), EQUAL, Layout())
    assert s.total_score == pytest.approx(0.5)


def test_randomness_from_offset_spread() -> None:
    config = _config()
    assert randomness_score(config, Layout([0.0, -1.0])) == pytest.approx(1.0)
    assert randomness_score(config, Layout([-0.7, -0.7, -0.7])) == 0.0


def test_randomness_is_not_clamped() -> None:
    config = _config()
    assert randomness_score(config, Layout([0.0, -2.0])) == pytest.approx(2.0)


def test_zero_weights_give_zero_total() -> None:
    s = score(_config(), ObjectiveWeights(0.0, 0.0, 0.0), Layout([0.0, -0.5]))
    assert s.total_score == 0.0
    assert s.waste_score > 0.0


def test_single_weight_selects_sub_score() -> None:
    layout = Layout([0.0, -0.5, -1.2])
    s = score(_config(), ObjectiveWeights(0.0, 1.0, 0.0), layout)
    assert s.total_score == pytest.approx(s.waste_score)
    assert combine_scores(ObjectiveWeights(0.0, 0.0, 3.0), 0.1, 0.2, 0.3) == pytest.approx(0.3)


def test_cut_cap_scales_total() -> None:
    layout = Layout([0.0, -0.5, -1.2])
    free = score(_config(), EQUAL, layout)
    capped = score(_config(max_unique_cuts=0), EQUAL, layout)
    assert capped.total_score == pytest.approx(free.total_score * 0.01)
    assert capped.waste_score == free.waste_score

    roomy = score(_config(max_unique_cuts=100), EQUAL, layout)
    assert roomy.total_score == free.total_score


def test_score_is_pure() -> None:
    config = _config(saw_kerf=0.003, min_cut_length=0.3)
    layout = generate_random(12, config.plank_full_length, random.Random(11))
    assert score(config, EQUAL, layout) == score(config, EQUAL, layout)


def test_sub_scores_in_range_for_random_layouts() -> None:
    config = _config(saw_kerf=0.003, min_cut_length=0.3)
    rng = random.Random(4)
    for _ in range(50):
        s = score(config, EQUAL, generate_random(8, config.plank_full_length, rng))
        assert 0.0 < s.waste_score <= 1.0
        assert 0.0 < s.cutting_score <= 1.0
        assert s.randomness_score >= 0.0
        assert not math.isnan(s.total_score)


def test_weights_are_relative() -> None:
    layout = Layout([0.0, -0.5, -1.2])
    a = score(_config(), ObjectiveWeights(1.0, 2.0, 3.0), layout)
    b = score(_config(), ObjectiveWeights(50.0, 100.0, 150.0), layout)
    assert a.total_score == pytest.approx(b.total_score)
    assert replace(a, total_score=0.0) == replace(b, total_score=0.0)
