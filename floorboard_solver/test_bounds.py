# floorboard_solver/test_bounds.py
# CP-SAT plank lower bound on small instances.

from __future__ import annotations

import random

from floorboard_solver.bounds import BoundParams, BoundResult, plank_lower_bound
from floorboard_solver.config import make_default_geometry
from floorboard_solver.layout import generate_random
from floorboard_solver.types import GeometryConfig, Layout


FAST = BoundParams(time_limit_s=5.0)


def _config(**kw) -> GeometryConfig:
    base = dict(plank_full_length=2.0, plank_width=0.2, room_height=5.0, saw_kerf=0.0, min_cut_length=0.1)
    base.update(kw)
    return GeometryConfig(**base)


def test_only_full_boards_is_trivial() -> None:
    res = plank_lower_bound(_config(room_height=4.0), Layout([0.0, 0.0]), FAST)
    assert res.status == "TRIVIAL"
    assert res.lower_bound == 4
    assert res.greedy_planks == 4
    assert res.proven_optimal


def test_two_halves_share_one_plank() -> None:
    res = plank_lower_bound(_config(), Layout([0.0, 0.0]), FAST)
    assert res.full_boards == 4
    assert res.lower_bound == 5
    assert res.greedy_planks == 5
    assert res.gap == 0
    assert res.status == "OPTIMAL"


def test_kerf_forces_second_plank() -> None:
    # 1.0 + 0.1 kerf twice does not fit 2.0 + 0.1
    res = plank_lower_bound(_config(saw_kerf=0.1), Layout([0.0, 0.0]), FAST)
    assert res.lower_bound == 6
    assert res.greedy_planks == 6


def test_bound_never_exceeds_greedy() -> None:
    config = make_default_geometry(room_height=3000.0)
    rng = random.Random(6)
    for _ in range(3):
        layout = generate_random(6, config.plank_full_length, rng)
        res = plank_lower_bound(config, layout, FAST)
        assert res.full_boards <= res.lower_bound <= res.greedy_planks
        assert res.gap == res.greedy_planks - res.lower_bound


def test_gap_is_never_negative() -> None:
    assert BoundResult(greedy_planks=3, lower_bound=4, full_boards=0, status="FEASIBLE").gap == 0
