# floorboard_solver/test_optimizer.py
# Simulated annealing: best tracking, schedule and reproducibility.

from __future__ import annotations

import math
import random

import pytest

from floorboard_solver.config import make_default_geometry, make_default_weights
from floorboard_solver.layout import generate_random
from floorboard_solver.optimizer import (
    AnnealingParams,
    acceptance_probability,
    anneal,
    mutation_strength,
    optimize,
)
from floorboard_solver.scorer import score


@pytest.fixture
def config():
    return make_default_geometry(room_height=4000.0)


@pytest.fixture
def weights():
    return make_default_weights()


def test_zero_iterations_returns_initial(config, weights) -> None:
    start = generate_random(6, config.plank_full_length, random.Random(2))
    assert optimize(config, weights, start, 0, rng=random.Random(2)) == start


def test_best_never_worse_than_start(config, weights) -> None:
    start = generate_random(8, config.plank_full_length, random.Random(5))
    res = anneal(config, weights, start, 300, rng=random.Random(5))
    assert res.best_score >= score(config, weights, start).total_score
    assert res.best_score == score(config, weights, res.best).total_score
    assert res.iterations == 300
    assert res.improved <= res.accepted <= 300


def test_history_is_non_decreasing(config, weights) -> None:
    start = generate_random(8, config.plank_full_length, random.Random(9))
    res = anneal(config, weights, start, 200, rng=random.Random(9), params=AnnealingParams(record_history=True))
    assert len(res.history) == 200
    assert all(b >= a for a, b in zip(res.history, res.history[1:]))
    assert res.history[-1] == res.best_score


def test_offsets_stay_clamped(config, weights) -> None:
    start = generate_random(5, config.plank_full_length, random.Random(1))
    best = optimize(config, weights, start, 300, rng=random.Random(1))
    assert best.num_rows == 5
    assert all(-config.plank_full_length <= o <= 0.0 for o in best.row_offsets)


def test_same_seed_same_result(config, weights) -> None:
    start = generate_random(6, config.plank_full_length, random.Random(3))
    a = optimize(config, weights, start, 150, rng=random.Random(42))
    b = optimize(config, weights, start, 150, rng=random.Random(42))
    assert a == b


def test_mutation_schedule() -> None:
    p = AnnealingParams()
    assert mutation_strength(0, 100, p) == pytest.approx(0.55)
    assert mutation_strength(50, 100, p) == pytest.approx(0.3)
    assert mutation_strength(99, 100, p) > 0.05


def test_acceptance_probability() -> None:
    assert acceptance_probability(0.1, 1.0) == 1.0
    assert acceptance_probability(-1.0, 1.0) == pytest.approx(math.exp(-1.0))
    assert acceptance_probability(-0.01, 0.0) == 0.0
    assert acceptance_probability(0.0, 0.0) == 0.0


def test_fully_cooled_walk_only_climbs(config, weights) -> None:
    start = generate_random(6, config.plank_full_length, random.Random(8))
    params = AnnealingParams(initial_temperature=0.0, record_history=True)
    res = anneal(config, weights, start, 100, rng=random.Random(8), params=params)
    # at T = 0 the current layout is always the best one
    assert res.current_score == res.best_score
