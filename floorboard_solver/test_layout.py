# floorboard_solver/test_layout.py
# Random layouts and single-row mutation.

from __future__ import annotations

import random

from floorboard_solver.layout import clamp_offset, generate_random, mutate
from floorboard_solver.types import Layout


def test_generate_random_range_and_seed() -> None:
    a = generate_random(30, 2400.0, random.Random(1))
    b = generate_random(30, 2400.0, random.Random(1))
    assert a == b
    assert a.num_rows == 30
    assert all(-2400.0 < o <= 0.0 for o in a.row_offsets)
    assert generate_random(0, 2400.0, random.Random(1)) == Layout()


def test_clamp_offset() -> None:
    assert clamp_offset(10.0, 2400.0) == 0.0
    assert clamp_offset(-3000.0, 2400.0) == -2400.0
    assert clamp_offset(-100.0, 2400.0) == -100.0


def test_mutate_changes_at_most_one_row() -> None:
    rng = random.Random(7)
    layout = generate_random(10, 2400.0, rng)
    for _ in range(100):
        nxt = mutate(layout, 2400.0, 0.5, rng)
        changed = [i for i, (x, y) in enumerate(zip(layout.row_offsets, nxt.row_offsets)) if x != y]
        assert len(changed) <= 1
        assert nxt.num_rows == layout.num_rows
        layout = nxt


def test_mutate_stays_in_range_with_large_steps() -> None:
    rng = random.Random(3)
    layout = Layout([0.0, -2400.0, -1200.0])
    for _ in range(200):
        layout = mutate(layout, 2400.0, 10.0, rng)
        assert all(-2400.0 <= o <= 0.0 for o in layout.row_offsets)


def test_mutate_does_not_modify_input() -> None:
    layout = Layout([-100.0, -200.0])
    before = layout.row_offsets
    mutate(layout, 2400.0, 0.5, random.Random(0))
    assert layout.row_offsets == before


def test_mutate_empty_layout() -> None:
    layout = Layout()
    assert mutate(layout, 2400.0, 0.5, random.Random(0)) is layout
