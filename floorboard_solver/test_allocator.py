# floorboard_solver/test_allocator.py
# Greedy allocation: full planks, offcut reuse, kerf and waste accounting.

from __future__ import annotations

import pytest

from floorboard_solver.allocator import allocate_material, count_unique_cuts, sort_requirements
from floorboard_solver.requirements import calculate_requirements
from floorboard_solver.types import CutRequirement, GeometryConfig, Layout


def _config(**kw) -> GeometryConfig:
    base = dict(plank_full_length=2.0, plank_width=0.2, room_height=5.0, saw_kerf=0.0, min_cut_length=0.1)
    base.update(kw)
    return GeometryConfig(**base)


def test_single_row_keeps_offcut_then_wastes_it() -> None:
    config = _config()
    res = allocate_material(config, calculate_requirements(config, Layout([0.0])))
    assert res.total_material == 6.0
    assert res.waste == 1.0
    assert res.offcuts_reused == 0
    assert res.offcuts_wasted == 1
    assert res.unique_cuts == 1


def test_second_row_reuses_offcut() -> None:
    config = _config()
    res = allocate_material(config, calculate_requirements(config, Layout([0.0, 0.0])))
    assert res.total_material == 10.0
    assert res.waste == 0.0
    assert res.offcuts_reused == 1
    assert res.offcuts_wasted == 0
    assert res.planks_used(2.0) == 5


def test_kerf_blocks_exact_reuse() -> None:
    config = _config(saw_kerf=0.1)
    res = allocate_material(config, calculate_requirements(config, Layout([0.0, 0.0])))
    # each 1.0 piece needs 1.1 of the 0.9 offcut, so both open a plank
    assert res.total_material == 12.0
    assert res.offcuts_reused == 0
    assert res.offcuts_wasted == 2
    assert res.waste == pytest.approx(2.0)


def test_waste_grows_with_kerf() -> None:
    wastes = []
    for kerf in (0.0, 0.05, 0.1, 0.2):
        config = _config(saw_kerf=kerf)
        wastes.append(allocate_material(config, calculate_requirements(config, Layout([0.0, 0.0]))).waste)
    assert all(b >= a - 1e-9 for a, b in zip(wastes, wastes[1:]))
    assert wastes[-1] > wastes[0]


def test_short_remainder_is_waste_not_offcut() -> None:
    config = _config(room_height=3.7, min_cut_length=0.5)
    res = allocate_material(config, calculate_requirements(config, Layout([0.0])))
    assert res.total_material == 4.0
    assert res.waste == pytest.approx(0.3)
    assert res.offcuts_wasted == 0


def test_near_full_piece_counts_as_plank() -> None:
    config = _config(saw_kerf=0.05)
    res = allocate_material(config, [CutRequirement(1.95)])
    assert res.total_material == 2.0
    assert res.waste == 0.0
    assert res.unique_cuts == 0


def test_unique_cuts_at_tenth_resolution() -> None:
    config = _config()
    reqs = [CutRequirement(0.5), CutRequirement(0.55), CutRequirement(0.7), CutRequirement(2.0)]
    assert count_unique_cuts(config, reqs) == 2


def test_sort_is_descending_and_stable() -> None:
    reqs = [CutRequirement(1.0, row_index=0), CutRequirement(1.5), CutRequirement(1.0, row_index=1)]
    out = sort_requirements(reqs)
    assert [r.length for r in out] == [1.5, 1.0, 1.0]
    assert [r.row_index for r in out[1:]] == [0, 1]


def test_deterministic_and_order_insensitive() -> None:
    config = _config(saw_kerf=0.003, min_cut_length=0.3)
    reqs = calculate_requirements(config, Layout([-0.3, -1.1, -1.7, 0.0]))
    a = allocate_material(config, reqs)
    b = allocate_material(config, reqs)
    c = allocate_material(config, list(reversed(reqs)))
    assert a == b == c


def test_material_covers_requirements() -> None:
    config = _config(saw_kerf=0.003, min_cut_length=0.3)
    reqs = calculate_requirements(config, Layout([-0.3, -1.1, -1.7, 0.0, -0.9]))
    res = allocate_material(config, reqs)
    needed = sum(r.length for r in reqs)
    assert res.total_material >= needed
    assert res.total_material - res.waste == pytest.approx(needed, abs=1e-6 + len(reqs) * 0.1)
    assert 0.0 <= res.efficiency <= 100.0


def test_empty_requirements() -> None:
    res = allocate_material(_config(), [])
    assert res.total_material == 0.0
    assert res.waste == 0.0
    assert res.efficiency == 0.0
