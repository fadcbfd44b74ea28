# floorboard_solver/allocator.py
# Greedy best-fit-descending material allocation for one layout.
#
# Requirements are served largest first. Whole-plank pieces take a fresh plank.
# Cut pieces are taken from the first pooled offcut that still fits (piece + kerf);
# otherwise a fresh plank is opened. Leftovers of at least min_cut_length go back
# to the pool, shorter ones are waste. Whatever is still pooled at the end is waste too.
#
# The result is deterministic for a given requirement list.

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Set, Tuple

from .config import FULL_LENGTH_TOLERANCE, UNIQUE_CUT_RESOLUTION
from .types import AllocationResult, CutRequirement, GeometryConfig


def is_full_length(config: GeometryConfig, length: float) -> bool:
    return abs(length - config.plank_full_length) < FULL_LENGTH_TOLERANCE


def count_unique_cuts(config: GeometryConfig, requirements: Iterable[CutRequirement]) -> int:
    """Distinct cut lengths (at 1/10 unit) among pieces that are not whole planks."""
    keys: Set[int] = set()
    for r in requirements:
        if abs(r.length - config.plank_full_length) > FULL_LENGTH_TOLERANCE:
            keys.add(int(r.length * UNIQUE_CUT_RESOLUTION))
    return len(keys)


def sort_requirements(requirements: Iterable[CutRequirement]) -> List[CutRequirement]:
    """Largest first; equal lengths keep their input order."""
    return sorted(requirements, key=lambda r: r.length, reverse=True)


def allocate_material(
    config: GeometryConfig,
    requirements: Iterable[CutRequirement],
    recorder: Optional[Any] = None,
) -> AllocationResult:
    """
    Simulate cutting the requirement list from full planks with offcut reuse.

    recorder (optional) receives allocation events, see cut_list.CutPlanRecorder.
    It only observes; the returned totals are the same with or without it.
    """
    reqs = list(requirements)
    unique_cuts = count_unique_cuts(config, reqs)

    plank = config.plank_full_length
    kerf = config.saw_kerf
    min_cut = config.min_cut_length

    waste = 0.0
    total_material = 0.0
    offcuts_reused = 0
    offcuts_wasted = 0
    planks_opened = 0

    # (length, source plank number, recorder token), insertion order
    pool: List[Tuple[float, int, Any]] = []

    for req in sort_requirements(reqs):
        if is_full_length(config, req.length):
            total_material += plank
            if recorder is not None:
                recorder.on_full_board(req)
            continue

        need = req.length + kerf
        hit = -1
        for i, entry in enumerate(pool):
            if entry[0] >= need:
                hit = i
                break

        if hit >= 0:
            length, source_plank, parent = pool.pop(hit)
            offcuts_reused += 1
            if recorder is not None:
                recorder.on_reuse(req, source_plank, parent)
            remaining = length - req.length - kerf
        else:
            parent = None
            total_material += plank
            planks_opened += 1
            source_plank = planks_opened
            if recorder is not None:
                recorder.on_new_plank(req, source_plank)
            remaining = plank - req.length - kerf

        if remaining >= min_cut:
            token = recorder.on_offcut(req, source_plank, remaining, parent) if recorder is not None else None
            pool.append((remaining, source_plank, token))
        elif remaining > 0:
            waste += remaining
        waste += kerf

    for length, source_plank, token in pool:
        waste += length
        offcuts_wasted += 1
        if recorder is not None:
            recorder.on_unused(source_plank, length, token)

    return AllocationResult(
        waste=waste,
        total_material=total_material,
        offcuts_reused=offcuts_reused,
        offcuts_wasted=offcuts_wasted,
        unique_cuts=unique_cuts,
    )
