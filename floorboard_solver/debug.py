# floorboard_solver/debug.py
# Debug / inspection helpers:
# - pretty-print requirements, plank allocations and scores
# - helpful when tuning weights or annealing parameters

from __future__ import annotations

from typing import Iterable

from .types import CutList, CutRequirement, PlankAllocation, ScoredLayout


def print_requirements(reqs: Iterable[CutRequirement]) -> None:
    for r in reqs:
        print(f"[R{r.row_index:03d}] board={r.board_index:2d} {r.position:6s} len={r.length:9.1f}")


def print_allocations(allocs: Iterable[PlankAllocation]) -> None:
    for a in allocs:
        cuts = ", ".join(f"{c:.1f}" for c in a.cuts)
        print(f"[P{a.plank_number:03d}] cuts=({cuts}) leftover={a.offcut_length:.1f}")


def print_scored(scored: ScoredLayout) -> None:
    print(
        f"Score: total={scored.total_score:.4f} cutting={scored.cutting_score:.4f} "
        f"waste={scored.waste_score:.4f} randomness={scored.randomness_score:.4f}"
    )


def print_cut_list(cut_list: CutList, verbose: bool = False) -> None:
    print(f"Planks: {cut_list.full_planks}  Cut pieces: {cut_list.total_cut_pieces()}  Unique cuts: {cut_list.unique_cuts}")
    print(f"Material: {cut_list.total_material:,.1f}  Waste: {cut_list.waste:,.1f}  Efficiency: {cut_list.efficiency:.1f}%")
    print("-- Cuts --")
    for length, count in cut_list.cuts.items():
        print(f"{count:4d} x {length:9.1f}")
    if verbose:
        print("-- Planks --")
        print_allocations(cut_list.plank_allocations)
        print("-- Requirements --")
        print_requirements(cut_list.requirements)
