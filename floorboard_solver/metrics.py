# floorboard_solver/metrics.py
# Summary metrics for a layout:
# - planks consumed and material length
# - waste length and efficiency
# - offcut reuse counters and distinct cut lengths
# - seam statistics (how close seams of neighbouring rows come)
#
# These are reporting helpers; the optimizer only looks at scorer.score().

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .allocator import allocate_material, is_full_length
from .requirements import calculate_requirements
from .scorer import score_allocation
from .types import (
    AllocationResult,
    CutRequirement,
    GeometryConfig,
    Layout,
    ObjectiveWeights,
    ScoredLayout,
)


@dataclass(frozen=True)
class Metrics:
    planks_used: int
    total_material: float
    waste: float
    offcuts_reused: int
    offcuts_wasted: int
    unique_cuts: int
    full_boards: int
    cut_pieces: int
    min_seam_gap: Optional[float]

    @property
    def efficiency(self) -> float:
        if self.total_material <= 0:
            return 0.0
        return (self.total_material - self.waste) / self.total_material * 100.0


def seam_positions(config: GeometryConfig, offset: float) -> List[float]:
    """Board joints strictly inside the room for a row starting at `offset`."""
    out: List[float] = []
    y = offset + config.plank_full_length
    while y < config.room_height:
        if y > 0:
            out.append(y)
        y += config.plank_full_length
    return out


def min_adjacent_seam_gap(config: GeometryConfig, layout: Layout) -> Optional[float]:
    """
    Smallest distance between a seam and any seam in the neighbouring row.
    None if fewer than two rows have seams.
    """
    seams = [seam_positions(config, o) for o in layout.row_offsets]
    best: Optional[float] = None
    for a, b in zip(seams, seams[1:]):
        for ya in a:
            for yb in b:
                d = abs(ya - yb)
                if best is None or d < best:
                    best = d
    return best


def _build_metrics(
    config: GeometryConfig,
    layout: Layout,
    reqs: List[CutRequirement],
    alloc: AllocationResult,
) -> Metrics:
    full = sum(1 for r in reqs if is_full_length(config, r.length))
    return Metrics(
        planks_used=alloc.planks_used(config.plank_full_length),
        total_material=alloc.total_material,
        waste=alloc.waste,
        offcuts_reused=alloc.offcuts_reused,
        offcuts_wasted=alloc.offcuts_wasted,
        unique_cuts=alloc.unique_cuts,
        full_boards=full,
        cut_pieces=len(reqs) - full,
        min_seam_gap=min_adjacent_seam_gap(config, layout),
    )


def compute_layout_metrics(config: GeometryConfig, layout: Layout) -> Metrics:
    reqs = calculate_requirements(config, layout)
    return _build_metrics(config, layout, reqs, allocate_material(config, reqs))


def score_with_metrics(
    config: GeometryConfig,
    weights: ObjectiveWeights,
    layout: Layout,
) -> Tuple[ScoredLayout, Metrics]:
    """Score and metrics from a single allocation pass."""
    reqs = calculate_requirements(config, layout)
    alloc = allocate_material(config, reqs)
    return score_allocation(config, weights, layout, alloc), _build_metrics(config, layout, reqs, alloc)
