# floorboard_solver/scorer.py
# Multi-objective layout score:
# - cutting score: how many generated offcuts find a second use (+1 smoothed)
# - waste score: consumed material vs. consumed + wasted
# - randomness score: dispersion of row offsets (seams should not line up)
#
# Sub-scores are combined as a weighted mean. A layout that needs more distinct
# cut lengths than max_unique_cuts keeps only 1% of its total.

from __future__ import annotations

import math
from typing import Optional

from .allocator import allocate_material
from .config import CAP_PENALTY, NEUTRAL_SCORE, RANDOMNESS_SCALE
from .requirements import iter_requirements
from .types import AllocationResult, GeometryConfig, Layout, ObjectiveWeights, ScoredLayout


def waste_score(allocation: AllocationResult) -> float:
    if allocation.total_material > 0.0:
        return allocation.total_material / (allocation.total_material + allocation.waste)
    return NEUTRAL_SCORE


def reuse_score(allocation: AllocationResult) -> float:
    total_offcuts = allocation.offcuts_reused + allocation.offcuts_wasted
    if total_offcuts > 0:
        return (allocation.offcuts_reused + 1.0) / (total_offcuts + 1.0)
    return NEUTRAL_SCORE


def randomness_score(config: GeometryConfig, layout: Layout) -> float:
    """4 x population std-dev of offsets in plank lengths. Not clamped to 1."""
    offsets = layout.row_offsets
    n = len(offsets)
    if n < 2:
        return NEUTRAL_SCORE

    normalized = [o / config.plank_full_length for o in offsets]
    mean = sum(normalized) / n
    variance = sum((x - mean) ** 2 for x in normalized) / n
    return math.sqrt(variance) * RANDOMNESS_SCALE


def combine_scores(
    weights: ObjectiveWeights,
    cutting: float,
    waste: float,
    randomness: float,
) -> float:
    total_weight = weights.total()
    if total_weight <= 0.0:
        return 0.0
    return (
        weights.cutting_simplicity * cutting
        + weights.waste_minimization * waste
        + weights.visual_randomness * randomness
    ) / total_weight


def exceeds_cut_cap(config: GeometryConfig, allocation: AllocationResult) -> bool:
    cap: Optional[int] = config.max_unique_cuts
    return cap is not None and allocation.unique_cuts > cap


def score_allocation(
    config: GeometryConfig,
    weights: ObjectiveWeights,
    layout: Layout,
    allocation: AllocationResult,
) -> ScoredLayout:
    cutting = reuse_score(allocation)
    waste = waste_score(allocation)
    randomness = randomness_score(config, layout)

    total = combine_scores(weights, cutting, waste, randomness)
    if exceeds_cut_cap(config, allocation):
        total *= CAP_PENALTY

    return ScoredLayout(
        layout=layout,
        total_score=total,
        cutting_score=cutting,
        waste_score=waste,
        randomness_score=randomness,
    )


def score(config: GeometryConfig, weights: ObjectiveWeights, layout: Layout) -> ScoredLayout:
    """Score one layout. Pure: same inputs give bit-identical results."""
    allocation = allocate_material(config, iter_requirements(config, layout))
    return score_allocation(config, weights, layout, allocation)
