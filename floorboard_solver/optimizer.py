# floorboard_solver/optimizer.py
# Simulated annealing over row offsets (maximization).
#
# - one "current" walker and a separately tracked best layout
# - neighbor = one row shifted; step size shrinks linearly with progress
# - worse neighbors accepted with probability exp(delta / T), T cooled geometrically
# - stops after max_iterations; there is no convergence test
#
# Returns the best layout seen, not the layout the walk ends on.

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .layout import mutate
from .logger import get_logger
from .scorer import score
from .types import GeometryConfig, Layout, ObjectiveWeights


@dataclass(frozen=True)
class AnnealingParams:
    initial_temperature: float = 1.0
    cooling_rate: float = 0.995

    # mutation_strength = mutation_base * (1 - progress) + mutation_floor
    mutation_base: float = 0.5
    mutation_floor: float = 0.05

    # Keep per-iteration best score history (useful for plots/tests, costs memory)
    record_history: bool = False

    # Debug progress line every N iterations (0 = off)
    log_every: int = 1000


@dataclass
class AnnealResult:
    best: Layout
    best_score: float
    current: Layout
    current_score: float
    iterations: int = 0
    accepted: int = 0
    improved: int = 0
    history: List[float] = field(default_factory=list)


def mutation_strength(iteration: int, max_iterations: int, params: AnnealingParams) -> float:
    progress = iteration / max_iterations
    return params.mutation_base * (1.0 - progress) + params.mutation_floor


def acceptance_probability(delta: float, temperature: float) -> float:
    """Metropolis criterion for maximization."""
    if delta > 0.0:
        return 1.0
    if temperature <= 0.0:
        # cooled to zero (float underflow): only strict improvements pass
        return 0.0
    return math.exp(delta / temperature)


def anneal(
    config: GeometryConfig,
    weights: ObjectiveWeights,
    initial: Layout,
    max_iterations: int,
    rng: Optional[random.Random] = None,
    params: Optional[AnnealingParams] = None,
) -> AnnealResult:
    params = params or AnnealingParams()
    rng = rng if rng is not None else random.Random()
    log = get_logger()

    current = initial
    current_score = score(config, weights, current).total_score
    result = AnnealResult(best=initial, best_score=current_score, current=current, current_score=current_score)

    temperature = params.initial_temperature
    plank = config.plank_full_length

    for iteration in range(max_iterations):
        strength = mutation_strength(iteration, max_iterations, params)
        neighbor = mutate(current, plank, strength, rng)
        neighbor_score = score(config, weights, neighbor).total_score

        delta = neighbor_score - current_score
        if delta > 0.0 or rng.random() < acceptance_probability(delta, temperature):
            current = neighbor
            current_score = neighbor_score
            result.accepted += 1

            if current_score > result.best_score:
                result.best = current
                result.best_score = current_score
                result.improved += 1

        if params.record_history:
            result.history.append(result.best_score)

        if params.log_every and (iteration + 1) % params.log_every == 0:
            log.debug(
                f"anneal {iteration + 1}/{max_iterations}: T={temperature:.3g} "
                f"current={current_score:.4f} best={result.best_score:.4f}"
            )

        temperature *= params.cooling_rate

    result.current = current
    result.current_score = current_score
    result.iterations = max_iterations
    return result


def optimize(
    config: GeometryConfig,
    weights: ObjectiveWeights,
    initial: Layout,
    max_iterations: int,
    rng: Optional[random.Random] = None,
    params: Optional[AnnealingParams] = None,
) -> Layout:
    """Run simulated annealing from `initial` and return the best layout found."""
    return anneal(config, weights, initial, max_iterations, rng=rng, params=params).best
