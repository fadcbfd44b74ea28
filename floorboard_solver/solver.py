# floorboard_solver/solver.py
# Session object for a front end: geometry, weights and row count are fixed once,
# then layouts are generated, scored and optimized against them.
#
# Example:
#   solver = Solver(make_default_geometry(), make_default_weights(), num_rows=27, seed=1)
#   start = solver.generate_random()
#   best = solver.optimize(start, max_iterations=10_000)
#   print(solver.score_layout(best).total_score)

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from .batch import generate_and_score, generate_batch_best
from .config import DEFAULTS
from .layout import generate_random
from .logger import get_logger
from .optimizer import AnnealingParams, anneal
from .scorer import score
from .types import GeometryConfig, Layout, ObjectiveWeights, ScoredLayout
from .validate import raise_on_errors, validate_layout, validate_session


CandidateCallback = Callable[[Layout, float, int], None]


@dataclass
class SearchResult:
    best: ScoredLayout
    evaluated: int
    improvements: int
    stopped_by: str  # "no_improvement" or "max_candidates"


class Solver:
    def __init__(
        self,
        config: GeometryConfig,
        weights: ObjectiveWeights,
        num_rows: int,
        *,
        seed: Optional[int] = None,
        max_workers: Optional[int] = None,
        anneal_params: Optional[AnnealingParams] = None,
    ) -> None:
        issues = validate_session(config, weights, num_rows)
        raise_on_errors(issues)
        get_logger().warn_issues(issues)

        self.config = config
        self.weights = weights
        self.num_rows = num_rows
        self.max_workers = max_workers
        self.anneal_params = anneal_params or AnnealingParams()
        self.rng = random.Random(seed)

        get_logger().info(
            f"Creating solver with weights: cutting={weights.cutting_simplicity}, "
            f"waste={weights.waste_minimization}, randomness={weights.visual_randomness}"
        )

    def _check_layout(self, layout: Layout) -> None:
        raise_on_errors(validate_layout(self.config, layout, num_rows=self.num_rows))

    def generate_random(self) -> Layout:
        return generate_random(self.num_rows, self.config.plank_full_length, self.rng)

    def optimize(self, layout: Layout, max_iterations: int = DEFAULTS.anneal_iterations) -> Layout:
        self._check_layout(layout)
        res = anneal(
            self.config,
            self.weights,
            layout,
            int(max_iterations),
            rng=self.rng,
            params=self.anneal_params,
        )
        get_logger().info(
            f"Annealing: {res.iterations} iterations, accepted={res.accepted}, "
            f"best={res.best_score:.4f}"
        )
        return res.best

    def score_layout(self, layout: Layout) -> ScoredLayout:
        self._check_layout(layout)
        return score(self.config, self.weights, layout)

    def generate_and_score(self) -> ScoredLayout:
        return generate_and_score(
            self.num_rows, self.config.plank_full_length, self.config, self.weights, self.rng
        )

    def generate_batch_best(self, batch_size: int = DEFAULTS.batch_size) -> ScoredLayout:
        return generate_batch_best(
            batch_size,
            self.num_rows,
            self.config.plank_full_length,
            self.config,
            self.weights,
            rng=self.rng,
            max_workers=self.max_workers,
        )

    def search(
        self,
        initial: Layout,
        *,
        batch_size: int = DEFAULTS.batch_size,
        max_no_improvement: int = DEFAULTS.max_no_improvement,
        max_candidates: Optional[int] = None,
        on_candidate: Optional[CandidateCallback] = None,
    ) -> SearchResult:
        """
        Keep drawing random batches until `max_no_improvement` candidates in a row
        brought nothing better (or `max_candidates` were evaluated in total).
        on_candidate(layout, score, evaluated) fires on every improvement.
        """
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")

        log = get_logger()
        best = self.score_layout(initial)
        evaluated = 0
        no_improvement = 0
        improvements = 0

        while True:
            if no_improvement >= max_no_improvement:
                stopped_by = "no_improvement"
                break
            if max_candidates is not None and evaluated >= max_candidates:
                stopped_by = "max_candidates"
                break

            candidate = self.generate_batch_best(batch_size)
            evaluated += batch_size

            if candidate.total_score > best.total_score:
                best = candidate
                no_improvement = 0
                improvements += 1
                log.info(f"Search: improved to {best.total_score:.4f} after {evaluated} candidates")
                if on_candidate is not None:
                    on_candidate(best.layout, best.total_score, evaluated)
            else:
                no_improvement += batch_size

        return SearchResult(best=best, evaluated=evaluated, improvements=improvements, stopped_by=stopped_by)
