# floorboard_solver/batch.py
# Random batch search: generate N independent layouts, score each, keep the best.
#
# Work is split into chunks, each chunk owns a random.Random seeded from the
# caller's generator. With max_workers > 1 chunks run in a process pool;
# config and weights are frozen and travel to workers by pickling.
# The reduction keeps the first of equal scores. A NaN score is logged and
# compared as "equal" so it never aborts the batch; a finite score still
# replaces a NaN best.

from __future__ import annotations

import math
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .layout import generate_random
from .logger import get_logger
from .scorer import score
from .types import GeometryConfig, ObjectiveWeights, ScoredLayout


@dataclass(frozen=True)
class _ChunkTask:
    seed: int
    count: int
    num_rows: int
    plank_length: float
    config: GeometryConfig
    weights: ObjectiveWeights


def generate_and_score(
    num_rows: int,
    plank_length: float,
    config: GeometryConfig,
    weights: ObjectiveWeights,
    rng: Optional[random.Random] = None,
) -> ScoredLayout:
    layout = generate_random(num_rows, plank_length, rng)
    return score(config, weights, layout)


def compare_scores(a: ScoredLayout, b: ScoredLayout) -> int:
    """-1 / 0 / 1 like a.total_score vs b.total_score; NaN compares equal."""
    sa, sb = a.total_score, b.total_score
    if math.isnan(sa) or math.isnan(sb):
        get_logger().error(f"NaN detected in scores: a={sa}, b={sb}")
        return 0
    if sa < sb:
        return -1
    if sa > sb:
        return 1
    return 0


def pick_best(candidates: Iterable[ScoredLayout]) -> Optional[ScoredLayout]:
    """Highest total score; first wins ties. A NaN best gives way to any finite score."""
    best: Optional[ScoredLayout] = None
    for cand in candidates:
        if best is None or compare_scores(cand, best) > 0:
            best = cand
        elif math.isnan(best.total_score) and not math.isnan(cand.total_score):
            best = cand
    return best


def _score_chunk(task: _ChunkTask) -> ScoredLayout:
    rng = random.Random(task.seed)
    return pick_best(
        generate_and_score(task.num_rows, task.plank_length, task.config, task.weights, rng)
        for _ in range(task.count)
    )


def _split(total: int, parts: int) -> List[int]:
    parts = max(1, min(parts, total))
    base, extra = divmod(total, parts)
    return [base + (1 if i < extra else 0) for i in range(parts)]


def generate_batch_best(
    batch_size: int,
    num_rows: int,
    plank_length: float,
    config: GeometryConfig,
    weights: ObjectiveWeights,
    rng: Optional[random.Random] = None,
    max_workers: Optional[int] = None,
) -> ScoredLayout:
    """
    Best of `batch_size` random layouts.
    max_workers None or 1 runs in-process; > 1 fans out to a process pool.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")

    rng = rng if rng is not None else random.Random()
    workers = 1 if max_workers is None else max(1, int(max_workers))

    tasks = [
        _ChunkTask(
            seed=rng.getrandbits(64),
            count=count,
            num_rows=num_rows,
            plank_length=plank_length,
            config=config,
            weights=weights,
        )
        for count in _split(batch_size, workers)
    ]

    get_logger().debug(f"batch of {batch_size}: {len(tasks)} chunk(s) {[t.count for t in tasks]}")

    if len(tasks) <= 1:
        results = [_score_chunk(t) for t in tasks]
    else:
        # map() keeps submission order, so the reduction is reproducible for a given seed
        with ProcessPoolExecutor(max_workers=len(tasks)) as ex:
            results = list(ex.map(_score_chunk, tasks))

    best = pick_best(results)
    if best is None:
        raise RuntimeError(f"batch of {batch_size} produced no candidates")
    return best
