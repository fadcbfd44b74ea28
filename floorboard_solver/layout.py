# floorboard_solver/layout.py
# Layout generation and neighborhood moves.
# Every function takes an explicit random.Random so runs can be seeded;
# omitting it draws a fresh entropy-seeded generator per call.

from __future__ import annotations

import random
from typing import Optional

from .types import Layout


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def clamp_offset(offset: float, plank_length: float) -> float:
    """Clamp a row offset into [-plank_length, 0]."""
    if offset < -plank_length:
        return -plank_length
    if offset > 0.0:
        return 0.0
    return offset


def generate_random(num_rows: int, plank_length: float, rng: Optional[random.Random] = None) -> Layout:
    """Uniform offsets in (-plank_length, 0] for each row."""
    r = _rng(rng)
    return Layout(tuple(-r.random() * plank_length for _ in range(num_rows)))


def mutate(
    layout: Layout,
    plank_length: float,
    mutation_strength: float,
    rng: Optional[random.Random] = None,
) -> Layout:
    """
    Shift one randomly chosen row by U(-0.5, 0.5) * plank_length * mutation_strength.
    Returns a new Layout; the input is never modified.
    """
    if layout.num_rows == 0:
        return layout

    r = _rng(rng)
    idx = r.randrange(layout.num_rows)
    delta = (r.random() - 0.5) * plank_length * mutation_strength
    return layout.with_offset(idx, clamp_offset(layout.row_offsets[idx] + delta, plank_length))
