# floorboard_solver/config.py
# Centralized defaults and configuration helpers.
# Keeps "magic numbers" (kerf, plank size, scoring constants, weights) in one place.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple

from .types import GeometryConfig, ObjectiveWeights


# Scoring / allocation constants. Changing any of these changes the objective function.
FULL_LENGTH_TOLERANCE = 0.1   # a piece this close to plank length is a whole plank, not a cut
UNIQUE_CUT_RESOLUTION = 10    # distinct cut lengths are compared at 1/10 unit
NEUTRAL_SCORE = 0.5
RANDOMNESS_SCALE = 4.0
CAP_PENALTY = 0.01


@dataclass(frozen=True)
class Defaults:
    # Typical engineered flooring board (mm)
    plank_full_length: float = 2400.0
    plank_width: float = 190.0

    # Room used when no geometry is given (mm)
    room_width: float = 5000.0
    room_height: float = 4000.0

    # Typical mitre/track saw kerf (mm)
    saw_kerf: float = 3.0
    # Offcuts shorter than this go to the bin (mm)
    min_cut_length: float = 300.0

    # Objective weights, percent-style as entered in the front end
    cutting_simplicity: float = 50.0
    waste_minimization: float = 50.0
    visual_randomness: float = 50.0

    # Search budgets
    anneal_iterations: int = 10_000
    batch_size: int = 1000
    max_no_improvement: int = 5_000_000
    bound_time_limit_s: float = 10.0


DEFAULTS = Defaults()


def make_default_geometry(
    *,
    plank_full_length: Optional[float] = None,
    plank_width: Optional[float] = None,
    room_height: Optional[float] = None,
    saw_kerf: Optional[float] = None,
    min_cut_length: Optional[float] = None,
    max_unique_cuts: Optional[int] = None,
) -> GeometryConfig:
    """
    Convenience factory for a typical flooring job.
    """
    return GeometryConfig(
        plank_full_length=float(plank_full_length if plank_full_length is not None else DEFAULTS.plank_full_length),
        plank_width=float(plank_width if plank_width is not None else DEFAULTS.plank_width),
        room_height=float(room_height if room_height is not None else DEFAULTS.room_height),
        saw_kerf=float(saw_kerf if saw_kerf is not None else DEFAULTS.saw_kerf),
        min_cut_length=float(min_cut_length if min_cut_length is not None else DEFAULTS.min_cut_length),
        max_unique_cuts=max_unique_cuts,
    )


def make_default_weights(
    *,
    cutting_simplicity: Optional[float] = None,
    waste_minimization: Optional[float] = None,
    visual_randomness: Optional[float] = None,
) -> ObjectiveWeights:
    return ObjectiveWeights(
        cutting_simplicity=float(
            cutting_simplicity if cutting_simplicity is not None else DEFAULTS.cutting_simplicity
        ),
        waste_minimization=float(
            waste_minimization if waste_minimization is not None else DEFAULTS.waste_minimization
        ),
        visual_randomness=float(
            visual_randomness if visual_randomness is not None else DEFAULTS.visual_randomness
        ),
    )


def rows_for_room(room_width: float, plank_width: float) -> int:
    """Number of plank rows needed to cover the room width (partial last row counts)."""
    if plank_width <= 0:
        raise ValueError("plank_width must be > 0")
    if room_width <= 0:
        return 0
    return int(math.ceil(room_width / plank_width))


def room_size_from_polygon(points: Iterable[Mapping[str, float]]) -> Tuple[float, float]:
    """
    Bounding box of a room outline given as [{"x": .., "y": ..}, ...] -> (width, height).
    Fewer than two points falls back to the default room.
    """
    pts = list(points)
    if len(pts) < 2:
        return DEFAULTS.room_width, DEFAULTS.room_height
    xs = [float(p["x"]) for p in pts]
    ys = [float(p["y"]) for p in pts]
    return max(xs) - min(xs), max(ys) - min(ys)


def parse_room_text(room_text: str) -> Tuple[float, float]:
    """
    Parse '5000x4000' -> (5000.0, 4000.0) as (width, height)
    """
    s = room_text.lower().replace(" ", "")
    if "x" not in s:
        raise ValueError("room_text must be like '5000x4000'")
    a, b = s.split("x", 1)
    return float(a), float(b)


def parse_weights_text(weights_text: str) -> ObjectiveWeights:
    """
    Parse 'cutting,waste,randomness' -> ObjectiveWeights(...)
    """
    vals = [v.strip() for v in weights_text.split(",") if v.strip() != ""]
    if len(vals) != 3:
        raise ValueError("weights_text must be 'cutting,waste,randomness' (e.g. '50,50,50')")
    c, w, r = (float(x) for x in vals)
    return ObjectiveWeights(cutting_simplicity=c, waste_minimization=w, visual_randomness=r)
