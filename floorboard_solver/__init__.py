# floorboard_solver/__init__.py
"""
Floorboard Solver package (plank flooring layouts).

Current state:
- Layout = one start offset per plank row, in [-plank_length, 0]
- Requirement extraction: visible board lengths per row, clipped to the room
- Greedy best-fit-descending allocation with kerf and offcut reuse
- Weighted score of offcut reuse, material waste and seam randomness,
  with a soft penalty on too many distinct cut lengths
- Search: simulated annealing, best-of-N random batches (process pool),
  continuous batch search until no improvement
- Cut list / metrics reporting, CP-SAT lower bound on planks,
  CSV + JSON export and matplotlib visualization
"""

from .types import (
    GeometryConfig,
    ObjectiveWeights,
    Layout,
    CutRequirement,
    AllocationResult,
    ScoredLayout,
    Offcut,
    PlankAllocation,
    CutList,
)

from .config import (
    DEFAULTS,
    make_default_geometry,
    make_default_weights,
    rows_for_room,
)

from .layout import generate_random, mutate
from .requirements import calculate_requirements, iter_requirements
from .allocator import allocate_material
from .scorer import score

from .optimizer import (
    AnnealingParams,
    AnnealResult,
    anneal,
    optimize,
)

from .batch import generate_and_score, generate_batch_best
from .solver import SearchResult, Solver
from .cut_list import build_cut_list

from .metrics import (
    Metrics,
    compute_layout_metrics,
    score_with_metrics,
)

from .plotting import (
    PlotStyle,
    plot_layout,
    plot_cut_list,
    show_layout,
    save_layout_png,
)

from .bounds import BoundParams, BoundResult, plank_lower_bound

__all__ = [
    # types
    "GeometryConfig",
    "ObjectiveWeights",
    "Layout",
    "CutRequirement",
    "AllocationResult",
    "ScoredLayout",
    "Offcut",
    "PlankAllocation",
    "CutList",
    # config
    "DEFAULTS",
    "make_default_geometry",
    "make_default_weights",
    "rows_for_room",
    # core
    "generate_random",
    "mutate",
    "calculate_requirements",
    "iter_requirements",
    "allocate_material",
    "score",
    # search
    "AnnealingParams",
    "AnnealResult",
    "anneal",
    "optimize",
    "generate_and_score",
    "generate_batch_best",
    "SearchResult",
    "Solver",
    # reporting
    "build_cut_list",
    "Metrics",
    "compute_layout_metrics",
    "score_with_metrics",
    # plotting
    "PlotStyle",
    "plot_layout",
    "plot_cut_list",
    "show_layout",
    "save_layout_png",
    # bounds
    "BoundParams",
    "BoundResult",
    "plank_lower_bound",
]
