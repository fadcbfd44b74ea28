# floorboard_solver/bounds.py
# CP-SAT (OR-Tools) lower bound on the number of planks a layout needs.
#
# Model (1-D bin packing, relaxed so the answer is a true lower bound):
# - every whole-plank piece takes one plank of its own
# - every cut piece is an item of size (length + kerf), floored to integer units
# - a plank is a bin of capacity (plank + kerf), ceiled; the first cut of a plank
#   does not lose a kerf to a neighbour, hence the extra kerf
# - the min_cut_length rule for kept offcuts is ignored (relaxation)
#
# Used to judge how far the greedy allocator is from the best possible material use.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ortools.sat.python import cp_model

from .allocator import allocate_material, is_full_length
from .config import DEFAULTS
from .requirements import calculate_requirements
from .types import GeometryConfig, Layout


@dataclass(frozen=True)
class BoundParams:
    time_limit_s: float = DEFAULTS.bound_time_limit_s
    # integer units per length unit (1000 -> micrometres for mm input)
    scale: int = 1000
    num_search_workers: int = 2


@dataclass(frozen=True)
class BoundResult:
    greedy_planks: int
    lower_bound: int
    full_boards: int
    status: str  # "OPTIMAL", "FEASIBLE", "UNKNOWN", "TRIVIAL"

    @property
    def gap(self) -> int:
        """Planks the greedy allocation may use beyond the best possible."""
        return max(0, self.greedy_planks - self.lower_bound)

    @property
    def proven_optimal(self) -> bool:
        return self.gap == 0


def _min_bins(sizes: List[int], capacity: int, upper: int, params: BoundParams) -> Tuple[int, str]:
    """Minimum number of bins for `sizes`. Returns (bound, status name)."""
    n = len(sizes)
    nb = max(1, upper)

    m = cp_model.CpModel()

    x = [[m.NewBoolVar(f"x[{i},{b}]") for b in range(nb)] for i in range(n)]
    used = [m.NewBoolVar(f"used[{b}]") for b in range(nb)]

    for i in range(n):
        m.AddExactlyOne(x[i])

    for b in range(nb):
        m.Add(sum(sizes[i] * x[i][b] for i in range(n)) <= capacity * used[b])

    # used bins are packed at low indices (symmetry break)
    for b in range(nb - 1):
        m.Add(used[b] >= used[b + 1])

    # item i can only go to bins 0..i (further symmetry break for first-fit style orders)
    for i in range(n):
        for b in range(i + 1, nb):
            m.Add(x[i][b] == 0)

    m.Minimize(sum(used))

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = float(params.time_limit_s)
    solver.parameters.num_search_workers = int(params.num_search_workers)

    status = solver.Solve(m)
    name = solver.StatusName(status)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        # No proof found in time: fall back to the size-based bound
        return int(math.ceil(sum(sizes) / capacity)), name

    return int(math.ceil(solver.BestObjectiveBound() - 1e-9)), name


def plank_lower_bound(
    config: GeometryConfig,
    layout: Layout,
    params: Optional[BoundParams] = None,
) -> BoundResult:
    params = params or BoundParams()
    scale = params.scale

    reqs = calculate_requirements(config, layout)
    greedy = allocate_material(config, reqs).planks_used(config.plank_full_length)

    full = [r for r in reqs if is_full_length(config, r.length)]
    pieces = [r for r in reqs if not is_full_length(config, r.length)]

    if not pieces:
        return BoundResult(greedy_planks=greedy, lower_bound=len(full), full_boards=len(full), status="TRIVIAL")

    sizes = [int(math.floor((r.length + config.saw_kerf) * scale)) for r in pieces]
    capacity = int(math.ceil((config.plank_full_length + config.saw_kerf) * scale))
    # largest first: the i-th item never needs a bin beyond index i
    sizes.sort(reverse=True)

    bins, status = _min_bins(sizes, capacity, upper=min(len(sizes), max(1, greedy - len(full))), params=params)
    return BoundResult(
        greedy_planks=greedy,
        lower_bound=len(full) + bins,
        full_boards=len(full),
        status=status,
    )
