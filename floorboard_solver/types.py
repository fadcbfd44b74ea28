# floorboard_solver/types.py
# Core data structures for plank layout scoring and optimization.
# Keep this file dependency-light so it can be imported everywhere.

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


# ----------------------------
# Inputs
# ----------------------------

@dataclass(frozen=True)
class GeometryConfig:
    """Physical parameters of one solver session (lengths in one consistent unit, usually mm)."""
    plank_full_length: float
    plank_width: float
    room_height: float
    saw_kerf: float = 0.0
    min_cut_length: float = 0.0
    # Soft cap on distinct cut lengths across the whole layout (None = no cap)
    max_unique_cuts: Optional[int] = None

    def boards_per_row(self) -> int:
        """Board positions inspected per row (one extra so a rounded-off partial board is not lost)."""
        return math.ceil(self.room_height / self.plank_full_length) + 1


@dataclass(frozen=True)
class ObjectiveWeights:
    cutting_simplicity: float = 1.0
    waste_minimization: float = 1.0
    visual_randomness: float = 1.0

    def total(self) -> float:
        return self.cutting_simplicity + self.waste_minimization + self.visual_randomness


@dataclass(frozen=True)
class Layout:
    """
    One offset per row. An offset o in [-plank_full_length, 0] means the first
    board of the row starts o below the visible edge of the room.
    """
    row_offsets: Tuple[float, ...] = ()

    def __post_init__(self):
        # accept any sequence, store an immutable tuple
        object.__setattr__(self, "row_offsets", tuple(float(o) for o in self.row_offsets))

    @property
    def num_rows(self) -> int:
        return len(self.row_offsets)

    def with_offset(self, row: int, offset: float) -> "Layout":
        offsets = list(self.row_offsets)
        offsets[row] = float(offset)
        return Layout(tuple(offsets))


# ----------------------------
# Derived values
# ----------------------------

@dataclass(frozen=True)
class CutRequirement:
    """A visible board length needed in one row at one board position."""
    length: float
    row_index: int = 0
    board_index: int = 0
    position: str = "full"  # "top", "bottom" or "full"


@dataclass(frozen=True)
class AllocationResult:
    waste: float
    total_material: float
    offcuts_reused: int
    offcuts_wasted: int
    unique_cuts: int

    @property
    def efficiency(self) -> float:
        """Installed share of consumed material, in percent (0 when nothing was consumed)."""
        if self.total_material <= 0:
            return 0.0
        return (self.total_material - self.waste) / self.total_material * 100.0

    def planks_used(self, plank_full_length: float) -> int:
        if plank_full_length <= 0:
            return 0
        return int(round(self.total_material / plank_full_length))


@dataclass(frozen=True)
class ScoredLayout:
    layout: Layout
    total_score: float
    cutting_score: float
    waste_score: float
    randomness_score: float


# ----------------------------
# Cut list (detailed allocation report)
# ----------------------------

@dataclass
class Offcut:
    length: float
    source_plank: int
    source_row: int
    source_board: int
    allocated: bool = False
    allocated_to: Optional[Tuple[int, int]] = None  # (row_index, board_index)


@dataclass
class PlankAllocation:
    plank_number: int
    cuts: List[float] = field(default_factory=list)
    offcut_length: float = 0.0


@dataclass
class CutList:
    full_planks: int
    cuts: Dict[float, int]
    offcuts: List[Offcut]
    waste: float
    total_material: float
    efficiency: float
    unique_cuts: int
    requirements: List[CutRequirement]
    plank_allocations: List[PlankAllocation]

    def total_cut_pieces(self) -> int:
        return sum(self.cuts.values())

    def unused_offcut_length(self) -> float:
        return sum(o.length for o in self.offcuts if not o.allocated)
