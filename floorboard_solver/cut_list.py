# floorboard_solver/cut_list.py
# Detailed cut list for one layout: what to saw from which plank.
#
# Runs the same allocator as the scorer with a recorder attached, so the
# totals here always match the score that was shown for the layout.

from __future__ import annotations

from typing import Dict, List, Optional

from .allocator import allocate_material
from .requirements import calculate_requirements
from .types import (
    CutList,
    CutRequirement,
    GeometryConfig,
    Layout,
    Offcut,
    PlankAllocation,
)


def cut_key(length: float) -> float:
    """Cut lengths are grouped at 1/10 unit."""
    return round(length, 1)


class CutPlanRecorder:
    """Collects allocator events into plank allocations, offcuts and cut counts."""

    def __init__(self) -> None:
        self.full_planks = 0
        self.cuts: Dict[float, int] = {}
        self.offcuts: List[Offcut] = []
        self.allocations: Dict[int, PlankAllocation] = {}

    def _count_cut(self, req: CutRequirement) -> None:
        k = cut_key(req.length)
        self.cuts[k] = self.cuts.get(k, 0) + 1

    def on_full_board(self, req: CutRequirement) -> None:
        self.full_planks += 1

    def on_new_plank(self, req: CutRequirement, plank_number: int) -> None:
        self.full_planks += 1
        self._count_cut(req)
        self.allocations[plank_number] = PlankAllocation(plank_number=plank_number, cuts=[req.length])

    def on_reuse(self, req: CutRequirement, plank_number: int, offcut: Optional[Offcut]) -> None:
        self._count_cut(req)
        if offcut is not None:
            offcut.allocated = True
            offcut.allocated_to = (req.row_index, req.board_index)
        alloc = self.allocations.get(plank_number)
        if alloc is not None:
            alloc.cuts.append(req.length)

    def on_offcut(
        self,
        req: CutRequirement,
        plank_number: int,
        length: float,
        parent: Optional[Offcut] = None,
    ) -> Offcut:
        # a leftover of a reused offcut keeps the origin of that offcut
        origin = (parent.source_row, parent.source_board) if parent is not None else (req.row_index, req.board_index)
        offcut = Offcut(
            length=length,
            source_plank=plank_number,
            source_row=origin[0],
            source_board=origin[1],
        )
        self.offcuts.append(offcut)
        return offcut

    def on_unused(self, plank_number: int, length: float, offcut: Optional[Offcut]) -> None:
        alloc = self.allocations.get(plank_number)
        if alloc is not None:
            alloc.offcut_length = length


def build_cut_list(config: GeometryConfig, layout: Layout) -> CutList:
    requirements = calculate_requirements(config, layout)
    recorder = CutPlanRecorder()
    allocation = allocate_material(config, requirements, recorder=recorder)

    return CutList(
        full_planks=recorder.full_planks,
        cuts=dict(sorted(recorder.cuts.items(), key=lambda kv: -kv[0])),
        offcuts=recorder.offcuts,
        waste=allocation.waste,
        total_material=allocation.total_material,
        efficiency=allocation.efficiency,
        unique_cuts=allocation.unique_cuts,
        requirements=requirements,
        plank_allocations=[recorder.allocations[k] for k in sorted(recorder.allocations)],
    )
