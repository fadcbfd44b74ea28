# floorboard_solver/requirements.py
# Requirement extraction: which visible board lengths does a layout need?
#
# Each row starts its first board at the row offset (<= 0) and continues with
# full planks end to end. Every board is clipped to the visible room span
# [0, room_height); what remains is one cut requirement.

from __future__ import annotations

from typing import Iterator, List

from .types import CutRequirement, GeometryConfig, Layout


def _position(board_start: float, board_end: float, room_height: float) -> str:
    if board_start < 0 and board_end <= room_height:
        return "top"
    if board_start >= 0 and board_end > room_height:
        return "bottom"
    return "full"


def iter_requirements(config: GeometryConfig, layout: Layout) -> Iterator[CutRequirement]:
    """Yield requirements row by row, top board first."""
    plank = config.plank_full_length
    height = config.room_height
    num_boards = config.boards_per_row()

    for row_index, offset in enumerate(layout.row_offsets):
        current_y = offset
        for board_index in range(num_boards):
            board_start = current_y
            board_end = current_y + plank

            visible_start = max(board_start, 0.0)
            visible_end = min(board_end, height)

            if visible_end > visible_start:
                yield CutRequirement(
                    length=visible_end - visible_start,
                    row_index=row_index,
                    board_index=board_index,
                    position=_position(board_start, board_end, height),
                )

            current_y += plank


def calculate_requirements(config: GeometryConfig, layout: Layout) -> List[CutRequirement]:
    return list(iter_requirements(config, layout))
