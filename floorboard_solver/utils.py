# floorboard_solver/utils.py
# Small utilities used across the project:
# - timing context manager
# - JSON-friendly conversion of layouts, scores and cut lists
#
# Keeps dependencies minimal (stdlib only).

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterator

from .types import CutList, ScoredLayout


@contextmanager
def timer(label: str = "timer") -> Iterator[Dict[str, float]]:
    """
    Usage:
      with timer("anneal") as t:
          ...
      print(t["seconds"])
    """
    t0 = time.perf_counter()
    payload: Dict[str, float] = {}
    try:
        yield payload
    finally:
        payload["seconds"] = time.perf_counter() - t0


def to_jsonable(obj: Any) -> Any:
    """Convert dataclasses and other objects to JSON-serializable structures."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return to_jsonable(asdict(obj))
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(x) for x in obj]
    if isinstance(obj, Path):
        return str(obj)
    return obj


def scored_layout_to_dict(scored: ScoredLayout) -> Dict[str, Any]:
    """Wire shape used by the front end: {"layout": {"row_offsets": [...]}, "total_score": ...}."""
    return {
        "layout": {"row_offsets": list(scored.layout.row_offsets)},
        "total_score": scored.total_score,
        "cutting_score": scored.cutting_score,
        "waste_score": scored.waste_score,
        "randomness_score": scored.randomness_score,
    }


def cut_list_to_dict(cut_list: CutList) -> Dict[str, Any]:
    return {
        "full_planks": cut_list.full_planks,
        "cuts": [{"length": k, "count": v} for k, v in cut_list.cuts.items()],
        "waste": cut_list.waste,
        "total_material": cut_list.total_material,
        "efficiency": cut_list.efficiency,
        "unique_cuts": cut_list.unique_cuts,
        "unused_offcut_length": cut_list.unused_offcut_length(),
        "plank_allocations": [
            {"plank_number": p.plank_number, "cuts": list(p.cuts), "offcut_length": p.offcut_length}
            for p in cut_list.plank_allocations
        ],
        "offcuts": [
            {
                "length": o.length,
                "source_plank": o.source_plank,
                "source_row": o.source_row,
                "source_board": o.source_board,
                "allocated": o.allocated,
                "allocated_to": list(o.allocated_to) if o.allocated_to is not None else None,
            }
            for o in cut_list.offcuts
        ],
    }
