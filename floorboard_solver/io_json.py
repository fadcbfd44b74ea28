# floorboard_solver/io_json.py
# Load a flooring project JSON into GeometryConfig + ObjectiveWeights (+ optional layout).
#
# Expected JSON shape (keys mirror the solver session fields):
# {
#   "name": "Living room",
#   "plank_full_length": 2400, "plank_width": 190,
#   "room_polygon": [{"x": 0, "y": 0}, {"x": 5000, "y": 0}, {"x": 5000, "y": 4000}, {"x": 0, "y": 4000}],
#   "saw_kerf": 3, "min_cut_length": 300, "max_unique_cuts": null,
#   "optimization_weights": {"cutting_simplicity": 50, "waste_minimization": 50, "visual_randomness": 50},
#   "row_offsets": [-1200.0, -300.5, ...]
# }
# "room_height"/"room_width" may replace "room_polygon"; "num_rows" overrides the
# row count derived from room width / plank width. camelCase keys as saved by the
# web front end (plankFullLength, optimizationWeights.cuttingSimplicity, ...) are
# accepted too. Offsets are padded with 0.0 / truncated to the row count.

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DEFAULTS, room_size_from_polygon, rows_for_room
from .logger import get_logger
from .types import CutList, GeometryConfig, Layout, ObjectiveWeights, ScoredLayout
from .utils import cut_list_to_dict, scored_layout_to_dict, to_jsonable
from .validate import (
    raise_on_errors,
    validate_geometry,
    validate_layout,
    validate_weights,
)


_CAMEL_HUMP = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class ProjectLoadResult:
    name: str
    config: GeometryConfig
    weights: ObjectiveWeights
    num_rows: int
    room_width: float
    layout: Optional[Layout] = None


def _float(data: Dict[str, Any], key: str, default: float) -> float:
    v = data.get(key, default)
    if v is None:
        return float(default)
    try:
        return float(v)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be a number, got {v!r}") from None


def _snake_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Accept the front end's camelCase keys (plankFullLength, maxUniqueCuts, ...).
    A snake_case key wins when both spellings are present.
    """
    out = dict(data)
    for key, value in data.items():
        snake = _CAMEL_HUMP.sub("_", str(key)).lower()
        if snake != key and snake not in data:
            out[snake] = value
    return out


def _offset(v: Any) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        raise ValueError(f"row offset must be a number, got {v!r}") from None


def _fit_rows(offsets: List[float], num_rows: int) -> List[float]:
    """Missing rows start at 0.0, rows beyond the room are dropped."""
    if len(offsets) == num_rows:
        return offsets
    get_logger().warn(
        f"project has {len(offsets)} row offsets for {num_rows} rows; "
        + ("missing rows start at 0" if len(offsets) < num_rows else "extra rows dropped")
    )
    return (offsets + [0.0] * num_rows)[:num_rows]


def project_from_dict(data: Dict[str, Any]) -> ProjectLoadResult:
    """
    Convert a project dict to a validated ProjectLoadResult.
    Raises ValueError listing every problem found.
    """
    if not isinstance(data, dict):
        raise ValueError("project JSON must be an object")
    data = _snake_keys(data)

    polygon = data.get("room_polygon")
    if polygon:
        room_w, room_h = room_size_from_polygon(polygon)
    else:
        room_w = _float(data, "room_width", DEFAULTS.room_width)
        room_h = _float(data, "room_height", DEFAULTS.room_height)

    cap = data.get("max_unique_cuts")
    if cap is not None:
        cap = int(cap)

    config = GeometryConfig(
        plank_full_length=_float(data, "plank_full_length", DEFAULTS.plank_full_length),
        plank_width=_float(data, "plank_width", DEFAULTS.plank_width),
        room_height=room_h,
        saw_kerf=_float(data, "saw_kerf", DEFAULTS.saw_kerf),
        min_cut_length=_float(data, "min_cut_length", DEFAULTS.min_cut_length),
        max_unique_cuts=cap,
    )

    w = _snake_keys(data.get("optimization_weights") or {})
    weights = ObjectiveWeights(
        cutting_simplicity=_float(w, "cutting_simplicity", DEFAULTS.cutting_simplicity),
        waste_minimization=_float(w, "waste_minimization", DEFAULTS.waste_minimization),
        visual_randomness=_float(w, "visual_randomness", DEFAULTS.visual_randomness),
    )

    issues = validate_geometry(config) + validate_weights(weights)
    raise_on_errors(issues)
    get_logger().warn_issues(issues)

    if data.get("num_rows") is not None:
        num_rows = int(data["num_rows"])
    else:
        num_rows = rows_for_room(room_w, config.plank_width)

    layout: Optional[Layout] = None
    offsets = data.get("row_offsets")
    if offsets:
        layout = Layout(_fit_rows([_offset(o) for o in offsets], num_rows))
        raise_on_errors(validate_layout(config, layout, num_rows=num_rows))

    return ProjectLoadResult(
        name=str(data.get("name") or "Untitled Project"),
        config=config,
        weights=weights,
        num_rows=num_rows,
        room_width=room_w,
        layout=layout,
    )


def read_project_dict(path: str | Path) -> Dict[str, Any]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_project_json(path: str | Path) -> ProjectLoadResult:
    return project_from_dict(read_project_dict(path))


def project_to_dict(project: ProjectLoadResult, layout: Optional[Layout] = None) -> Dict[str, Any]:
    """Inverse of project_from_dict (room given as width/height, not polygon)."""
    c = project.config
    lay = layout if layout is not None else project.layout
    return {
        "name": project.name,
        "plank_full_length": c.plank_full_length,
        "plank_width": c.plank_width,
        "room_width": project.room_width,
        "room_height": c.room_height,
        "saw_kerf": c.saw_kerf,
        "min_cut_length": c.min_cut_length,
        "max_unique_cuts": c.max_unique_cuts,
        "num_rows": project.num_rows,
        "optimization_weights": to_jsonable(project.weights),
        "row_offsets": list(lay.row_offsets) if lay is not None else [],
    }


def save_project_json(project: ProjectLoadResult, path: str | Path, layout: Optional[Layout] = None) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(project_to_dict(project, layout), f, ensure_ascii=False, indent=2)


def save_scored_layout_json(
    scored: ScoredLayout,
    path: str | Path,
    *,
    cut_list: Optional[CutList] = None,
    indent: int = 2,
) -> None:
    """Save a scored layout (and optionally its cut list) for the front end / debugging."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = scored_layout_to_dict(scored)
    if cut_list is not None:
        payload["cut_list"] = cut_list_to_dict(cut_list)
    with path.open("w", encoding="utf-8") as f:
        json.dump(to_jsonable(payload), f, ensure_ascii=False, indent=indent)
