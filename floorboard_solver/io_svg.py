# floorboard_solver/io_svg.py
# Room outline import from an SVG drawing (CAD / vector tool export).
#
# Shape lookup:
# - first element with id room / floorplan / floor / boundary / outline that is a
#   <rect>, <polygon> or <path>
# - otherwise the first <polygon>, then <rect>, then <path> in the document
#
# Paths support M/L/H/V/Z (absolute and relative); curve segments (C/S/Q/T/A) are skipped.
# translate(...) and scale(...) on the shape itself are applied, then the points
# are converted to mm using the unit of the root width attribute (default mm)
# and shifted so the bounding box starts at (0, 0), rounded to whole mm.
#
# Example:
#   room = load_room_svg("plan.svg")
#   data["room_polygon"] = room.polygon

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .config import room_size_from_polygon


UNIT_TO_MM: Dict[str, float] = {
    "mm": 1.0,
    "cm": 10.0,
    "m": 1000.0,
    "in": 25.4,
    "pt": 0.352778,
    "px": 0.264583,  # 96 DPI
}

ROOM_IDS = ("room", "floorplan", "floor", "boundary", "outline")
SHAPE_TAGS = ("polygon", "rect", "path")

_NUMBER = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")
_UNIT = re.compile(r"[\d.]+([a-z]+)", re.IGNORECASE)
_COMMAND = re.compile(r"[MLHVZCSQTA][^MLHVZCSQTA]*", re.IGNORECASE)
_TRANSLATE = re.compile(r"translate\(\s*([\d.-]+)[\s,]*([\d.-]+)?\s*\)")
_SCALE = re.compile(r"scale\(\s*([\d.-]+)[\s,]*([\d.-]+)?\s*\)")

Point = Tuple[float, float]


@dataclass(frozen=True)
class SvgRoom:
    polygon: List[Dict[str, float]]   # [{"x": .., "y": ..}, ...] in mm, origin at (0, 0)
    width: float
    height: float
    unit: str


def _local(tag: str) -> str:
    """Tag without the XML namespace."""
    return tag.rsplit("}", 1)[-1]


def _num(text: Optional[str]) -> float:
    """Leading number of a string (like an attribute '12.5mm'), NaN if there is none."""
    m = _NUMBER.match(text or "")
    return float(m.group(0)) if m else math.nan


def _find_shape(root: ET.Element) -> Optional[ET.Element]:
    elements = list(root.iter())
    for room_id in ROOM_IDS:
        for el in elements:
            if el.get("id") == room_id and _local(el.tag) in SHAPE_TAGS:
                return el
    for tag in SHAPE_TAGS:
        for el in elements:
            if _local(el.tag) == tag:
                return el
    return None


def _detect_unit(root: ET.Element) -> str:
    m = _UNIT.search(root.get("width") or "")
    if m and m.group(1) in UNIT_TO_MM:
        return m.group(1)
    return "mm"


def _rect_points(el: ET.Element) -> List[Point]:
    x = _num(el.get("x") or "0")
    y = _num(el.get("y") or "0")
    w = _num(el.get("width") or "0")
    h = _num(el.get("height") or "0")
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


def _polygon_points(el: ET.Element) -> List[Point]:
    parts = re.split(r"\s+|,", (el.get("points") or "").strip())
    points: List[Point] = []
    for i in range(0, len(parts) - 1, 2):
        x, y = _num(parts[i]), _num(parts[i + 1])
        if not math.isnan(x) and not math.isnan(y):
            points.append((x, y))
    return points


def _path_points(el: ET.Element) -> List[Point]:
    points: List[Point] = []
    cx = cy = 0.0

    for cmd in _COMMAND.findall(el.get("d") or ""):
        kind = cmd[0]
        args = [_num(a) for a in re.split(r"[\s,]+", cmd[1:].strip()) if a]
        pairs = [(args[i], args[i + 1]) for i in range(0, len(args) - 1, 2)]

        if kind in "Mm" and pairs:
            # first pair moves, the rest are implicit line-tos
            for dx, dy in pairs:
                if kind == "M":
                    cx, cy = dx, dy
                else:
                    cx, cy = cx + dx, cy + dy
                points.append((cx, cy))
        elif kind == "L":
            for cx, cy in pairs:
                points.append((cx, cy))
        elif kind == "l":
            for dx, dy in pairs:
                cx, cy = cx + dx, cy + dy
                points.append((cx, cy))
        elif kind in "Hh":
            for v in args:
                cx = v if kind == "H" else cx + v
                points.append((cx, cy))
        elif kind in "Vv":
            for v in args:
                cy = v if kind == "V" else cy + v
                points.append((cx, cy))
        # Z/z closes the outline; the polygon is implicitly closed

    return points


def _apply_transform(el: ET.Element, points: List[Point]) -> List[Point]:
    transform = el.get("transform")
    if not transform:
        return points

    m = _TRANSLATE.search(transform)
    if m:
        tx = float(m.group(1))
        ty = float(m.group(2) or 0.0)
        points = [(x + tx, y + ty) for x, y in points]

    m = _SCALE.search(transform)
    if m:
        sx = float(m.group(1))
        sy = float(m.group(2) or m.group(1))
        points = [(x * sx, y * sy) for x, y in points]

    return points


def _round_half_up(v: float) -> float:
    return float(math.floor(v + 0.5))


def room_polygon_from_svg(svg_text: str) -> SvgRoom:
    """
    Parse an SVG document and return the room outline in mm.
    Raises ValueError for unreadable SVG, a missing shape or fewer than 3 points.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as exc:
        raise ValueError(f"Invalid SVG file: {exc}") from None

    if _local(root.tag) != "svg":
        raise ValueError("No SVG element found")

    shape = _find_shape(root)
    if shape is None:
        raise ValueError("No room shape found. Add id='room' to your shape, or include a <rect> or <polygon>.")

    kind = _local(shape.tag)
    if kind == "rect":
        points = _rect_points(shape)
    elif kind == "polygon":
        points = _polygon_points(shape)
    else:
        points = _path_points(shape)

    points = _apply_transform(shape, points)

    unit = _detect_unit(root)
    factor = UNIT_TO_MM[unit]
    points = [(x * factor, y * factor) for x, y in points]

    if len(points) < 3:
        raise ValueError("Invalid polygon: must have at least 3 points")

    min_x = min(x for x, _ in points)
    min_y = min(y for _, y in points)
    polygon = [{"x": _round_half_up(x - min_x), "y": _round_half_up(y - min_y)} for x, y in points]

    width, height = room_size_from_polygon(polygon)
    return SvgRoom(polygon=polygon, width=width, height=height, unit=unit)


def load_room_svg(path: str | Path) -> SvgRoom:
    path = Path(path)
    return room_polygon_from_svg(path.read_text(encoding="utf-8"))
