# floorboard_solver/test_validate.py
# Boundary validation and the config parsing helpers.

from __future__ import annotations

import math

import pytest

from floorboard_solver.config import (
    DEFAULTS,
    make_default_geometry,
    make_default_weights,
    parse_room_text,
    parse_weights_text,
    room_size_from_polygon,
    rows_for_room,
)
from floorboard_solver.types import GeometryConfig, Layout, ObjectiveWeights
from floorboard_solver.validate import (
    ValidationIssue,
    raise_on_errors,
    validate_geometry,
    validate_layout,
    validate_session,
    validate_weights,
)


def test_defaults_are_clean() -> None:
    config = make_default_geometry()
    assert config.plank_full_length == DEFAULTS.plank_full_length
    assert config.boards_per_row() == 3  # ceil(4000 / 2400) + 1
    assert validate_session(config, make_default_weights(), 27) == []


def test_geometry_errors_name_the_field() -> None:
    config = GeometryConfig(plank_full_length=2400.0, plank_width=-1.0, room_height=math.nan, saw_kerf=-3.0)
    fields = {i.field for i in validate_geometry(config) if i.level == "ERROR"}
    assert fields == {"plank_width", "room_height", "saw_kerf"}


def test_geometry_warnings() -> None:
    issues = validate_geometry(GeometryConfig(plank_full_length=100.0, plank_width=10.0, room_height=500.0, saw_kerf=150.0))
    assert [i.level for i in issues] == ["WARN"]
    raise_on_errors(issues)


def test_bad_cut_cap() -> None:
    config = GeometryConfig(plank_full_length=2400.0, plank_width=190.0, room_height=4000.0, max_unique_cuts=-1)
    assert validate_geometry(config)[0].field == "max_unique_cuts"


def test_weights() -> None:
    assert validate_weights(ObjectiveWeights(0.0, 0.0, 0.0))[0].level == "WARN"
    assert validate_weights(ObjectiveWeights(1.0, math.inf, 1.0))[0].level == "ERROR"


def test_layout_checks() -> None:
    config = make_default_geometry()
    assert validate_layout(config, Layout([0.0, -2400.0]), num_rows=2) == []
    assert len(validate_layout(config, Layout([0.5, -2400.1, math.nan]))) == 3
    assert validate_layout(config, Layout([0.0]), num_rows=2)[0].field == "row_offsets"


def test_raise_on_errors_lists_all() -> None:
    issues = [
        ValidationIssue("ERROR", "first", "a"),
        ValidationIssue("WARN", "only a warning"),
        ValidationIssue("ERROR", "second", "b"),
    ]
    with pytest.raises(ValueError) as exc:
        raise_on_errors(issues)
    msg = str(exc.value)
    assert "first" in msg and "second" in msg
    assert "only a warning" not in msg


def test_rows_for_room() -> None:
    assert rows_for_room(5000.0, 190.0) == 27
    assert rows_for_room(570.0, 190.0) == 3
    assert rows_for_room(0.0, 190.0) == 0
    with pytest.raises(ValueError):
        rows_for_room(5000.0, 0.0)


def test_room_parsing() -> None:
    assert parse_room_text("6000 x 3500") == (6000.0, 3500.0)
    with pytest.raises(ValueError):
        parse_room_text("6000")
    assert room_size_from_polygon([{"x": 100, "y": 50}, {"x": 400, "y": 250}, {"x": 250, "y": 400}]) == (300.0, 350.0)
    assert room_size_from_polygon([{"x": 1, "y": 1}]) == (DEFAULTS.room_width, DEFAULTS.room_height)


def test_weights_parsing() -> None:
    w = parse_weights_text("20, 60,20")
    assert w == ObjectiveWeights(20.0, 60.0, 20.0)
    with pytest.raises(ValueError):
        parse_weights_text("1,2")
