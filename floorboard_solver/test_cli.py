# floorboard_solver/test_cli.py
# Command line runner: summary output and room import.

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

from floorboard_solver.cli import main  # noqa: E402
from floorboard_solver.io_json import load_project_json  # noqa: E402
from floorboard_solver.logger import set_enabled  # noqa: E402


def test_summary_lines(capsys) -> None:
    main(["--example", "--quiet", "--mode", "batch", "--batch", "10", "--seed", "1", "--room", "950x3200"])
    out = capsys.readouterr().out
    assert "Project: Example" in out
    assert "Score: total=" in out
    assert "Planks:" in out
    set_enabled(True)


def test_room_from_svg(tmp_path, capsys) -> None:
    svg = tmp_path / "plan.svg"
    svg.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" width="500cm"><rect id="room" width="114" height="280"/></svg>',
        encoding="utf-8",
    )
    saved = tmp_path / "saved.json"
    main(
        [
            "--example",
            "--room_svg", str(svg),
            "--mode", "batch",
            "--batch", "10",
            "--seed", "2",
            "--save_project", str(saved),
        ]
    )
    assert "Room from SVG: 1140 x 2800 mm" in capsys.readouterr().out

    project = load_project_json(saved)
    assert project.room_width == 1140.0
    assert project.config.room_height == 2800.0
    assert project.num_rows == 6
