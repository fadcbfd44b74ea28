# floorboard_solver/tests_smoke.py
# Very small smoke tests you can run with:
#   python -m floorboard_solver.tests_smoke
#
# These are not full unit tests, but they quickly tell you if
# the solver modes, exports, bound and CLI are wired correctly.

from __future__ import annotations

import tempfile
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from floorboard_solver.cli import main as cli_main  # noqa: E402
from floorboard_solver.io_json import load_project_json, project_from_dict  # noqa: E402
from floorboard_solver.logger import set_enabled  # noqa: E402
from floorboard_solver.run import run_project  # noqa: E402
from floorboard_solver.validate import raise_on_errors, validate_layout  # noqa: E402


def _project():
    return project_from_dict(
        {
            "name": "Smoke",
            "room_width": 950,
            "room_height": 3200,
            "plank_full_length": 2400,
            "plank_width": 190,
            "saw_kerf": 3,
            "min_cut_length": 300,
            "row_offsets": [-100, -900, -1700, -2300, -500],
        }
    )


def test_all_modes() -> None:
    set_enabled(False)
    project = _project()
    for mode in ("score", "batch", "search", "optimize"):
        res = run_project(project, mode=mode, iterations=200, batch_size=20, max_candidates=60, seed=1)
        raise_on_errors(validate_layout(project.config, res.scored.layout, num_rows=project.num_rows))

        assert res.mode == mode
        assert res.metrics.planks_used == res.cut_list.full_planks
        assert res.scored.total_score > 0
        assert res.seconds >= 0

    base = run_project(project, mode="score").scored.total_score
    assert run_project(project, mode="optimize", iterations=200, seed=1).scored.total_score >= base
    set_enabled(True)


def test_exports_bound_and_plot() -> None:
    set_enabled(False)
    with tempfile.TemporaryDirectory() as td:
        res, fig = run_project(
            _project(),
            mode="batch",
            batch_size=10,
            seed=2,
            bound=True,
            bound_time_limit_s=5,
            out_dir=td,
            export_prefix="smoke",
            show_plot=True,
        )
        out = Path(td)
        for name in ("smoke_requirements.csv", "smoke_cuts.csv", "smoke_summary.csv", "smoke.json"):
            assert (out / name).exists()

    assert fig is not None
    assert res.bound is not None
    assert res.bound.lower_bound <= res.bound.greedy_planks
    set_enabled(True)


def test_cli_round_trip() -> None:
    with tempfile.TemporaryDirectory() as td:
        saved = Path(td) / "saved.json"
        png = Path(td) / "layout.png"
        cli_main(
            [
                "--example",
                "--quiet",
                "--mode", "batch",
                "--batch", "20",
                "--seed", "4",
                "--room", "1140x2800",
                "--weights", "20,60,20",
                "--save_project", str(saved),
                "--png", str(png),
                "--print_cuts",
            ]
        )
        project = load_project_json(saved)
        assert project.num_rows == 6  # 1140 / 190
        assert project.config.room_height == 2800.0
        assert project.weights.waste_minimization == 60.0
        assert project.layout is not None and project.layout.num_rows == 6
        assert png.exists()

        # score the saved offsets again through the CLI
        cli_main(["--project", str(saved), "--quiet", "--mode", "score"])
    set_enabled(True)


def main() -> None:
    print("Running smoke tests...")
    test_all_modes()
    test_exports_bound_and_plot()
    test_cli_round_trip()
    print("OK")


if __name__ == "__main__":
    main()
