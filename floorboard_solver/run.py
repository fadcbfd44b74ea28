# floorboard_solver/run.py
# High-level convenience runner that ties together:
# - solver session (anneal / random batch / continuous search / plain scoring)
# - cut list + metrics summary
# - optional CP-SAT material lower bound
# - optional CSV + JSON export
# - matplotlib visualization
#
# Example:
#   from floorboard_solver.io_json import load_project_json
#   from floorboard_solver.run import run_project
#   res = run_project(load_project_json("room.json"), mode="optimize", iterations=20000, seed=7)

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .bounds import BoundParams, BoundResult, plank_lower_bound
from .config import DEFAULTS
from .cut_list import build_cut_list
from .io_csv import export_all
from .io_json import ProjectLoadResult, save_scored_layout_json
from .logger import get_logger
from .metrics import Metrics, score_with_metrics
from .plotting import PlotStyle, plot_layout
from .solver import Solver
from .types import CutList, ScoredLayout
from .utils import timer


MODES = ("optimize", "batch", "search", "score")


@dataclass(frozen=True)
class RunResult:
    mode: str
    scored: ScoredLayout
    metrics: Metrics
    cut_list: CutList
    seconds: float
    bound: Optional[BoundResult] = None


def run_project(
    project: ProjectLoadResult,
    *,
    mode: str = "optimize",
    iterations: int = DEFAULTS.anneal_iterations,
    batch_size: int = DEFAULTS.batch_size,
    max_candidates: Optional[int] = None,
    seed: Optional[int] = None,
    max_workers: Optional[int] = None,
    bound: bool = False,
    bound_time_limit_s: float = DEFAULTS.bound_time_limit_s,
    out_dir: Optional[str | Path] = None,
    export_prefix: str = "layout",
    show_plot: bool = False,
    plot_style: Optional[PlotStyle] = None,
):
    """
    Run one solver mode end-to-end on a loaded project.

    Returns RunResult. If show_plot=True, returns (RunResult, fig).
    """
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {mode!r}")

    log = get_logger()
    solver = Solver(project.config, project.weights, project.num_rows, seed=seed, max_workers=max_workers)

    with timer(mode) as t:
        if mode == "score":
            if project.layout is None:
                raise ValueError("mode 'score' needs row_offsets in the project")
            layout = project.layout
        elif mode == "batch":
            layout = solver.generate_batch_best(batch_size).layout
        elif mode == "search":
            start = project.layout if project.layout is not None else solver.generate_random()
            res = solver.search(
                start,
                batch_size=batch_size,
                max_candidates=max_candidates if max_candidates is not None else batch_size * 10,
            )
            log.info(f"Search stopped by {res.stopped_by} after {res.evaluated} candidates")
            layout = res.best.layout
        else:
            start = project.layout if project.layout is not None else solver.generate_random()
            layout = solver.optimize(start, max_iterations=iterations)

    scored, metrics = score_with_metrics(project.config, project.weights, layout)
    cut_list = build_cut_list(project.config, layout)

    lb: Optional[BoundResult] = None
    if bound:
        lb = plank_lower_bound(project.config, layout, BoundParams(time_limit_s=bound_time_limit_s))

    result = RunResult(
        mode=mode,
        scored=scored,
        metrics=metrics,
        cut_list=cut_list,
        seconds=t["seconds"],
        bound=lb,
    )

    if out_dir is not None:
        outp = Path(out_dir)
        export_all(scored, cut_list, project.config, outp, prefix=export_prefix)
        save_scored_layout_json(scored, outp / f"{export_prefix}.json", cut_list=cut_list)
        log.info(f"Exported CSV + JSON to: {outp}")

    if show_plot:
        fig = plot_layout(project.config, layout, scored=scored, style=plot_style or PlotStyle())
        return result, fig

    return result
