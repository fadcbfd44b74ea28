# floorboard_solver/test_logger.py
# Logger switches and where solver diagnostics end up.

from __future__ import annotations

import random

from floorboard_solver.config import make_default_geometry
from floorboard_solver.layout import generate_random
from floorboard_solver.logger import LOGGER, Logger, set_enabled, set_verbose
from floorboard_solver.optimizer import AnnealingParams, anneal
from floorboard_solver.solver import Solver
from floorboard_solver.types import ObjectiveWeights
from floorboard_solver.validate import ValidationIssue


def test_levels(capsys) -> None:
    log = Logger(enabled=True, verbose=False, prefix="[T]")
    log.debug("hidden")
    log.info("shown")
    log.error("always")
    out = capsys.readouterr()
    assert "hidden" not in out.out
    assert "[T] shown" in out.out
    assert "[T] ERROR: always" in out.err

    log.enabled = False
    log.info("muted")
    log.error("still there")
    out = capsys.readouterr()
    assert out.out == ""
    assert "still there" in out.err


def test_warn_issues_skips_errors(capsys) -> None:
    Logger().warn_issues(
        [ValidationIssue("ERROR", "bad", "a"), ValidationIssue("WARN", "careful", "b")]
    )
    err = capsys.readouterr().err
    assert "b: careful" in err
    assert "bad" not in err


def test_solver_warns_on_zero_weights(capsys) -> None:
    set_enabled(True)
    Solver(make_default_geometry(), ObjectiveWeights(0.0, 0.0, 0.0), 5)
    out = capsys.readouterr()
    assert "Creating solver with weights" in out.out
    assert "all weights are zero" in out.err


def test_anneal_progress_only_when_verbose(capsys) -> None:
    config = make_default_geometry(room_height=3000.0)
    start = generate_random(4, config.plank_full_length, random.Random(0))
    params = AnnealingParams(log_every=10)

    set_enabled(True)
    anneal(config, ObjectiveWeights(), start, 20, rng=random.Random(0), params=params)
    assert "anneal" not in capsys.readouterr().out

    set_verbose(True)
    try:
        anneal(config, ObjectiveWeights(), start, 20, rng=random.Random(0), params=params)
    finally:
        set_verbose(False)
    lines = [ln for ln in capsys.readouterr().out.splitlines() if "anneal" in ln]
    assert len(lines) == 2
    assert lines[-1].startswith(f"{LOGGER.prefix} anneal 20/20")
