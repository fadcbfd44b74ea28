# floorboard_solver/validate.py
# Validation utilities for input coming from outside the core:
# - geometry must be finite and physically sensible
# - weights must be finite and non-negative
# - layouts must have the session's row count and offsets within one plank
#
# The scoring core trusts its inputs; call these at the boundary (loaders, CLI, Solver).

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from .types import GeometryConfig, Layout, ObjectiveWeights


@dataclass(frozen=True)
class ValidationIssue:
    level: str   # "ERROR" or "WARN"
    message: str
    field: Optional[str] = None


def _finite(x: float) -> bool:
    return isinstance(x, (int, float)) and math.isfinite(x)


def validate_geometry(config: GeometryConfig) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    for name in ("plank_full_length", "plank_width", "room_height"):
        v = getattr(config, name)
        if not _finite(v) or v <= 0:
            issues.append(ValidationIssue("ERROR", f"{name} must be a finite number > 0, got {v!r}", name))

    for name in ("saw_kerf", "min_cut_length"):
        v = getattr(config, name)
        if not _finite(v) or v < 0:
            issues.append(ValidationIssue("ERROR", f"{name} must be a finite number >= 0, got {v!r}", name))

    cap = config.max_unique_cuts
    if cap is not None and (not isinstance(cap, int) or isinstance(cap, bool) or cap < 0):
        issues.append(ValidationIssue("ERROR", f"max_unique_cuts must be None or an int >= 0, got {cap!r}", "max_unique_cuts"))

    if not issues and config.saw_kerf >= config.plank_full_length:
        issues.append(ValidationIssue("WARN", "saw_kerf is not smaller than the plank; no offcut can ever be reused", "saw_kerf"))
    if not issues and config.min_cut_length >= config.plank_full_length:
        issues.append(ValidationIssue("WARN", "min_cut_length >= plank length; every offcut is waste", "min_cut_length"))

    return issues


def validate_weights(weights: ObjectiveWeights) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for name in ("cutting_simplicity", "waste_minimization", "visual_randomness"):
        v = getattr(weights, name)
        if not _finite(v) or v < 0:
            issues.append(ValidationIssue("ERROR", f"weight {name} must be a finite number >= 0, got {v!r}", name))
    if not issues and weights.total() == 0:
        issues.append(ValidationIssue("WARN", "all weights are zero; every layout scores 0"))
    return issues


def validate_layout(
    config: GeometryConfig,
    layout: Layout,
    num_rows: Optional[int] = None,
) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if num_rows is not None and layout.num_rows != num_rows:
        issues.append(
            ValidationIssue("ERROR", f"layout has {layout.num_rows} rows, expected {num_rows}", "row_offsets")
        )
    lo = -config.plank_full_length
    for i, o in enumerate(layout.row_offsets):
        if not _finite(o):
            issues.append(ValidationIssue("ERROR", f"row {i}: offset {o!r} is not finite", "row_offsets"))
        elif o < lo or o > 0:
            issues.append(ValidationIssue("ERROR", f"row {i}: offset {o} outside [{lo}, 0]", "row_offsets"))
    return issues


def validate_session(
    config: GeometryConfig,
    weights: ObjectiveWeights,
    num_rows: int,
) -> List[ValidationIssue]:
    issues = validate_geometry(config) + validate_weights(weights)
    if not isinstance(num_rows, int) or num_rows < 0:
        issues.append(ValidationIssue("ERROR", f"num_rows must be an int >= 0, got {num_rows!r}", "num_rows"))
    return issues


def raise_on_errors(issues: List[ValidationIssue]) -> None:
    errs = [i for i in issues if i.level.upper() == "ERROR"]
    if errs:
        msg = "\n".join(f"[{e.level}] field={e.field} :: {e.message}" for e in errs)
        raise ValueError("Validation failed:\n" + msg)
