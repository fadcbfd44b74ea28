# floorboard_solver/io_csv.py
# CSV export helpers:
# - requirements per row (what each board position needs)
# - cut list (distinct cut lengths with counts) for the saw station
# - one-row summary of a scored layout
#
# (Plotting is handled in plotting.py.)

from __future__ import annotations

import csv
from pathlib import Path

from .types import CutList, GeometryConfig, ScoredLayout


def export_requirements_csv(cut_list: CutList, path: str | Path) -> None:
    """
    One line per visible board: row, board position in the row, length and where it sits.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = ["row_index", "board_index", "position", "length"]

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in cut_list.requirements:
            w.writerow(
                {
                    "row_index": r.row_index,
                    "board_index": r.board_index,
                    "position": r.position,
                    "length": round(r.length, 3),
                }
            )


def export_cut_list_csv(cut_list: CutList, path: str | Path) -> None:
    """
    Distinct cut lengths, longest first.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["length", "count"])
        w.writeheader()
        for length, count in cut_list.cuts.items():
            w.writerow({"length": length, "count": count})


def export_summary_csv(
    scored: ScoredLayout,
    cut_list: CutList,
    config: GeometryConfig,
    path: str | Path,
) -> None:
    """
    One-row summary (useful for comparing runs in a spreadsheet).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "num_rows",
        "plank_full_length",
        "room_height",
        "saw_kerf",
        "total_score",
        "cutting_score",
        "waste_score",
        "randomness_score",
        "planks",
        "cut_pieces",
        "unique_cuts",
        "total_material",
        "waste",
        "efficiency_pct",
    ]

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        w.writerow(
            {
                "num_rows": scored.layout.num_rows,
                "plank_full_length": config.plank_full_length,
                "room_height": config.room_height,
                "saw_kerf": config.saw_kerf,
                "total_score": round(scored.total_score, 6),
                "cutting_score": round(scored.cutting_score, 6),
                "waste_score": round(scored.waste_score, 6),
                "randomness_score": round(scored.randomness_score, 6),
                "planks": cut_list.full_planks,
                "cut_pieces": cut_list.total_cut_pieces(),
                "unique_cuts": cut_list.unique_cuts,
                "total_material": round(cut_list.total_material, 3),
                "waste": round(cut_list.waste, 3),
                "efficiency_pct": round(cut_list.efficiency, 2),
            }
        )


def export_all(
    scored: ScoredLayout,
    cut_list: CutList,
    config: GeometryConfig,
    out_dir: str | Path,
    prefix: str = "layout",
) -> None:
    """
    Export requirements, cut list and summary into out_dir.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    export_requirements_csv(cut_list, out_dir / f"{prefix}_requirements.csv")
    export_cut_list_csv(cut_list, out_dir / f"{prefix}_cuts.csv")
    export_summary_csv(scored, cut_list, config, out_dir / f"{prefix}_summary.csv")
