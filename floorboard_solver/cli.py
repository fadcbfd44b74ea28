# floorboard_solver/cli.py
# Command line runner for project JSON files with a solver mode switch.
#
# Modes:
#   --mode optimize : simulated annealing from the saved offsets (or a random start)
#   --mode batch    : best of --batch random layouts
#   --mode search   : repeated random batches until no improvement / --max_candidates
#   --mode score    : score the offsets stored in the project
#
# Usage:
#   python -m floorboard_solver --project room.json --mode optimize --iterations 20000 --seed 7
#   python -m floorboard_solver --example --mode batch --batch 5000 --workers 4 --out out/
#   python -m floorboard_solver --example --room 6000x3500 --weights 20,60,20 --png layout.png
#   python -m floorboard_solver --example --room_svg plan.svg --mode batch

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DEFAULTS, parse_room_text, parse_weights_text
from .debug import print_cut_list, print_scored
from .io_json import project_from_dict, read_project_dict, save_project_json
from .io_svg import load_room_svg
from .logger import get_logger, set_enabled, set_verbose
from .plotting import PlotStyle, save_cut_list_png, save_layout_png
from .run import MODES, run_project


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Plank layout optimizer (seam offsets per row).")
    p.add_argument("--project", type=str, default="", help="Path to project JSON")
    p.add_argument("--example", action="store_true", help="Use the built-in default room instead of a project file")
    p.add_argument("--mode", type=str, default="optimize", choices=list(MODES), help="Solver mode")

    # Overrides for --example (or on top of the project file)
    p.add_argument("--room", type=str, default="", help="Room WxH, e.g. 5000x4000")
    p.add_argument("--room_svg", type=str, default="", help="Room outline from an SVG drawing (id='room' shape or first rect/polygon/path)")
    p.add_argument("--plank", type=float, default=None, help="Plank length")
    p.add_argument("--plank_width", type=float, default=None, help="Plank width")
    p.add_argument("--kerf", type=float, default=None, help="Saw kerf")
    p.add_argument("--min_cut", type=float, default=None, help="Shortest offcut worth keeping")
    p.add_argument("--max_unique_cuts", type=int, default=None, help="Cap on distinct cut lengths")
    p.add_argument("--weights", type=str, default="", help="cutting,waste,randomness e.g. 50,50,50")

    # Search controls
    p.add_argument("--iterations", type=int, default=DEFAULTS.anneal_iterations, help="Annealing iterations")
    p.add_argument("--batch", type=int, default=DEFAULTS.batch_size, help="Random layouts per batch")
    p.add_argument("--max_candidates", type=int, default=None, help="Search: stop after this many candidates")
    p.add_argument("--seed", type=int, default=None, help="Random seed (omit for a fresh run)")
    p.add_argument("--workers", type=int, default=1, help="Processes for batch scoring")

    # Extras
    p.add_argument("--bound", action="store_true", help="Compute CP-SAT lower bound on planks")
    p.add_argument("--bound_time", type=float, default=DEFAULTS.bound_time_limit_s, help="CP-SAT time limit (s)")

    # Output
    p.add_argument("--out", type=str, default="", help="Output directory for CSV + JSON exports (optional)")
    p.add_argument("--prefix", type=str, default="layout", help="Export filename prefix")
    p.add_argument("--save_project", type=str, default="", help="Write the project with the result offsets to this JSON")
    p.add_argument("--png", type=str, default="", help="Save layout plot as PNG (optional)")
    p.add_argument("--cuts_png", type=str, default="", help="Save cut list plot as PNG (optional)")
    p.add_argument("--no_lengths", action="store_true", help="Hide piece lengths in plot")
    p.add_argument("--print_cuts", action="store_true", help="Print the full cut list (planks, offcuts, requirements)")
    p.add_argument("--quiet", action="store_true", help="Silence solver log lines")
    p.add_argument("--verbose", action="store_true", help="Also print annealing progress and batch details")

    return p


def _project_data(args: argparse.Namespace) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if args.room.strip():
        w, h = parse_room_text(args.room)
        data["room_width"] = w
        data["room_height"] = h
        data["room_polygon"] = None
    if args.room_svg.strip():
        room = load_room_svg(args.room_svg.strip())
        get_logger().info(f"Room from SVG: {room.width:g} x {room.height:g} mm ({len(room.polygon)} points, unit {room.unit})")
        data["room_polygon"] = room.polygon
    if args.plank is not None:
        data["plank_full_length"] = args.plank
    if args.plank_width is not None:
        data["plank_width"] = args.plank_width
    if args.kerf is not None:
        data["saw_kerf"] = args.kerf
    if args.min_cut is not None:
        data["min_cut_length"] = args.min_cut
    if args.max_unique_cuts is not None:
        data["max_unique_cuts"] = args.max_unique_cuts
    if args.weights.strip():
        wt = parse_weights_text(args.weights)
        data["optimization_weights"] = {
            "cutting_simplicity": wt.cutting_simplicity,
            "waste_minimization": wt.waste_minimization,
            "visual_randomness": wt.visual_randomness,
        }
    return data


def main(argv: Optional[List[str]] = None) -> None:
    args = build_argparser().parse_args(argv)
    set_enabled(not args.quiet)
    set_verbose(args.verbose)

    if args.example:
        data: Dict[str, Any] = {"name": "Example"}
    else:
        if not args.project:
            raise SystemExit("Provide --project room.json or use --example")
        path = Path(args.project)
        if not path.exists():
            raise SystemExit(f"Project JSON not found: {path}")
        data = read_project_dict(path)

    data.update(_project_data(args))
    project = project_from_dict(data)

    res = run_project(
        project,
        mode=args.mode,
        iterations=int(args.iterations),
        batch_size=int(args.batch),
        max_candidates=args.max_candidates,
        seed=args.seed,
        max_workers=int(args.workers),
        bound=bool(args.bound),
        bound_time_limit_s=float(args.bound_time),
        out_dir=args.out.strip() or None,
        export_prefix=args.prefix,
    )

    c = project.config
    s = res.scored
    m = res.metrics
    print(f"Project: {project.name}")
    print(f"Mode: {res.mode}  ({res.seconds:.2f} s)")
    print(f"Room height: {c.room_height:g}  rows: {project.num_rows}  plank: {c.plank_full_length:g} x {c.plank_width:g}")
    print(f"Kerf: {c.saw_kerf:g}  min offcut: {c.min_cut_length:g}  max unique cuts: {c.max_unique_cuts}")
    print_scored(s)
    print(f"Planks: {m.planks_used}  full boards: {m.full_boards}  cut pieces: {m.cut_pieces}  unique cuts: {m.unique_cuts}")
    print(f"Offcuts reused: {m.offcuts_reused}  wasted: {m.offcuts_wasted}")
    print(f"Material: {m.total_material:,.1f}  waste: {m.waste:,.1f}  efficiency: {m.efficiency:.1f}%")
    if m.min_seam_gap is not None:
        print(f"Closest seams in neighbouring rows: {m.min_seam_gap:.1f}")
    if res.bound is not None:
        b = res.bound
        print(f"Plank lower bound: {b.lower_bound} ({b.status}), greedy uses {b.greedy_planks}, gap {b.gap}")

    if args.save_project.strip():
        save_project_json(project, args.save_project.strip(), layout=s.layout)
        print(f"Project saved to: {args.save_project.strip()}")

    if args.png.strip():
        style = PlotStyle(show_lengths=not args.no_lengths)
        save_layout_png(c, s.layout, args.png.strip(), scored=s, style=style)
        print(f"Layout plot saved to: {args.png.strip()}")

    if args.cuts_png.strip():
        save_cut_list_png(res.cut_list, c.plank_full_length, args.cuts_png.strip())
        print(f"Cut list plot saved to: {args.cuts_png.strip()}")

    if args.print_cuts:
        print_cut_list(res.cut_list, verbose=True)


if __name__ == "__main__":
    main()
