# floorboard_solver/plotting.py
# Minimal matplotlib visualization:
# - the layout: one column per row, boards stacked along the room height
# - the cut list: one bar per distinct cut length, with counts

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .allocator import is_full_length
from .cut_list import cut_key
from .requirements import iter_requirements
from .types import CutList, GeometryConfig, Layout, ScoredLayout


@dataclass(frozen=True)
class PlotStyle:
    show_lengths: bool = True
    show_room_frame: bool = True
    show_grid: bool = False
    font_size: int = 6
    padding: float = 50.0          # empty margin around the room in drawing units
    full_board_color: Tuple[float, float, float] = (0.82, 0.71, 0.55)


def _hash_color(key: str) -> Tuple[float, float, float]:
    """Deterministic pastel-ish color from a string."""
    h = 2166136261
    for ch in key.encode("utf-8"):
        h ^= ch
        h *= 16777619
        h &= 0xFFFFFFFF
    # map to [0.3..0.9] range for readability
    r = 0.3 + ((h >> 0) & 0xFF) / 255 * 0.6
    g = 0.3 + ((h >> 8) & 0xFF) / 255 * 0.6
    b = 0.3 + ((h >> 16) & 0xFF) / 255 * 0.6
    return (r, g, b)


def _layout_title(scored: Optional[ScoredLayout], num_rows: int) -> str:
    bits = [f"{num_rows} rows"]
    if scored is not None:
        bits.append(f"score {scored.total_score:.3f}")
        bits.append(f"cut {scored.cutting_score:.2f}")
        bits.append(f"waste {scored.waste_score:.2f}")
        bits.append(f"random {scored.randomness_score:.2f}")
    return " | ".join(bits)


def plot_layout(
    config: GeometryConfig,
    layout: Layout,
    scored: Optional[ScoredLayout] = None,
    style: Optional[PlotStyle] = None,
    figsize: Optional[Tuple[float, float]] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """
    Draw the visible boards of every row. Row i occupies x in [i*w, (i+1)*w),
    height runs 0..room_height. Cut pieces share a color per length.
    """
    style = style or PlotStyle()
    w = config.plank_width
    room_w = layout.num_rows * w
    H = config.room_height

    if ax is None:
        if figsize is None:
            aspect = room_w / H if H > 0 else 1.0
            figsize = (max(4.0, min(16.0, 8.0 * aspect)), 8.0)
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.figure

    if style.show_room_frame:
        ax.add_patch(Rectangle((0, 0), room_w, H, fill=False, linewidth=1.2))

    for req in iter_requirements(config, layout):
        x0 = req.row_index * w
        start = max(layout.row_offsets[req.row_index] + req.board_index * config.plank_full_length, 0.0)
        if is_full_length(config, req.length):
            color = style.full_board_color
        else:
            color = _hash_color(f"{cut_key(req.length):.1f}")
        ax.add_patch(Rectangle((x0, start), w, req.length, facecolor=color, edgecolor="black", linewidth=0.5))

        if style.show_lengths and not is_full_length(config, req.length):
            ax.text(
                x0 + w / 2,
                start + req.length / 2,
                f"{req.length:.0f}",
                ha="center",
                va="center",
                rotation=90,
                fontsize=style.font_size,
                color="black",
            )

    ax.set_title(_layout_title(scored, layout.num_rows), fontsize=10)
    ax.set_aspect("equal", adjustable="box")

    pad = style.padding
    ax.set_xlim(-pad, room_w + pad)
    ax.set_ylim(-pad, H + pad)

    if style.show_grid:
        ax.grid(True, linewidth=0.3)
    else:
        ax.grid(False)

    ax.tick_params(labelbottom=False, labelleft=False, bottom=False, left=False)

    fig.tight_layout()
    return fig


def plot_cut_list(
    cut_list: CutList,
    plank_full_length: float,
    style: Optional[PlotStyle] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> plt.Figure:
    """One horizontal bar per distinct cut length (longest on top), scaled to the plank."""
    style = style or PlotStyle()
    items: List[Tuple[float, int]] = sorted(cut_list.cuts.items(), key=lambda kv: -kv[0])

    if figsize is None:
        figsize = (8.0, max(2.0, 0.3 * len(items) + 1.5))
    fig, ax = plt.subplots(1, 1, figsize=figsize)

    for i, (length, count) in enumerate(items):
        y = len(items) - 1 - i
        ax.barh(y, length, height=0.7, color=_hash_color(f"{length:.1f}"), edgecolor="black", linewidth=0.5)
        label = f"{length:.1f}" + (f"  x{count}" if count > 1 else "")
        ax.text(length + plank_full_length * 0.01, y, label, va="center", fontsize=style.font_size + 2)

    ax.set_xlim(0, plank_full_length * 1.15)
    ax.set_yticks([])
    ax.axvline(plank_full_length, linestyle="--", linewidth=0.8, color="gray")
    ax.set_title(
        f"Cut list | {cut_list.total_cut_pieces()} cuts, {cut_list.full_planks} planks | "
        f"offcuts {cut_list.unused_offcut_length():.0f} | efficiency {cut_list.efficiency:.1f}%",
        fontsize=10,
    )

    fig.tight_layout()
    return fig


def show_layout(config: GeometryConfig, layout: Layout, scored: Optional[ScoredLayout] = None,
                style: Optional[PlotStyle] = None) -> None:
    """Convenience wrapper: plot and show."""
    plot_layout(config, layout, scored=scored, style=style)
    plt.show()


def save_layout_png(
    config: GeometryConfig,
    layout: Layout,
    path: str,
    scored: Optional[ScoredLayout] = None,
    style: Optional[PlotStyle] = None,
    dpi: int = 200,
) -> None:
    fig = plot_layout(config, layout, scored=scored, style=style)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)


def save_cut_list_png(cut_list: CutList, plank_full_length: float, path: str, dpi: int = 200) -> None:
    fig = plot_cut_list(cut_list, plank_full_length)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
