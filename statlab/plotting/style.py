"""Shared figure styling and the multi-format save helper for statlab plots."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

EXPORT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
PNG_DPI = 300
_applied = {"rc": False}


@dataclass(frozen=True)
class PlotStyle:
    font_size: float = 11.0
    title_size: float = 13.0
    label_size: float = 11.5
    tick_size: float = 10.0
    line_width: float = 1.8
    thin_line_width: float = 1.0
    marker_size: float = 5.0
    bar_alpha: float = 0.7
    grid_alpha: float = 0.25
    figsize: tuple[float, float] = (7.0, 4.2)


STYLE = PlotStyle()

PALETTE = {
    "curve": "#004371",
    "fit": "#a50f15",
    "bar": "#1f77b4",
    "text": "0.25",
}

_CORNERS = {
    "upper left": ((0.02, 0.96), "left", "top"),
    "upper right": ((0.98, 0.96), "right", "top"),
    "lower right": ((0.98, 0.04), "right", "bottom"),
}


def use_statlab_style() -> None:
    """Install the statlab rcParams the first time a figure is drawn."""
    if _applied["rc"]:
        return
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "mathtext.fontset": "stix",
            "font.size": STYLE.font_size,
            "axes.titlesize": STYLE.title_size,
            "axes.labelsize": STYLE.label_size,
            "xtick.labelsize": STYLE.tick_size,
            "ytick.labelsize": STYLE.tick_size,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
            "lines.linewidth": STYLE.line_width,
            "lines.markersize": STYLE.marker_size,
            "savefig.dpi": PNG_DPI,
        }
    )
    _applied["rc"] = True


def finish_axes(ax: Axes, xlabel: str, ylabel: str, grid: str = "y") -> None:
    """Label both axes, limit tick density and draw a light dotted grid."""
    ax.set_xlabel(xlabel, labelpad=6)
    ax.set_ylabel(ylabel, labelpad=6)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=6, min_n_ticks=4))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=6, min_n_ticks=4))
    ax.grid(True, axis=grid, alpha=STYLE.grid_alpha, linestyle=":", linewidth=0.7)


def annotate_corner(ax: Axes, text: str, corner: str = "upper left") -> None:
    (x, y), ha, va = _CORNERS[corner]
    ax.text(
        x, y, text, transform=ax.transAxes, ha=ha, va=va, color=PALETTE["text"]
    )


def export_figure(
    fig: Figure, png_path: str, formats: Sequence[str] = EXPORT_FORMATS
) -> str:
    """Write ``fig`` next to ``png_path`` in every format and close it.

    Args:
        fig: Figure to save.
        png_path: Target PNG path; the other formats share its stem.
        formats: File extensions to write.

    Returns:
        str: ``png_path`` with a ``.png`` suffix.
    """
    stem = Path(png_path).with_suffix("")
    stem.parent.mkdir(parents=True, exist_ok=True)
    try:
        for ext in formats:
            fig.savefig(
                str(stem.with_suffix(f".{ext}")),
                dpi=PNG_DPI if ext == "png" else None,
                bbox_inches="tight",
            )
    finally:
        plt.close(fig)
    return str(stem.with_suffix(".png"))
