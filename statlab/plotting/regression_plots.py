"""Render the regression scatter plot with its fitted line."""

from __future__ import annotations

import os

import matplotlib.pyplot as plt

from ..schema import ObservationSet, RegressionResult
from .style import PALETTE, STYLE, annotate_corner, export_figure, finish_axes, use_statlab_style


def plot_regression(
    points: ObservationSet,
    result: RegressionResult,
    output_dir: str = "output",
    filename: str = "regression.png",
) -> str:
    """Render observations and the fitted regression line.

    Args:
        points: Observations the fit was computed from.
        result: Fit from ``statlab.analysis.analyze_regression`` or
            ``statlab.stats.regression.linear_regression``.
        output_dir (str, optional): Directory for PNG/PDF/SVG outputs.
        filename (str, optional): PNG file name; PDF and SVG share its stem.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        ValueError: If ``points`` is empty.
    """
    if not points:
        raise ValueError("points list is empty; nothing to plot")

    use_statlab_style()
    fig, ax = plt.subplots(figsize=STYLE.figsize)
    ax.scatter(
        [p.x for p in points],
        [p.y for p in points],
        s=28,
        color=PALETTE["curve"],
        label="Observations",
        zorder=3,
    )
    ax.plot(
        [p.x for p in result.regression_line],
        [p.y for p in result.regression_line],
        color=PALETTE["fit"],
        label="Least-squares line",
        zorder=2,
    )
    annotate_corner(ax, f"{result.equation}\n$R^2$ = {result.r_squared:.4f}")

    finish_axes(ax, "x", "y", grid="both")
    ax.legend(loc="lower right")
    ax.set_title("Scatter plot and regression line")

    return export_figure(fig, os.path.join(output_dir, filename))
