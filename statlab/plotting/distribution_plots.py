"""Render distribution curves and histograms of generated samples.

Plotting functions receive precomputed values from ``statlab.analysis`` and
only render them.
"""

from __future__ import annotations

import os
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..schema import DistributionKind, EvaluationMode, Point, coerce_enum
from .style import PALETTE, STYLE, annotate_corner, export_figure, finish_axes, use_statlab_style

_Y_LABELS = {
    (False, EvaluationMode.DENSITY): "Probability density",
    (True, EvaluationMode.DENSITY): r"$P(X = k)$",
    (False, EvaluationMode.CUMULATIVE): r"$P(X \leq x)$",
    (True, EvaluationMode.CUMULATIVE): r"$P(X \leq k)$",
}


def plot_distribution_curve(
    points: Sequence[Point],
    kind,
    mode="pdf",
    output_dir: str = "output",
    title: str | None = None,
) -> str:
    """Render one distribution curve as a figure bundle.

    Continuous (normal) curves are drawn as a line. Discrete mass functions
    are drawn as stems and discrete cumulative functions as a step curve.

    Args:
        points (Sequence[Point]): Chart points from
            ``statlab.analysis.distribution_curve``.
        kind: Distribution kind the points describe.
        mode: ``"pdf"`` or ``"cdf"``.
        output_dir (str, optional): Directory for PNG/PDF/SVG outputs.
            Defaults to ``"output"``.
        title (str, optional): Figure title. Defaults to
            ``"<Kind> <MODE>"``.

    Returns:
        str: Path to the saved ``<kind>_<mode>.png`` file.

    Raises:
        ValueError: If ``points`` is empty.
    """
    if not points:
        raise ValueError("points list is empty; nothing to plot")

    kind = coerce_enum(DistributionKind, kind, "distribution")
    mode = coerce_enum(EvaluationMode, mode, "evaluation mode")
    discrete = kind is not DistributionKind.NORMAL

    x = np.asarray([p.x for p in points], dtype=float)
    y = np.asarray([p.y for p in points], dtype=float)

    use_statlab_style()
    fig, ax = plt.subplots(figsize=STYLE.figsize)
    if not discrete:
        ax.plot(x, y, color=PALETTE["curve"])
    elif mode is EvaluationMode.DENSITY:
        ax.vlines(x, 0.0, y, color=PALETTE["bar"], linewidth=STYLE.line_width)
        ax.plot(x, y, linestyle="none", marker="o", color=PALETTE["bar"])
    else:
        ax.plot(x, y, drawstyle="steps-post", color=PALETTE["curve"])

    ax.set_ylim(bottom=0.0)
    finish_axes(ax, "k" if discrete else "x", _Y_LABELS[(discrete, mode)])
    ax.set_title(title or f"{kind.value.capitalize()} {mode.value.upper()}")

    png_path = os.path.join(output_dir, f"{kind.value}_{mode.value}.png")
    return export_figure(fig, png_path)


def plot_sample_histogram(
    values: Sequence[float],
    kind,
    output_dir: str = "output",
    bins: int | None = None,
) -> str:
    """Render a histogram of a generated sample.

    Discrete samples get one bin per integer value; continuous samples use
    ``bins`` (Matplotlib's ``"auto"`` rule when omitted).

    Returns:
        str: Path to the saved ``<kind>_sample.png`` file.

    Raises:
        ValueError: If ``values`` is empty.
    """
    if len(values) == 0:
        raise ValueError("values list is empty; nothing to plot")

    kind = coerce_enum(DistributionKind, kind, "distribution")
    data = np.asarray(values, dtype=float)
    if kind is DistributionKind.NORMAL:
        hist_bins = bins if bins is not None else "auto"
    else:
        hist_bins = np.arange(data.min() - 0.5, data.max() + 1.5, 1.0)

    use_statlab_style()
    fig, ax = plt.subplots(figsize=STYLE.figsize)
    ax.hist(
        data, bins=hist_bins, color=PALETTE["bar"], alpha=STYLE.bar_alpha, edgecolor="white"
    )
    mean = float(np.mean(data))
    ax.axvline(
        mean, color=PALETTE["fit"], linestyle="--", linewidth=STYLE.thin_line_width
    )
    annotate_corner(ax, f"n = {len(data)}\nmean = {mean:.3f}", corner="upper right")

    finish_axes(ax, "Value", "Count")
    ax.set_title(f"{kind.value.capitalize()} sample")

    png_path = os.path.join(output_dir, f"{kind.value}_sample.png")
    return export_figure(fig, png_path)
