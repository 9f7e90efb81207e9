"""
Figure rendering for distribution curves, samples and regression fits.

All plotting functions accept precomputed results and do not perform any
statistics themselves.

Modules:
    distribution_plots:
        Density/mass and cumulative curves (line for the normal
        distribution, stems or steps for discrete ones) and histograms of
        generated samples.

    regression_plots:
        Scatter plot of observations with the fitted OLS line and an
        equation/R-squared annotation.

    style:
        Shared rcParams, axis finishing and the multi-format export helper.

Every figure is saved as a synchronized PNG/PDF/SVG bundle and the PNG path
is returned.
"""

from .distribution_plots import plot_distribution_curve, plot_sample_histogram
from .regression_plots import plot_regression
from .style import use_statlab_style

__all__ = [
    "plot_distribution_curve",
    "plot_sample_histogram",
    "plot_regression",
    "use_statlab_style",
]
