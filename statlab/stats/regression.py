"""Ordinary least-squares regression of y on a single predictor x.

The fit is computed from the centred sums ``Sxx, Syy, Sxy`` and returns
the slope, intercept, coefficient of determination, Pearson correlation,
standard errors and a sampled regression line for plotting.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

import numpy as np

from ..config import DEFAULTS
from ..errors import DegenerateInput, InvalidInput
from ..schema import Point, RegressionResult


def _xy_arrays(points: Iterable[Point]) -> Tuple[np.ndarray, np.ndarray]:
    pts = list(points)
    try:
        x_arr = np.asarray([p.x for p in pts], dtype=float)
        y_arr = np.asarray([p.y for p in pts], dtype=float)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidInput("Regression input must be a sequence of (x, y) points.") from exc
    return x_arr, y_arr


def fit_line(
    slope: float,
    intercept: float,
    x_min: float,
    x_max: float,
    steps: int = DEFAULTS.REGRESSION_STEPS,
) -> Tuple[Point, ...]:
    """Sample ``y = slope * x + intercept`` at ``steps + 1`` evenly spaced x.

    The first and last points sit exactly on ``x_min`` and ``x_max``.
    """
    if steps < 1:
        raise InvalidInput(f"steps must be >= 1, got {steps}")
    xs = np.linspace(float(x_min), float(x_max), int(steps) + 1)
    return tuple(Point(float(x), float(slope * x + intercept)) for x in xs)


def linear_regression(
    points: Sequence[Point], steps: int = DEFAULTS.REGRESSION_STEPS
) -> RegressionResult:
    """Fit an ordinary least-squares straight line to ``points``.

    Args:
        points: Observations in insertion order; at least two, all finite.
        steps: Number of equal steps in ``regression_line``. Defaults to 100,
            giving 101 points.

    Returns:
        RegressionResult: slope, intercept, ``r_squared``, ``correlation``,
        standard errors of slope and intercept, residual standard error and
        the sampled line over ``[min(x), max(x)]``.

    Raises:
        InvalidInput: Fewer than two points or a non-finite coordinate.
        DegenerateInput: All x values equal (vertical line).

    Note:
        With exactly two points the residual degrees of freedom are zero; the
        fit passes through both points and every standard error is reported
        as ``0.0``. When every y is equal the fit is the horizontal line
        through them, reported with ``r_squared = 1.0`` and
        ``correlation = 0.0``.
    """
    x_arr, y_arr = _xy_arrays(points)
    n = int(len(x_arr))
    if n < 2:
        raise InvalidInput("Need at least 2 data points for regression.")
    if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
        raise InvalidInput("Regression input must contain only finite values.")
    if np.all(x_arr == x_arr[0]):
        raise DegenerateInput("All x values are equal; the slope is undefined.")

    constant_y = bool(np.all(y_arr == y_arr[0]))

    # Sums about the means, so a large common offset cancels exactly.
    xbar = float(np.mean(x_arr))
    ybar = float(y_arr[0]) if constant_y else float(np.mean(y_arr))
    dx = x_arr - xbar
    dy = y_arr - ybar
    ssxx = float(np.sum(dx * dx))
    ssyy = float(np.sum(dy * dy))
    ssxy = float(np.sum(dx * dy))

    slope = ssxy / ssxx
    intercept = ybar - slope * xbar

    yhat = slope * x_arr + intercept
    ss_residual = float(np.sum((y_arr - yhat) ** 2))
    if not constant_y and ssyy > 0:
        r_squared = 1.0 - ss_residual / ssyy
        correlation = ssxy / math.sqrt(ssxx * ssyy)
    else:
        # Constant y: the horizontal line through it fits exactly.
        r_squared = 1.0
        correlation = 0.0

    dof = n - 2
    mse = ss_residual / dof if dof > 0 else 0.0

    se_slope = math.sqrt(mse / ssxx)
    se_intercept = math.sqrt(mse * (1.0 / n + xbar**2 / ssxx))

    return RegressionResult(
        slope=float(slope),
        intercept=float(intercept),
        r_squared=float(r_squared),
        correlation=float(correlation),
        standard_error_of_slope=se_slope,
        residual_standard_error=math.sqrt(mse),
        regression_line=fit_line(
            slope, intercept, float(np.min(x_arr)), float(np.max(x_arr)), steps
        ),
        standard_error_of_intercept=se_intercept,
        n=n,
    )
