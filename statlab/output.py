"""Write curves, samples, test results and regression fits to CSV files.

This module is the boundary between in-memory results and tabular artifacts;
it performs no statistics of its own beyond fitted values and residuals.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence, Tuple

import pandas as pd

from .schema import ObservationSet, Point, RegressionResult, ResultColumns, TestResult

logger = logging.getLogger(__name__)

COLUMNS = ResultColumns()


def _points_frame(points: Sequence[Point]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            COLUMNS.x: [float(p.x) for p in points],
            COLUMNS.y: [float(p.y) for p in points],
        }
    )


def _ensure_dir(output_dir: str) -> None:
    os.makedirs(output_dir, exist_ok=True)


def save_curve_to_csv(
    points: Sequence[Point],
    output_dir: str = "output",
    filename: str = "distribution_curve.csv",
) -> str:
    """Save distribution chart points as an ``x``/``y`` table.

    Returns:
        str: Path to the written CSV.
    """
    _ensure_dir(output_dir)
    path = os.path.join(output_dir, filename)
    _points_frame(points).to_csv(path, index=False)
    logger.info("Saved distribution curve to %s", path)
    return path


def save_sample_to_csv(
    values: Sequence[float],
    output_dir: str = "output",
    filename: str = "sample.csv",
) -> str:
    """Save a generated sample as a single-column table."""
    _ensure_dir(output_dir)
    path = os.path.join(output_dir, filename)
    pd.DataFrame({COLUMNS.sample: list(values)}).to_csv(path, index=False)
    logger.info("Saved %d sampled value(s) to %s", len(values), path)
    return path


def hypothesis_result_frame(result: TestResult) -> pd.DataFrame:
    """Return a one-row table describing ``result``."""
    row = {
        "Test": result.test_kind.value,
        COLUMNS.statistic: result.statistic,
        COLUMNS.p_value: result.p_value,
        COLUMNS.dof: result.degrees_of_freedom,
        COLUMNS.conclusion: result.conclusion.value,
    }
    if result.mean is not None:
        row["Mean"] = result.mean
        row["Standard Error"] = result.standard_error
    if result.expected is not None:
        row["Expected"] = " ".join(f"{e:.2f}" for e in result.expected)
    return pd.DataFrame([row])


def save_test_result_to_csv(
    result: TestResult,
    output_dir: str = "output",
    filename: str = "hypothesis_test.csv",
) -> str:
    _ensure_dir(output_dir)
    path = os.path.join(output_dir, filename)
    hypothesis_result_frame(result).to_csv(path, index=False)
    logger.info("Saved hypothesis test result to %s", path)
    return path


def save_regression_to_csv(
    points: ObservationSet,
    result: RegressionResult,
    output_dir: str = "output",
) -> Tuple[str, str, str]:
    """Save a regression fit as three CSV files.

    Args:
        points: Observations the fit was computed from.
        result: The fit.
        output_dir: Directory where the CSV outputs are written.

    Returns:
        tuple[str, str, str]: Paths to ``regression_observations.csv``
        (observations with fitted values and residuals),
        ``regression_summary.csv`` (one row of coefficients and diagnostics)
        and ``regression_line.csv`` (the sampled line).
    """
    _ensure_dir(output_dir)

    obs_df = _points_frame(points)
    obs_df[COLUMNS.fitted] = [result.predict(p.x) for p in points]
    obs_df[COLUMNS.residual] = obs_df[COLUMNS.y] - obs_df[COLUMNS.fitted]

    summary_df = pd.DataFrame(
        [
            {
                "Equation": result.equation,
                "Slope": result.slope,
                "Intercept": result.intercept,
                "R-squared": result.r_squared,
                "Correlation": result.correlation,
                "SE (slope)": result.standard_error_of_slope,
                "SE (intercept)": result.standard_error_of_intercept,
                "Residual Standard Error": result.residual_standard_error,
                "n": result.n,
            }
        ]
    )

    obs_path = os.path.join(output_dir, "regression_observations.csv")
    summary_path = os.path.join(output_dir, "regression_summary.csv")
    line_path = os.path.join(output_dir, "regression_line.csv")

    obs_df.to_csv(obs_path, index=False)
    summary_df.to_csv(summary_path, index=False)
    _points_frame(result.regression_line).to_csv(line_path, index=False)

    logger.info("Saved regression observations to %s", obs_path)
    logger.info("Saved regression summary to %s", summary_path)
    logger.info("Saved regression line to %s", line_path)
    return obs_path, summary_path, line_path
