"""
Capability-level entry points for distributions, tests, regression and samples.

Each function takes the raw inputs a caller (the command line, a notebook, or
a request handler) has at hand, validates them, runs the engine and returns
values already rounded for display:

- Distribution curves: x to 3 decimals, density/probability to 6.
  Normal curves cover mean ± 2 sd at 201 evenly spaced points; binomial
  curves cover k = 0..n; Poisson curves cover k = 0..min(50, max(20, 4λ)).
- Hypothesis tests: statistic, mean and standard error to 4 decimals,
  p-value to 6.
- Regression: coefficients to 4 decimals, regression-line points to 3.
- Samples: normal variates to 4 decimals, discrete variates as integers.

Failures are raised as ``statlab.errors`` exceptions before any computation.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULTS, PRECISION
from .data_processing import parse_csv_data
from .errors import InvalidInput
from .schema import (
    DistributionKind,
    EvaluationMode,
    ObservationSet,
    Point,
    RegressionResult,
    SampleRequest,
    TestKind,
    TestResult,
    coerce_enum,
    params_for,
)
from .stats.distributions import cdf, pdf
from .stats.hypothesis import chi_square_goodness_of_fit, one_sample_t_test
from .stats.regression import linear_regression
from .stats.sampling import NumpyUniformSource, UniformSource, generate
from .validation import finite_array

logger = logging.getLogger(__name__)


def _support(kind: DistributionKind, params) -> np.ndarray:
    """Return the x positions at which a curve of ``kind`` is evaluated."""
    if kind is DistributionKind.NORMAL:
        half_width = DEFAULTS.NORMAL_CURVE_HALF_WIDTH * params.std
        return np.linspace(
            params.mean - half_width,
            params.mean + half_width,
            DEFAULTS.NORMAL_CURVE_POINTS,
        )
    if kind is DistributionKind.BINOMIAL:
        return np.arange(params.n + 1, dtype=float)
    if kind is DistributionKind.POISSON:
        max_k = min(
            DEFAULTS.POISSON_MAX_K,
            max(DEFAULTS.POISSON_MIN_K, params.lam * DEFAULTS.POISSON_SPAN_FACTOR),
        )
        return np.arange(int(math.floor(max_k)) + 1, dtype=float)
    raise InvalidInput(f"Unsupported distribution {kind!r}")


def distribution_curve(kind, params, mode="pdf") -> List[Point]:
    """Evaluate the density/mass or cumulative curve of a distribution.

    Args:
        kind: ``"normal"``, ``"binomial"`` or ``"poisson"`` (or the enum).
        params: Mapping or parameter record for ``kind``.
        mode: ``"pdf"`` for density/mass, ``"cdf"`` for cumulative.

    Returns:
        list[Point]: Ordered chart points rounded for display.

    Raises:
        InvalidInput: Unknown kind or mode, or a missing parameter.
        DomainViolation: Parameter outside its domain.
    """
    kind = coerce_enum(DistributionKind, kind, "distribution")
    mode = coerce_enum(EvaluationMode, mode, "evaluation mode")
    params = params_for(kind, params)
    func = pdf if mode is EvaluationMode.DENSITY else cdf

    xs = _support(kind, params)
    logger.debug(
        "Evaluating %s %s at %d point(s) for %s", kind.value, mode.value, len(xs), params
    )
    return [
        Point(
            round(float(x), PRECISION.CURVE_X),
            round(func(kind, float(x), params), PRECISION.CURVE_Y),
        )
        for x in xs
    ]


def run_hypothesis_test(
    data: Sequence[float], kind, mu: float = 0.0, exact: bool = False
) -> TestResult:
    """Run a one-sample t-test or chi-square goodness-of-fit on ``data``.

    The chi-square test treats ``data`` as observed counts against a uniform
    expectation and uses absolute values so negative entries never reach it.

    Raises:
        InvalidInput: Fewer than two numeric values or an unknown test type.
        DegenerateInput: Zero-variance data for the t-test.
    """
    values = finite_array(data, "data", min_count=2)
    kind = coerce_enum(TestKind, kind, "test type")
    logger.debug("Running %s on %d value(s)", kind.value, len(values))

    if kind is TestKind.T_TEST:
        result = one_sample_t_test(values, mu=mu, exact=exact)
    elif kind is TestKind.CHI_SQUARE:
        result = chi_square_goodness_of_fit(np.abs(values), exact=exact)
    else:
        raise InvalidInput(f"Unsupported test type {kind!r}")
    return result.rounded()


def analyze_regression(csv_text: str) -> Tuple[ObservationSet, RegressionResult]:
    """Parse CSV text and fit y on x.

    Returns:
        tuple: Parsed observations (input order) and the rounded fit.

    Raises:
        InvalidInput: Non-string input or fewer than two valid rows.
        DegenerateInput: All x values equal.
    """
    if not isinstance(csv_text, str) or not csv_text.strip():
        raise InvalidInput("Invalid CSV data")
    points = parse_csv_data(csv_text)
    if len(points) < 2:
        raise InvalidInput("Need at least 2 data points for regression")
    logger.debug("Fitting regression on %d observation(s)", len(points))
    return points, linear_regression(points).rounded()


def generate_sample(
    kind,
    params,
    size: int = DEFAULTS.SAMPLE_SIZE,
    source: Optional[UniformSource] = None,
    seed: Optional[int] = None,
) -> list:
    """Draw a synthetic sample from a distribution.

    Args:
        kind: Distribution name or enum.
        params: Mapping or parameter record for ``kind``.
        size: Number of variates. Defaults to 100.
        source: Uniform source to draw from. Takes precedence over ``seed``.
        seed: Seed for a fresh numpy-backed source when ``source`` is None.

    Returns:
        list: ``size`` variates; floats rounded to 4 decimals for the normal
        distribution, ints otherwise.
    """
    request = SampleRequest(kind=kind, params=params, size=size)
    if source is None:
        source = NumpyUniformSource(seed)
    logger.debug("Drawing %d %s variate(s)", request.size, request.kind.value)

    values = generate(request, source)
    if request.kind is DistributionKind.NORMAL:
        return [round(v, PRECISION.NORMAL_SAMPLE) for v in values]
    return [int(v) for v in values]


def print_test_result(result: TestResult):
    print(f"\nHypothesis test ({result.test_kind.value}):")
    print(f" - Statistic = {result.statistic:.4f}")
    print(f" - p-value = {result.p_value:.6f}")
    print(f" - Degrees of freedom = {result.degrees_of_freedom}")
    if result.mean is not None:
        print(f" - Sample mean = {result.mean:.4f} (SE = {result.standard_error:.4f})")
    if result.expected is not None:
        expected = ", ".join(f"{e:.2f}" for e in result.expected)
        print(f" - Expected counts = [{expected}]")
    print(f" - Conclusion: {result.conclusion.value}")


def print_regression_summary(points: ObservationSet, result: RegressionResult):
    print(f"\nLinear regression on {len(points)} observation(s):")
    print(f" - {result.equation}")
    print(f" - R-squared = {result.r_squared:.4f}")
    print(f" - Correlation = {result.correlation:.4f}")
    print(
        f" - SE(slope) = {result.standard_error_of_slope:.4f}"
        f" | SE(intercept) = {result.standard_error_of_intercept:.4f}"
    )
    print(f" - Residual standard error = {result.residual_standard_error:.4f}")
