"""One-sample t-test and chi-square goodness-of-fit.

Both tests default to the coarse p-value approximations the application has
always reported:

- t-test: the standard normal for ``n >= 30``; below that a fixed
  ``|t| > 2.0`` threshold reported as ``p = 0.05`` (significant) or
  ``p = 0.1`` (not significant).
- chi-square: a normal with mean ``df`` and standard deviation
  ``sqrt(2 df)``, floored at ``1e-6``.

Pass ``exact=True`` to refer the statistic to SciPy's Student t or
chi-square distribution instead.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np
from scipy import stats as scipy_stats

from ..config import DEFAULTS
from ..errors import DegenerateInput, InvalidInput
from ..schema import Conclusion, TestKind, TestResult, coerce_enum
from ..validation import finite_array
from .distributions import normal_cdf


def _conclude(p_value: float) -> Conclusion:
    if p_value < DEFAULTS.SIGNIFICANCE_LEVEL:
        return Conclusion.REJECT
    return Conclusion.FAIL_TO_REJECT


def one_sample_t_test(
    data: Sequence[float], mu: float = 0.0, exact: bool = False
) -> TestResult:
    """Test whether the population mean of ``data`` differs from ``mu``.

    Args:
        data: At least two finite observations.
        mu: Hypothesized population mean. Defaults to ``0.0``.
        exact: Use the Student t distribution for the p-value.

    Returns:
        TestResult: ``statistic`` is t, ``degrees_of_freedom`` is ``n - 1``,
        ``mean`` and ``standard_error`` describe the sample.

    Raises:
        InvalidInput: Fewer than two observations or a non-finite value.
        DegenerateInput: All observations are identical, so t is undefined.

    Note:
        Below 30 observations the approximate path does not compute a p-value
        at all; it compares ``|t|`` with 2.0 and the decision follows that
        comparison.
    """
    values = finite_array(data, "data", min_count=2)
    if not math.isfinite(float(mu)):
        raise InvalidInput(f"Hypothesized mean must be finite, got {mu!r}")

    n = int(len(values))
    mean = float(np.mean(values))
    std = float(np.std(values, ddof=1))
    if std == 0.0:
        raise DegenerateInput("Sample has zero variance; t statistic is undefined.")

    se = std / math.sqrt(n)
    t_stat = (mean - float(mu)) / se
    dof = n - 1

    if exact:
        p_value = float(2.0 * scipy_stats.t.sf(abs(t_stat), dof))
        conclusion = _conclude(p_value)
    elif n >= DEFAULTS.LARGE_SAMPLE_N:
        p_value = 2.0 * (1.0 - normal_cdf(abs(t_stat), 0.0, 1.0))
        conclusion = _conclude(p_value)
    else:
        significant = abs(t_stat) > DEFAULTS.T_CRITICAL
        p_value = (
            DEFAULTS.SMALL_SAMPLE_P_SIGNIFICANT
            if significant
            else DEFAULTS.SMALL_SAMPLE_P_NOT_SIGNIFICANT
        )
        conclusion = Conclusion.REJECT if significant else Conclusion.FAIL_TO_REJECT

    return TestResult(
        test_kind=TestKind.T_TEST,
        statistic=float(t_stat),
        p_value=float(p_value),
        degrees_of_freedom=dof,
        conclusion=conclusion,
        mean=mean,
        standard_error=float(se),
    )


def chi_square_goodness_of_fit(
    observed: Sequence[float],
    expected: Optional[Sequence[float]] = None,
    exact: bool = False,
) -> TestResult:
    """Chi-square goodness-of-fit of observed counts against expected counts.

    Args:
        observed: Non-negative counts, one per category (at least two).
        expected: Expected counts per category. When omitted every category
            expects ``sum(observed) / len(observed)``.
        exact: Use the chi-square distribution for the p-value.

    Returns:
        TestResult: ``statistic`` is the chi-square sum over categories with
        positive expected count, ``degrees_of_freedom`` is ``len(observed) - 1``
        and ``expected`` holds the expected counts used.

    Raises:
        InvalidInput: Empty or single-category ``observed``, a negative or
            non-finite count, or ``expected`` of a different length.
    """
    obs = finite_array(observed, "observed", min_count=1)
    if np.any(obs < 0):
        raise InvalidInput("Observed counts must be non-negative.")
    k = int(len(obs))
    if k < 2:
        raise InvalidInput("Chi-square test needs at least two categories.")

    if expected is None:
        exp = np.full(k, float(np.sum(obs)) / k)
    else:
        exp = finite_array(expected, "expected", min_count=1)
        if len(exp) != k:
            raise InvalidInput(
                f"expected has {len(exp)} categories but observed has {k}."
            )

    # Categories with no expected count contribute nothing.
    mask = exp > 0
    chi_sq = float(np.sum((obs[mask] - exp[mask]) ** 2 / exp[mask]))
    dof = k - 1

    if exact:
        p_raw = float(scipy_stats.chi2.sf(chi_sq, dof))
    else:
        p_raw = 1.0 - normal_cdf(chi_sq, float(dof), math.sqrt(2.0 * dof))

    return TestResult(
        test_kind=TestKind.CHI_SQUARE,
        statistic=chi_sq,
        p_value=max(DEFAULTS.CHI_SQUARE_P_FLOOR, p_raw),
        degrees_of_freedom=dof,
        conclusion=_conclude(p_raw),
        expected=tuple(float(e) for e in exp),
    )


def run_test(kind, data: Sequence[float], **kwargs) -> TestResult:
    """Dispatch to the test named by ``kind`` (``"ttest"`` or ``"chisquare"``)."""
    kind = coerce_enum(TestKind, kind, "test type")
    if kind is TestKind.T_TEST:
        return one_sample_t_test(data, **kwargs)
    if kind is TestKind.CHI_SQUARE:
        return chi_square_goodness_of_fit(data, **kwargs)
    raise InvalidInput(f"Unsupported test type {kind!r}")
