import math

import numpy as np
import pytest
from scipy import stats as scipy_stats

from statlab.errors import DomainViolation, InvalidInput
from statlab.schema import DistributionKind, PoissonParams
from statlab.stats.distributions import (
    binomial_cdf,
    binomial_pmf,
    cdf,
    normal_cdf,
    normal_pdf,
    pdf,
    poisson_cdf,
    poisson_pmf,
)


@pytest.mark.parametrize("mean,std", [(0.0, 1.0), (5.0, 0.5), (-3.0, 4.0)])
def test_normal_pdf_integrates_to_one(mean, std):
    x = np.linspace(mean - 10 * std, mean + 10 * std, 20001)
    dx = x[1] - x[0]
    total = sum(normal_pdf(v, mean, std) for v in x) * dx
    assert abs(total - 1.0) < 1e-3


@pytest.mark.parametrize("mean,std", [(0.0, 1.0), (12.5, 3.0)])
def test_normal_cdf_is_half_at_mean(mean, std):
    assert math.isclose(normal_cdf(mean, mean, std), 0.5, abs_tol=1e-12)


def test_normal_values_match_reference():
    assert math.isclose(normal_pdf(0.0, 0.0, 1.0), 1.0 / math.sqrt(2 * math.pi))
    assert math.isclose(normal_cdf(1.96, 0.0, 1.0), 0.9750021048517795, abs_tol=1e-9)
    assert math.isclose(
        normal_cdf(7.0, 5.0, 2.0), scipy_stats.norm.cdf(7.0, 5.0, 2.0), abs_tol=1e-12
    )


@pytest.mark.parametrize("std", [0.0, -1.0, float("nan")])
def test_normal_rejects_non_positive_std(std):
    with pytest.raises(DomainViolation):
        normal_pdf(0.0, 0.0, std)
    with pytest.raises(DomainViolation):
        normal_cdf(0.0, 0.0, std)


@pytest.mark.parametrize(
    "n,p", [(1, 0.5), (10, 0.3), (50, 0.9), (200, 0.01), (7, 0.0), (7, 1.0)]
)
def test_binomial_pmf_sums_to_one(n, p):
    total = sum(binomial_pmf(k, n, p) for k in range(n + 1))
    assert math.isclose(total, 1.0, abs_tol=1e-9)
    assert math.isclose(binomial_cdf(n, n, p), 1.0, abs_tol=1e-9)


def test_binomial_pmf_zero_outside_support():
    assert binomial_pmf(-1, 10, 0.4) == 0.0
    assert binomial_pmf(11, 10, 0.4) == 0.0
    assert binomial_pmf(2.5, 10, 0.4) == 0.0


def test_binomial_known_values():
    assert math.isclose(binomial_pmf(2, 4, 0.5), 0.375)
    assert math.isclose(binomial_cdf(1, 4, 0.5), 0.3125)
    assert binomial_cdf(-1, 4, 0.5) == 0.0
    assert binomial_cdf(2.7, 4, 0.5) == binomial_cdf(2, 4, 0.5)
    assert math.isclose(binomial_cdf(99, 4, 0.5), 1.0)


def test_binomial_large_n_uses_stable_path():
    n, p = 2000, 0.35
    assert math.isclose(
        binomial_pmf(700, n, p), scipy_stats.binom.pmf(700, n, p), rel_tol=1e-9
    )
    total = sum(binomial_pmf(k, n, p) for k in range(n + 1))
    assert math.isclose(total, 1.0, abs_tol=1e-9)


@pytest.mark.parametrize("p", [-0.1, 1.5])
def test_binomial_rejects_probability_outside_unit_interval(p):
    with pytest.raises(DomainViolation):
        binomial_pmf(1, 5, p)


@pytest.mark.parametrize("lam", [0.5, 3.0, 25.0])
def test_poisson_pmf_sums_to_one(lam):
    total = sum(poisson_pmf(k, lam) for k in range(200))
    assert math.isclose(total, 1.0, abs_tol=1e-9)


def test_poisson_cdf_is_monotonic():
    values = [poisson_cdf(k, 4.2) for k in range(40)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert math.isclose(values[-1], 1.0, abs_tol=1e-9)


def test_poisson_known_values_and_support():
    assert math.isclose(poisson_pmf(0, 2.0), math.exp(-2.0))
    assert math.isclose(poisson_pmf(3, 2.0), 8.0 * math.exp(-2.0) / 6.0)
    assert poisson_pmf(-1, 2.0) == 0.0
    assert poisson_cdf(-0.5, 2.0) == 0.0


def test_poisson_large_k_does_not_overflow():
    value = poisson_pmf(200, 150.0)
    assert math.isfinite(value)
    assert math.isclose(value, scipy_stats.poisson.pmf(200, 150.0), rel_tol=1e-9)


@pytest.mark.parametrize("lam", [0.0, -2.0])
def test_poisson_rejects_non_positive_rate(lam):
    with pytest.raises(DomainViolation):
        poisson_pmf(1, lam)


def test_dispatch_by_kind():
    assert math.isclose(
        pdf("normal", 0.0, {"mean": 0.0, "std": 1.0}), normal_pdf(0.0, 0.0, 1.0)
    )
    assert math.isclose(
        cdf(DistributionKind.POISSON, 2, PoissonParams(2.0)), poisson_cdf(2, 2.0)
    )
    assert math.isclose(
        pdf("binomial", 3, {"n": 6, "p": 0.5}), binomial_pmf(3, 6, 0.5)
    )
    with pytest.raises(InvalidInput):
        pdf("gamma", 1.0, {"shape": 2.0})


def test_cumulative_functions_reject_nan_and_clamp_infinity():
    with pytest.raises(InvalidInput):
        binomial_cdf(float("nan"), 5, 0.5)
    with pytest.raises(InvalidInput):
        poisson_cdf(float("nan"), 2.0)

    assert binomial_cdf(float("inf"), 5, 0.5) == pytest.approx(1.0)
    assert binomial_cdf(float("-inf"), 5, 0.5) == 0.0
    assert poisson_cdf(float("inf"), 2.0) == 1.0
    assert poisson_cdf(float("-inf"), 2.0) == 0.0
