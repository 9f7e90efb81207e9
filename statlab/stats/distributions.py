"""Density, mass and cumulative functions for the supported distributions.

Continuous:
    normal_pdf, normal_cdf

Discrete (zero mass outside the support; the cumulative functions reject a NaN k):
    binomial_pmf, binomial_cdf, poisson_pmf, poisson_cdf

Cumulative functions for the discrete distributions are direct sums of the
mass function, which is O(k) per call and adequate for chart-sized ranges.
"""

from __future__ import annotations

import math

from ..errors import InvalidInput
from ..schema import (
    DistributionKind,
    DistributionParams,
    coerce_enum,
    params_for,
)
from ..validation import require_probability, require_rate, require_std, require_trials

SQRT_2PI = math.sqrt(2.0 * math.pi)
SQRT_2 = math.sqrt(2.0)

# math.comb results above this many trials can exceed float range.
_EXACT_COMB_MAX_N = 1000


def _as_count(k) -> int | None:
    """Return ``k`` as an int when it is integral, else ``None``."""
    k = float(k)
    if not math.isfinite(k) or k != math.floor(k):
        return None
    return int(k)


def _cdf_point(k) -> float:
    k = float(k)
    if math.isnan(k):
        raise InvalidInput("Cumulative probability is undefined at k = nan.")
    return k


def normal_pdf(x: float, mean: float, std: float) -> float:
    """Normal probability density at ``x``.

    Raises:
        DomainViolation: If ``std`` is not strictly positive.
    """
    std = require_std(std)
    z = (float(x) - float(mean)) / std
    return math.exp(-0.5 * z * z) / (std * SQRT_2PI)


def normal_cdf(x: float, mean: float, std: float) -> float:
    """Normal cumulative probability ``P(X <= x)`` via the error function.

    Note:
        The hypothesis-test p-value approximations are built on this function,
        so it relies on the platform ``erf`` rather than a truncated series.
    """
    std = require_std(std)
    return 0.5 * (1.0 + math.erf((float(x) - float(mean)) / (std * SQRT_2)))


def binomial_pmf(k, n: int, p: float) -> float:
    """Binomial mass ``C(n, k) p^k (1-p)^(n-k)``; 0 outside ``0..n``."""
    n = require_trials(n, minimum=0)
    p = require_probability(p)
    k = _as_count(k)
    if k is None or k < 0 or k > n:
        return 0.0

    if p == 0.0:
        return 1.0 if k == 0 else 0.0
    if p == 1.0:
        return 1.0 if k == n else 0.0

    if n <= _EXACT_COMB_MAX_N:
        return math.comb(n, k) * p**k * (1.0 - p) ** (n - k)

    log_pmf = (
        math.lgamma(n + 1)
        - math.lgamma(k + 1)
        - math.lgamma(n - k + 1)
        + k * math.log(p)
        + (n - k) * math.log1p(-p)
    )
    return math.exp(log_pmf)


def binomial_cdf(k, n: int, p: float) -> float:
    """Binomial cumulative probability ``P(X <= k)`` by direct summation."""
    n = require_trials(n, minimum=0)
    p = require_probability(p)
    k = _cdf_point(k)
    if k < 0:
        return 0.0
    upper = n if k >= n else int(math.floor(k))
    return math.fsum(binomial_pmf(i, n, p) for i in range(upper + 1))


def poisson_pmf(k, lam: float) -> float:
    """Poisson mass ``lam^k e^-lam / k!``; 0 for negative or non-integer ``k``.

    The mass is evaluated in log space with ``lgamma`` so that large ``k``
    never overflows a raw factorial.
    """
    lam = require_rate(lam)
    k = _as_count(k)
    if k is None or k < 0:
        return 0.0
    return math.exp(k * math.log(lam) - lam - math.lgamma(k + 1))


def poisson_cdf(k, lam: float) -> float:
    """Poisson cumulative probability ``P(X <= k)`` by direct summation."""
    lam = require_rate(lam)
    k = _cdf_point(k)
    if k < 0:
        return 0.0
    if math.isinf(k):
        return 1.0
    upper = int(math.floor(k))
    return math.fsum(poisson_pmf(i, lam) for i in range(upper + 1))


def pdf(kind, x: float, params: DistributionParams) -> float:
    """Density (normal) or mass (binomial, poisson) of ``kind`` at ``x``."""
    kind = coerce_enum(DistributionKind, kind, "distribution")
    params = params_for(kind, params)
    if kind is DistributionKind.NORMAL:
        return normal_pdf(x, params.mean, params.std)
    if kind is DistributionKind.BINOMIAL:
        return binomial_pmf(x, params.n, params.p)
    if kind is DistributionKind.POISSON:
        return poisson_pmf(x, params.lam)
    raise InvalidInput(f"Unsupported distribution {kind!r}")


def cdf(kind, x: float, params: DistributionParams) -> float:
    """Cumulative probability of ``kind`` at ``x``."""
    kind = coerce_enum(DistributionKind, kind, "distribution")
    params = params_for(kind, params)
    if kind is DistributionKind.NORMAL:
        return normal_cdf(x, params.mean, params.std)
    if kind is DistributionKind.BINOMIAL:
        return binomial_cdf(x, params.n, params.p)
    if kind is DistributionKind.POISSON:
        return poisson_cdf(x, params.lam)
    raise InvalidInput(f"Unsupported distribution {kind!r}")
