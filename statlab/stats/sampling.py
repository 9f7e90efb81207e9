"""Pseudo-random variate generation for the supported distributions.

Every sampler draws from a :class:`UniformSource` (``next() -> float`` in
``[0, 1)``). When no source is passed a fresh :class:`NumpyUniformSource` is
created for the call, so concurrent callers never share generator state.
Tests inject a seeded or scripted source for deterministic output.
"""

from __future__ import annotations

import math
from typing import List, Optional, Protocol

import numpy as np

from ..errors import InvalidInput
from ..schema import DistributionKind, SampleRequest
from ..validation import (
    require_mean,
    require_probability,
    require_rate,
    require_size,
    require_std,
    require_trials,
)

TWO_PI = 2.0 * math.pi


class UniformSource(Protocol):
    def next(self) -> float:
        """Return a uniform variate in ``[0, 1)``."""


class NumpyUniformSource:
    """Uniform source backed by :func:`numpy.random.default_rng`.

    Args:
        seed (int, optional): Seed for reproducible streams. ``None`` draws
            fresh entropy from the OS.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.random())


def _source(source: Optional[UniformSource]) -> UniformSource:
    return source if source is not None else NumpyUniformSource()


def _draw_positive(source: UniformSource) -> float:
    # ln(0) is undefined; redraw the (rare) exact zero.
    u = source.next()
    while u <= 0.0:
        u = source.next()
    return u


def sample_normal(
    mean: float, std: float, size: int, source: Optional[UniformSource] = None
) -> List[float]:
    """Draw ``size`` normal variates with the Box–Muller transform.

    Each uniform pair ``(u1, u2)`` yields two standard normals
    ``sqrt(-2 ln u1) cos(2π u2)`` and ``sqrt(-2 ln u1) sin(2π u2)``, scaled to
    ``mean + z * std``. For odd ``size`` the last sine variate is discarded.
    """
    mean = require_mean(mean)
    std = require_std(std)
    size = require_size(size)
    src = _source(source)

    samples: List[float] = []
    for i in range(0, size, 2):
        u1 = _draw_positive(src)
        u2 = src.next()
        radius = math.sqrt(-2.0 * math.log(u1))
        samples.append(mean + radius * math.cos(TWO_PI * u2) * std)
        if i + 1 < size:
            samples.append(mean + radius * math.sin(TWO_PI * u2) * std)
    return samples


def sample_binomial(
    n: int, p: float, size: int, source: Optional[UniformSource] = None
) -> List[int]:
    """Draw ``size`` binomial variates by counting ``n`` Bernoulli trials each.

    Cost is O(size * n) uniform draws.
    """
    n = require_trials(n, minimum=1)
    p = require_probability(p)
    size = require_size(size)
    src = _source(source)

    samples: List[int] = []
    for _ in range(size):
        successes = 0
        for _ in range(n):
            if src.next() < p:
                successes += 1
        samples.append(successes)
    return samples


def sample_poisson(
    lam: float, size: int, source: Optional[UniformSource] = None
) -> List[int]:
    """Draw ``size`` Poisson variates with Knuth's multiplication algorithm.

    Successive uniforms are multiplied until the running product drops to
    ``exp(-lam)`` or below; the variate is the number of factors minus one.

    Warning:
        The loop has no iteration cap. The expected number of draws per
        variate is ``lam + 1``, so very large rates are slow, and once
        ``exp(-lam)`` underflows to zero (``lam`` above roughly 745) the
        product only stops at floating-point underflow and the variates are
        no longer Poisson distributed. Callers bound ``lam``.
    """
    lam = require_rate(lam)
    size = require_size(size)
    src = _source(source)
    limit = math.exp(-lam)

    samples: List[int] = []
    for _ in range(size):
        k = 0
        product = 1.0
        while True:
            k += 1
            product *= src.next()
            if product <= limit:
                break
        samples.append(k - 1)
    return samples


def generate(request: SampleRequest, source: Optional[UniformSource] = None) -> list:
    """Draw ``request.size`` variates for the requested distribution."""
    params = request.params
    if request.kind is DistributionKind.NORMAL:
        return sample_normal(params.mean, params.std, request.size, source)
    if request.kind is DistributionKind.BINOMIAL:
        return sample_binomial(params.n, params.p, request.size, source)
    if request.kind is DistributionKind.POISSON:
        return sample_poisson(params.lam, request.size, source)
    raise InvalidInput(f"Unsupported distribution {request.kind!r}")
