"""Input validators shared by the engine modules.

Every validator either returns the normalized value or raises one of the
``statlab.errors`` types before any computation takes place.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable

import numpy as np

from .errors import DomainViolation, InvalidInput


def require_std(std: float) -> float:
    std = float(std)
    if not math.isfinite(std) or std <= 0:
        raise DomainViolation(f"Standard deviation must be finite and > 0, got {std!r}")
    return std


def require_mean(mean: float) -> float:
    mean = float(mean)
    if not math.isfinite(mean):
        raise DomainViolation(f"Mean must be finite, got {mean!r}")
    return mean


def require_probability(p: float) -> float:
    p = float(p)
    if not 0.0 <= p <= 1.0:
        raise DomainViolation(f"Probability must lie in [0, 1], got {p!r}")
    return p


def require_trials(n, minimum: int = 1) -> int:
    """Return ``n`` as an int, rejecting non-integral or too-small counts."""
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise DomainViolation(f"Number of trials must be an integer, got {n!r}")
    if not math.isfinite(float(n)) or float(n) != int(n):
        raise DomainViolation(f"Number of trials must be an integer, got {n!r}")
    n = int(n)
    if n < minimum:
        raise DomainViolation(f"Number of trials must be >= {minimum}, got {n}")
    return n


def require_rate(lam: float) -> float:
    lam = float(lam)
    if not math.isfinite(lam) or lam <= 0:
        raise DomainViolation(f"Poisson rate must be finite and > 0, got {lam!r}")
    return lam


def require_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1:
        raise InvalidInput(f"Sample size must be an integer >= 1, got {size!r}")
    return int(size)


def finite_array(values: Iterable[float], name: str, min_count: int = 1) -> np.ndarray:
    """Convert ``values`` to a 1-D float array of finite numbers.

    Raises:
        InvalidInput: If a value is not numeric or not finite, or fewer than
            ``min_count`` values are supplied.
    """
    try:
        arr = np.asarray(list(values), dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} must contain only numbers.") from exc
    if arr.ndim != 1:
        raise InvalidInput(f"{name} must be a flat sequence of numbers.")
    if len(arr) < min_count:
        raise InvalidInput(
            f"{name} needs at least {min_count} value(s), got {len(arr)}."
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(f"{name} must contain only finite numbers.")
    return arr
