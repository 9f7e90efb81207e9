"""Centralized numeric defaults and display precisions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineDefaults:
    """Container for the constants that shape engine and facade behavior.

    Attributes:
        SIGNIFICANCE_LEVEL: p-values strictly below this reject the null
            hypothesis.
        LARGE_SAMPLE_N: Sample size from which the t statistic is referred to
            the standard normal distribution.
        T_CRITICAL: Fixed |t| threshold used below ``LARGE_SAMPLE_N``.
        SMALL_SAMPLE_P_SIGNIFICANT: p-value reported when |t| exceeds
            ``T_CRITICAL`` for a small sample.
        SMALL_SAMPLE_P_NOT_SIGNIFICANT: p-value reported otherwise.
        CHI_SQUARE_P_FLOOR: Smallest chi-square p-value ever reported.
        REGRESSION_STEPS: Number of equal steps in the plotted regression line
            (the line has ``REGRESSION_STEPS + 1`` points).
        SAMPLE_SIZE: Default synthetic sample size.
        NORMAL_CURVE_POINTS: Number of x positions on a normal curve.
        NORMAL_CURVE_HALF_WIDTH: Half-width of the normal curve in units of
            the standard deviation.
        POISSON_MIN_K / POISSON_MAX_K: Bounds on the last k plotted for a
            Poisson distribution.
        POISSON_SPAN_FACTOR: The last k is ``lambda * POISSON_SPAN_FACTOR``
            clamped to the bounds above.
    """

    SIGNIFICANCE_LEVEL: float = 0.05
    LARGE_SAMPLE_N: int = 30
    T_CRITICAL: float = 2.0
    SMALL_SAMPLE_P_SIGNIFICANT: float = 0.05
    SMALL_SAMPLE_P_NOT_SIGNIFICANT: float = 0.1
    CHI_SQUARE_P_FLOOR: float = 1e-6
    REGRESSION_STEPS: int = 100
    SAMPLE_SIZE: int = 100
    NORMAL_CURVE_POINTS: int = 201
    NORMAL_CURVE_HALF_WIDTH: float = 2.0
    POISSON_MIN_K: int = 20
    POISSON_MAX_K: int = 50
    POISSON_SPAN_FACTOR: float = 4.0


@dataclass(frozen=True)
class DisplayPrecision:
    """Decimal places used when results are rounded for display."""

    CURVE_X: int = 3
    CURVE_Y: int = 6
    STATISTIC: int = 4
    P_VALUE: int = 6
    EXPECTED: int = 2
    REGRESSION: int = 4
    REGRESSION_LINE: int = 3
    NORMAL_SAMPLE: int = 4


DEFAULTS = EngineDefaults()
PRECISION = DisplayPrecision()
