"""Define the value types exchanged between the engine, the facade and output.

Every record is a frozen dataclass: results are produced once per call and
never mutated afterwards.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Mapping, Optional, Tuple, Union

from .config import DEFAULTS, PRECISION
from .errors import InvalidInput
from .validation import (
    require_mean,
    require_probability,
    require_rate,
    require_size,
    require_std,
    require_trials,
)


class DistributionKind(str, enum.Enum):
    NORMAL = "normal"
    BINOMIAL = "binomial"
    POISSON = "poisson"


class EvaluationMode(str, enum.Enum):
    DENSITY = "pdf"
    CUMULATIVE = "cdf"


class TestKind(str, enum.Enum):
    T_TEST = "ttest"
    CHI_SQUARE = "chisquare"

    # Keep pytest from collecting this enum as a test class.
    __test__ = False


class Conclusion(str, enum.Enum):
    REJECT = "Reject null hypothesis"
    FAIL_TO_REJECT = "Fail to reject null hypothesis"


def coerce_enum(enum_cls, value, label: str):
    """Return ``value`` as a member of ``enum_cls`` or raise ``InvalidInput``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise InvalidInput(
            f"Unknown {label} {value!r}; expected one of: {choices}"
        ) from None


@dataclass(frozen=True)
class NormalParams:
    mean: float
    std: float

    def __post_init__(self):
        object.__setattr__(self, "mean", require_mean(self.mean))
        object.__setattr__(self, "std", require_std(self.std))


@dataclass(frozen=True)
class BinomialParams:
    n: int
    p: float

    def __post_init__(self):
        object.__setattr__(self, "n", require_trials(self.n, minimum=1))
        object.__setattr__(self, "p", require_probability(self.p))


@dataclass(frozen=True)
class PoissonParams:
    lam: float

    def __post_init__(self):
        object.__setattr__(self, "lam", require_rate(self.lam))


DistributionParams = Union[NormalParams, BinomialParams, PoissonParams]


def params_for(kind, params: Union[Mapping[str, Any], DistributionParams]) -> DistributionParams:
    """Build the parameter record for ``kind`` from a plain mapping.

    Args:
        kind: ``DistributionKind`` or its string value.
        params: Mapping with ``mean``/``std`` (normal), ``n``/``p``
            (binomial) or ``lambda`` (poisson). An already-built parameter
            record is returned unchanged when it matches ``kind``.

    Raises:
        InvalidInput: If ``kind`` is unknown or a required key is missing.
        DomainViolation: If a parameter lies outside its domain.
    """
    kind = coerce_enum(DistributionKind, kind, "distribution")
    expected_type = {
        DistributionKind.NORMAL: NormalParams,
        DistributionKind.BINOMIAL: BinomialParams,
        DistributionKind.POISSON: PoissonParams,
    }[kind]
    if isinstance(params, (NormalParams, BinomialParams, PoissonParams)):
        if not isinstance(params, expected_type):
            raise InvalidInput(
                f"{type(params).__name__} does not describe a {kind.value} distribution."
            )
        return params

    try:
        if kind is DistributionKind.NORMAL:
            return NormalParams(mean=params["mean"], std=params["std"])
        if kind is DistributionKind.BINOMIAL:
            return BinomialParams(n=params["n"], p=params["p"])
        lam = params["lambda"] if "lambda" in params else params["lam"]
        return PoissonParams(lam=lam)
    except KeyError as exc:
        raise InvalidInput(
            f"Missing required parameter {exc.args[0]!r} for {kind.value} distribution."
        ) from None


@dataclass(frozen=True)
class Point:
    x: float
    y: float


ObservationSet = Tuple[Point, ...]


@dataclass(frozen=True)
class SampleRequest:
    kind: DistributionKind
    params: DistributionParams
    size: int = DEFAULTS.SAMPLE_SIZE

    def __post_init__(self):
        kind = coerce_enum(DistributionKind, self.kind, "distribution")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "params", params_for(kind, self.params))
        object.__setattr__(self, "size", require_size(self.size))


@dataclass(frozen=True)
class TestResult:
    """Outcome of one hypothesis test.

    Attributes:
        test_kind: Which test produced the result.
        statistic: t or chi-square statistic.
        p_value: Two-tailed (t) or upper-tail (chi-square) p-value.
        degrees_of_freedom: ``n - 1`` for the t-test, ``cells - 1`` for
            chi-square.
        conclusion: Decision at the 5% level.
        mean: Sample mean (t-test only).
        standard_error: ``s / sqrt(n)`` (t-test only).
        expected: Expected counts per cell (chi-square only).
    """

    __test__ = False

    test_kind: TestKind
    statistic: float
    p_value: float
    degrees_of_freedom: int
    conclusion: Conclusion
    mean: Optional[float] = None
    standard_error: Optional[float] = None
    expected: Optional[Tuple[float, ...]] = None

    @property
    def rejected(self) -> bool:
        return self.conclusion is Conclusion.REJECT

    def rounded(self) -> "TestResult":
        """Return a copy rounded to display precision."""
        return replace(
            self,
            statistic=round(self.statistic, PRECISION.STATISTIC),
            p_value=round(self.p_value, PRECISION.P_VALUE),
            mean=None if self.mean is None else round(self.mean, PRECISION.STATISTIC),
            standard_error=(
                None
                if self.standard_error is None
                else round(self.standard_error, PRECISION.STATISTIC)
            ),
            expected=(
                None
                if self.expected is None
                else tuple(round(e, PRECISION.EXPECTED) for e in self.expected)
            ),
        )

    def as_dict(self) -> dict:
        out = asdict(self)
        out["test_kind"] = self.test_kind.value
        out["conclusion"] = self.conclusion.value
        return {k: v for k, v in out.items() if v is not None}


@dataclass(frozen=True)
class RegressionResult:
    """Ordinary least-squares fit of y on a single predictor x.

    ``regression_line`` holds evenly spaced points on ``[min(x), max(x)]``
    (101 by default). Standard errors are 0.0 for a two-point fit, where the
    residual degrees of freedom vanish.
    """

    slope: float
    intercept: float
    r_squared: float
    correlation: float
    standard_error_of_slope: float
    residual_standard_error: float
    regression_line: Tuple[Point, ...] = field(repr=False)
    standard_error_of_intercept: float = 0.0
    n: int = 0

    @property
    def equation(self) -> str:
        return f"y = {self.slope:.4f}x + {self.intercept:.4f}"

    def predict(self, x: float) -> float:
        return self.slope * float(x) + self.intercept

    def rounded(self) -> "RegressionResult":
        nd = PRECISION.REGRESSION
        line_nd = PRECISION.REGRESSION_LINE
        return replace(
            self,
            slope=round(self.slope, nd),
            intercept=round(self.intercept, nd),
            r_squared=round(self.r_squared, nd),
            correlation=round(self.correlation, nd),
            standard_error_of_slope=round(self.standard_error_of_slope, nd),
            residual_standard_error=round(self.residual_standard_error, nd),
            standard_error_of_intercept=round(self.standard_error_of_intercept, nd),
            regression_line=tuple(
                Point(round(p.x, line_nd), round(p.y, line_nd))
                for p in self.regression_line
            ),
        )

    def as_dict(self) -> dict:
        out = asdict(self)
        out["equation"] = self.equation
        return out


@dataclass(frozen=True)
class ResultColumns:
    """Column labels shared by the tabular exports."""

    x: str = "x"
    y: str = "y"
    sample: str = "value"
    statistic: str = "Statistic"
    p_value: str = "p-value"
    dof: str = "Degrees of Freedom"
    conclusion: str = "Conclusion"
    fitted: str = "Fitted y"
    residual: str = "Residual"
