"""
Statistical computation engine.

This subpackage provides the numerical routines behind every capability of
the package. All functions take plain numbers or ``statlab.schema`` value
types and return new values; none of them hold state between calls.

Modules:
    distributions:
        Densities, mass functions and cumulative distribution functions for
        the normal, binomial and Poisson distributions.

    hypothesis:
        One-sample t-test and chi-square goodness-of-fit with the
        application's approximate p-value policy (exact p-values optional).

    regression:
        Ordinary least-squares fit of y on x with r-squared, correlation,
        standard errors and a sampled regression line.

    sampling:
        Box–Muller, Bernoulli-counting and Knuth samplers on top of an
        injectable uniform source.

Design Principle:
    This subpackage has no dependencies on the facade, output, or plotting
    modules and can be tested on its own.
"""

from .distributions import (
    binomial_cdf,
    binomial_pmf,
    cdf,
    normal_cdf,
    normal_pdf,
    pdf,
    poisson_cdf,
    poisson_pmf,
)
from .hypothesis import chi_square_goodness_of_fit, one_sample_t_test, run_test
from .regression import fit_line, linear_regression
from .sampling import (
    NumpyUniformSource,
    UniformSource,
    generate,
    sample_binomial,
    sample_normal,
    sample_poisson,
)

__all__ = [
    "normal_pdf",
    "normal_cdf",
    "binomial_pmf",
    "binomial_cdf",
    "poisson_pmf",
    "poisson_cdf",
    "pdf",
    "cdf",
    "one_sample_t_test",
    "chi_square_goodness_of_fit",
    "run_test",
    "linear_regression",
    "fit_line",
    "UniformSource",
    "NumpyUniformSource",
    "sample_normal",
    "sample_binomial",
    "sample_poisson",
    "generate",
]
