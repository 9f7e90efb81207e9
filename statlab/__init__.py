"""
A Python package for exploring probability distributions, running basic
hypothesis tests and fitting simple linear regressions.

Modules:
    - stats: Distribution functions, hypothesis tests, OLS regression and samplers.
    - data_processing: Parses delimited (x, y) text into observations.
    - analysis: Capability-level entry points with display rounding.
    - output: Writes results to CSV files.
    - plotting: Renders distribution, sample and regression figures.
"""

__version__ = "1.0.0"

from .analysis import (
    analyze_regression,
    distribution_curve,
    generate_sample,
    print_regression_summary,
    print_test_result,
    run_hypothesis_test,
)
from .data_processing import load_observations, parse_csv_data
from .errors import DegenerateInput, DomainViolation, InvalidInput, StatlabError
from .output import (
    save_curve_to_csv,
    save_regression_to_csv,
    save_sample_to_csv,
    save_test_result_to_csv,
)

__all__ = [
    # Analysis
    "distribution_curve",
    "run_hypothesis_test",
    "analyze_regression",
    "generate_sample",
    "print_test_result",
    "print_regression_summary",
    # Data processing
    "parse_csv_data",
    "load_observations",
    # Output
    "save_curve_to_csv",
    "save_sample_to_csv",
    "save_test_result_to_csv",
    "save_regression_to_csv",
    # Errors
    "StatlabError",
    "InvalidInput",
    "DegenerateInput",
    "DomainViolation",
]
