#!/usr/bin/env python3
"""
Command-line driver for the statlab analyses.
"""

# Subcommands:
#   distribution  Evaluate a pdf/cdf curve, export it to CSV and plot it.
#   test          Run a one-sample t-test or chi-square goodness-of-fit.
#   regression    Fit y on x from a CSV file with a header row.
#   sample        Draw a synthetic sample, export it and plot a histogram.
# Engine failures are logged and reported with exit status 2.

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from statlab.analysis import (
    analyze_regression,
    distribution_curve,
    generate_sample,
    print_regression_summary,
    print_test_result,
    run_hypothesis_test,
)
from statlab.config import DEFAULTS
from statlab.errors import InvalidInput, StatlabError
from statlab.output import (
    save_curve_to_csv,
    save_regression_to_csv,
    save_sample_to_csv,
    save_test_result_to_csv,
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _configure_logging(log_file=None, verbose=False):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
    )


def _add_distribution_params(parser):
    parser.add_argument(
        "--kind",
        required=True,
        choices=["normal", "binomial", "poisson"],
        help="Distribution family.",
    )
    parser.add_argument("--mean", type=float, help="Normal mean (μ).")
    parser.add_argument("--std", type=float, help="Normal standard deviation (σ).")
    parser.add_argument("--n", type=int, help="Binomial number of trials.")
    parser.add_argument("--p", type=float, help="Binomial probability of success.")
    parser.add_argument(
        "--lambda", dest="lam", type=float, help="Poisson rate parameter (λ)."
    )


def _params_from_args(args):
    """Collect the distribution parameters supplied on the command line."""
    candidates = {
        "mean": args.mean,
        "std": args.std,
        "n": args.n,
        "p": args.p,
        "lambda": args.lam,
    }
    return {key: value for key, value in candidates.items() if value is not None}


def _read_values(path):
    """Read numbers separated by commas, whitespace or newlines from a file."""
    with open(path, "r", encoding="utf-8") as fh:
        tokens = fh.read().replace(",", " ").split()
    try:
        return [float(tok) for tok in tokens]
    except ValueError as exc:
        raise InvalidInput(f"Non-numeric value in {path}: {exc}") from exc


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Explore distributions, run hypothesis tests and fit regressions."
    )
    parser.add_argument(
        "--output-dir", default="output", help="Directory for CSV and figure outputs."
    )
    parser.add_argument("--log-file", default=None, help="Optional log file path.")
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip figure generation."
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distribution", help="Evaluate a distribution curve.")
    _add_distribution_params(dist)
    dist.add_argument("--mode", choices=["pdf", "cdf"], default="pdf")

    test = sub.add_parser("test", help="Run a hypothesis test.")
    test.add_argument("--kind", required=True, choices=["ttest", "chisquare"])
    test.add_argument("values", nargs="*", type=float, help="Data values.")
    test.add_argument("--input", default=None, help="File of data values.")
    test.add_argument(
        "--mu", type=float, default=0.0, help="Hypothesized mean for the t-test."
    )
    test.add_argument(
        "--exact",
        action="store_true",
        help="Use exact t / chi-square p-values instead of the approximations.",
    )

    reg = sub.add_parser("regression", help="Fit a linear regression.")
    reg.add_argument("--input", required=True, help="CSV file with an x,y header.")

    sample = sub.add_parser("sample", help="Generate a synthetic sample.")
    _add_distribution_params(sample)
    sample.add_argument("--size", type=int, default=DEFAULTS.SAMPLE_SIZE)
    sample.add_argument("--seed", type=int, default=None)

    return parser


def _run_distribution(args):
    points = distribution_curve(args.kind, _params_from_args(args), args.mode)
    logging.info("Evaluated %s %s at %d points", args.kind, args.mode, len(points))
    save_curve_to_csv(
        points, args.output_dir, filename=f"{args.kind}_{args.mode}.csv"
    )
    if not args.no_plot:
        from statlab.plotting import plot_distribution_curve

        path = plot_distribution_curve(points, args.kind, args.mode, args.output_dir)
        logging.info("  - Distribution figure: %s", path)


def _run_test(args):
    values = list(args.values)
    if args.input:
        values.extend(_read_values(args.input))
    result = run_hypothesis_test(values, args.kind, mu=args.mu, exact=args.exact)
    print_test_result(result)
    save_test_result_to_csv(result, args.output_dir)


def _run_regression(args):
    with open(args.input, "r", encoding="utf-8") as fh:
        text = fh.read()
    points, result = analyze_regression(text)
    logging.info("Parsed %d observations from %s", len(points), args.input)
    print_regression_summary(points, result)
    save_regression_to_csv(points, result, args.output_dir)
    if not args.no_plot:
        from statlab.plotting import plot_regression

        path = plot_regression(points, result, args.output_dir)
        logging.info("  - Regression figure: %s", path)


def _run_sample(args):
    values = generate_sample(
        args.kind, _params_from_args(args), size=args.size, seed=args.seed
    )
    logging.info("Generated %d %s variates", len(values), args.kind)
    save_sample_to_csv(values, args.output_dir, filename=f"{args.kind}_sample.csv")
    if not args.no_plot:
        from statlab.plotting import plot_sample_histogram

        path = plot_sample_histogram(values, args.kind, args.output_dir)
        logging.info("  - Sample histogram: %s", path)


COMMANDS = {
    "distribution": _run_distribution,
    "test": _run_test,
    "regression": _run_regression,
    "sample": _run_sample,
}


def main(argv=None):
    """Parse arguments, run one subcommand and return the exit status."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file, args.verbose)

    start_time = time.time()
    logging.info("Running %s", args.command)
    try:
        COMMANDS[args.command](args)
    except StatlabError as exc:
        logging.error("%s failed: %s", args.command, exc)
        return 2

    logging.info(
        "%s completed in %.2f seconds", args.command, time.time() - start_time
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
