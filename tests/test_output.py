import os

import pandas as pd
import pytest

from statlab.analysis import analyze_regression, distribution_curve, run_hypothesis_test
from statlab.output import (
    hypothesis_result_frame,
    save_curve_to_csv,
    save_regression_to_csv,
    save_sample_to_csv,
    save_test_result_to_csv,
)


def test_save_curve_to_csv(tmp_path):
    points = distribution_curve("binomial", {"n": 4, "p": 0.5})
    path = save_curve_to_csv(points, str(tmp_path / "out"), filename="binom.csv")

    df = pd.read_csv(path)
    assert list(df.columns) == ["x", "y"]
    assert df["x"].tolist() == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert df["y"].iloc[2] == pytest.approx(0.375)


def test_save_sample_to_csv(tmp_path):
    path = save_sample_to_csv([3, 1, 4, 1, 5], str(tmp_path))

    df = pd.read_csv(path)
    assert os.path.basename(path) == "sample.csv"
    assert df["value"].tolist() == [3, 1, 4, 1, 5]


def test_hypothesis_result_frame_columns():
    t_df = hypothesis_result_frame(run_hypothesis_test([1, 2, 3, 4, 5], "ttest"))
    chi_df = hypothesis_result_frame(
        run_hypothesis_test([10, 20, 30, 40], "chisquare")
    )

    assert list(t_df.columns) == [
        "Test",
        "Statistic",
        "p-value",
        "Degrees of Freedom",
        "Conclusion",
        "Mean",
        "Standard Error",
    ]
    assert t_df["Conclusion"].iloc[0] == "Reject null hypothesis"
    assert chi_df["Expected"].iloc[0] == "25.00 25.00 25.00 25.00"
    assert "Mean" not in chi_df.columns


def test_save_test_result_to_csv(tmp_path):
    result = run_hypothesis_test([1, 2, 3, 4, 5], "ttest")
    path = save_test_result_to_csv(result, str(tmp_path))

    df = pd.read_csv(path)
    assert df["Statistic"].iloc[0] == pytest.approx(4.2426)
    assert df["Degrees of Freedom"].iloc[0] == 4


def test_save_regression_to_csv(tmp_path):
    points, result = analyze_regression("x,y\n1,2.1\n2,3.9\n3,6.2\n4,7.8")
    obs_path, summary_path, line_path = save_regression_to_csv(
        points, result, str(tmp_path)
    )

    obs = pd.read_csv(obs_path)
    assert list(obs.columns) == ["x", "y", "Fitted y", "Residual"]
    assert obs["Residual"].sum() == pytest.approx(0.0, abs=1e-3)

    summary = pd.read_csv(summary_path)
    assert summary["Equation"].iloc[0] == result.equation
    assert summary["n"].iloc[0] == 4
    assert summary["R-squared"].iloc[0] == pytest.approx(result.r_squared)

    line = pd.read_csv(line_path)
    assert len(line) == 101
    assert line["x"].iloc[0] == 1.0
    assert line["x"].iloc[-1] == 4.0
