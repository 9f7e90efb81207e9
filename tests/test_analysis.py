import pytest

from statlab.analysis import (
    analyze_regression,
    distribution_curve,
    generate_sample,
    print_regression_summary,
    print_test_result,
    run_hypothesis_test,
)
from statlab.errors import DegenerateInput, DomainViolation, InvalidInput
from statlab.schema import Conclusion, NormalParams, Point


def test_normal_curve_covers_two_standard_deviations():
    points = distribution_curve("normal", {"mean": 0, "std": 1})

    assert len(points) == 201
    assert points[0].x == -2.0
    assert points[-1].x == 2.0
    assert points[100] == Point(0.0, 0.398942)
    assert all(b.x > a.x for a, b in zip(points, points[1:]))


def test_normal_cdf_curve_is_rounded():
    points = distribution_curve("normal", NormalParams(10.0, 2.5), mode="cdf")

    assert points[100].y == 0.5
    assert all(p.y == round(p.y, 6) and p.x == round(p.x, 3) for p in points)


def test_binomial_curve_covers_zero_to_n():
    points = distribution_curve("binomial", {"n": 10, "p": 0.5})

    assert [p.x for p in points] == [float(k) for k in range(11)]
    assert points[5].y == 0.246094
    cumulative = distribution_curve("binomial", {"n": 10, "p": 0.5}, mode="cdf")
    assert cumulative[-1].y == 1.0


@pytest.mark.parametrize(
    "lam,count", [(2.0, 21), (2.6, 21), (8.0, 33), (20.0, 51), (100.0, 51)]
)
def test_poisson_curve_range(lam, count):
    points = distribution_curve("poisson", {"lambda": lam})
    assert len(points) == count
    assert points[0].x == 0.0


def test_curve_rejects_bad_arguments():
    with pytest.raises(InvalidInput):
        distribution_curve("normal", {"mean": 0})
    with pytest.raises(InvalidInput):
        distribution_curve("normal", {"mean": 0, "std": 1}, mode="pmf")
    with pytest.raises(InvalidInput):
        distribution_curve("uniform", {})
    with pytest.raises(DomainViolation):
        distribution_curve("normal", {"mean": 0, "std": -1})
    with pytest.raises(DomainViolation):
        distribution_curve("binomial", {"n": 0, "p": 0.5})


def test_t_test_is_rounded_for_display():
    result = run_hypothesis_test([1, 2, 3, 4, 5], "ttest")

    assert result.statistic == 4.2426
    assert result.p_value == 0.05
    assert result.degrees_of_freedom == 4
    assert result.conclusion is Conclusion.REJECT
    assert result.mean == 3.0
    assert result.standard_error == 0.7071


def test_chi_square_uses_absolute_values():
    result = run_hypothesis_test([-10, 20, -30, 40], "chisquare")

    assert result.statistic == 20.0
    assert result.degrees_of_freedom == 3
    assert result.expected == (25.0, 25.0, 25.0, 25.0)
    assert result.conclusion is Conclusion.REJECT


def test_hypothesis_test_errors():
    with pytest.raises(InvalidInput):
        run_hypothesis_test([1.0], "ttest")
    with pytest.raises(InvalidInput):
        run_hypothesis_test([1, 2, 3], "anova")
    with pytest.raises(DegenerateInput):
        run_hypothesis_test([4, 4, 4], "ttest")


def test_analyze_regression():
    points, result = analyze_regression("x,y\n1,2\n2,4\n3,6")

    assert points == (Point(1.0, 2.0), Point(2.0, 4.0), Point(3.0, 6.0))
    assert result.slope == 2.0
    assert result.intercept == 0.0
    assert result.r_squared == 1.0
    assert len(result.regression_line) == 101
    assert result.regression_line[50] == Point(2.0, 4.0)


@pytest.mark.parametrize("text", ["", "   ", None, "x,y\n1,2", "x,y\nfoo,bar\nbaz,1"])
def test_analyze_regression_rejects_insufficient_data(text):
    with pytest.raises(InvalidInput):
        analyze_regression(text)


def test_analyze_regression_degenerate_x():
    with pytest.raises(DegenerateInput):
        analyze_regression("x,y\n1,2\n1,3\n1,4")


def test_generate_sample_rounding_and_types():
    normal = generate_sample("normal", {"mean": 0, "std": 1}, size=7, seed=5)
    binomial = generate_sample("binomial", {"n": 5, "p": 0.4}, size=6, seed=5)
    poisson = generate_sample("poisson", {"lambda": 3}, size=4, seed=5)

    assert len(normal) == 7
    assert all(v == round(v, 4) for v in normal)
    assert all(isinstance(v, int) and 0 <= v <= 5 for v in binomial)
    assert all(isinstance(v, int) and v >= 0 for v in poisson)


def test_generate_sample_is_reproducible_with_seed(scripted_source):
    first = generate_sample("normal", {"mean": 3, "std": 2}, size=10, seed=42)
    second = generate_sample("normal", {"mean": 3, "std": 2}, size=10, seed=42)
    assert first == second

    scripted = generate_sample(
        "poisson", {"lambda": 1}, size=3, source=scripted_source([0.5])
    )
    assert scripted == [1, 1, 1]


def test_generate_sample_rejects_bad_size():
    with pytest.raises(InvalidInput):
        generate_sample("normal", {"mean": 0, "std": 1}, size=0)


def test_print_helpers(capsys):
    print_test_result(run_hypothesis_test([10, 20, 30, 40], "chisquare"))
    points, result = analyze_regression("x,y\n1,2\n2,4\n3,6")
    print_regression_summary(points, result)

    out = capsys.readouterr().out
    assert "Expected counts = [25.00, 25.00, 25.00, 25.00]" in out
    assert "Reject null hypothesis" in out
    assert "y = 2.0000x + 0.0000" in out
