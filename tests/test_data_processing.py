import logging

import pytest

from statlab.data_processing import (
    load_observations,
    observations_to_frame,
    parse_csv_data,
)
from statlab.schema import Point


def test_parse_skips_header_and_malformed_rows(caplog):
    caplog.set_level(logging.WARNING)
    points = parse_csv_data("x,y\n1,2\nabc,def\n3,4")

    assert points == (Point(1.0, 2.0), Point(3.0, 4.0))
    assert any(
        "Dropped 1 malformed row(s) out of 3" in rec.message for rec in caplog.records
    )


def test_parse_reads_first_two_columns_only():
    points = parse_csv_data("x,y,label\n 1.5 , -2 ,a\n2,3,b,extra")
    assert points == (Point(1.5, -2.0), Point(2.0, 3.0))


def test_parse_drops_single_field_blank_and_non_finite_rows(caplog):
    caplog.set_level(logging.WARNING)
    text = "x,y\r\n1,2\r\n5\r\n\r\ninf,3\r\n4,nan\r\n6,7\r\n"
    points = parse_csv_data(text)

    assert points == (Point(1.0, 2.0), Point(6.0, 7.0))
    assert any("Dropped 4 malformed row(s)" in rec.message for rec in caplog.records)


def test_parse_preserves_input_order():
    points = parse_csv_data("x,y\n3,1\n1,2\n2,3")
    assert [p.x for p in points] == [3.0, 1.0, 2.0]


def test_header_only_yields_no_points(caplog):
    caplog.set_level(logging.WARNING)
    assert parse_csv_data("x,y") == ()
    assert parse_csv_data("   ") == ()
    assert not caplog.records


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        parse_csv_data(b"x,y\n1,2")


def test_load_observations_from_file(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    path = tmp_path / "obs.csv"
    path.write_text("x,y\n0,1\n1,3\n2,5\n", encoding="utf-8")

    points = load_observations(path)

    assert len(points) == 3
    assert any("Loaded 3 observation(s)" in rec.message for rec in caplog.records)


def test_observations_to_frame():
    df = observations_to_frame((Point(1.0, 2.0), Point(3.0, 4.0)))
    assert list(df.columns) == ["x", "y"]
    assert df["y"].tolist() == [2.0, 4.0]
