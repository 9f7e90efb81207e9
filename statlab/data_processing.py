"""
Parses delimited text into ordered (x, y) observations for regression.
"""

# Parsing rule: the first line is a header and is skipped; every other line is
# split on commas and kept only when its first two fields are finite numbers.
# Malformed rows are dropped, not reported as errors; an empty result is left
# for the regression caller to reject as insufficient data.

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from .schema import ObservationSet, Point, ResultColumns

logger = logging.getLogger(__name__)

COLUMNS = ResultColumns()


def _split_rows(csv_text):
    """Return the first two raw fields of each non-header line."""
    lines = csv_text.strip().split("\n")
    rows = []
    for line in lines[1:]:
        values = line.split(",")
        if len(values) >= 2:
            rows.append((values[0].strip(), values[1].strip()))
        else:
            rows.append((values[0].strip(), ""))
    return rows


def parse_csv_data(csv_text):
    """Parse CSV text with a header row into an ordered observation set.

    Args:
        csv_text (str): Raw text, e.g. ``"x,y\\n1,2\\n3,4"``. Only the first
            two columns are read; further columns are ignored.

    Returns:
        tuple[Point, ...]: Observations in input order. Rows whose first two
        fields are not both finite numbers are skipped.

    Raises:
        TypeError: If ``csv_text`` is not a string.
    """
    if not isinstance(csv_text, str):
        raise TypeError(f"CSV data must be a string, got {type(csv_text).__name__}")

    rows = _split_rows(csv_text)
    if not rows:
        return ()

    frame = pd.DataFrame(rows, columns=[COLUMNS.x, COLUMNS.y])
    frame[COLUMNS.x] = pd.to_numeric(frame[COLUMNS.x], errors="coerce")
    frame[COLUMNS.y] = pd.to_numeric(frame[COLUMNS.y], errors="coerce")

    valid = np.isfinite(frame[COLUMNS.x].to_numpy(dtype=float)) & np.isfinite(
        frame[COLUMNS.y].to_numpy(dtype=float)
    )
    dropped = int(len(frame) - valid.sum())
    if dropped:
        logger.warning(
            "Dropped %d malformed row(s) out of %d while parsing CSV data",
            dropped,
            len(frame),
        )

    kept = frame[valid]
    return tuple(
        Point(float(x), float(y))
        for x, y in zip(kept[COLUMNS.x].to_numpy(), kept[COLUMNS.y].to_numpy())
    )


def load_observations(filepath):
    """
    Load (x, y) observations from a CSV file.

    Args:
        filepath (str or Path): Path to the CSV file.

    Returns:
        tuple[Point, ...]: Parsed observations.
    """
    text = Path(filepath).read_text(encoding="utf-8")
    points = parse_csv_data(text)
    logger.info("Loaded %d observation(s) from %s", len(points), filepath)
    return points


def observations_to_frame(points: ObservationSet) -> pd.DataFrame:
    """Return observations as a DataFrame with ``x`` and ``y`` columns."""
    return pd.DataFrame(
        {
            COLUMNS.x: [float(p.x) for p in points],
            COLUMNS.y: [float(p.y) for p in points],
        }
    )
