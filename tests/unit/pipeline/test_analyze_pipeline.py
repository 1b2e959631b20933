import logging
import math

import pytest

from datastats.domain.errors import WrongFieldCount
from datastats.pipeline.analyze import analyze_file


def test_analyze_file_reduces_value_column(write_csv):
    path = write_csv(
        """
        q1,g1,2023-01-01T00:00:00Z,10
        q2,g1,2023-01-02T00:00:00Z,20
        q3,g2,2023-01-03T00:00:00Z,30
        """
    )

    result = analyze_file(path)

    assert result.mean == 20.0
    assert result.stddev == pytest.approx(8.1649658, rel=1e-7)


def test_analyze_file_logs_record_count(write_csv, caplog):
    path = write_csv("q1,g1,2023-01-01T00:00:00Z,4\n")

    with caplog.at_level(logging.DEBUG, logger="datastats.pipeline.analyze"):
        result = analyze_file(path)

    assert tuple(result) == (4.0, 0.0)
    assert "Loaded 1 records" in caplog.text


def test_analyze_file_on_empty_input_is_nan(write_csv):
    result = analyze_file(write_csv(""))
    assert math.isnan(result.mean) and math.isnan(result.stddev)


def test_analyze_file_propagates_row_errors(write_csv):
    path = write_csv("q1,g1,2023-01-01T00:00:00Z\n")
    with pytest.raises(WrongFieldCount):
        analyze_file(path)
