import math

import pytest

from datastats.analysis.stats import StatsResult, mean, mean_and_stddev


def test_mean_of_three_values():
    assert mean([2.0, 4.0, 6.0]) == 4.0


def test_population_stddev_textbook_example():
    result = mean_and_stddev([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
    assert result.mean == 5.0
    assert result.stddev == 2.0


def test_stddev_uses_population_divisor():
    avg, stddev = mean_and_stddev([10.0, 20.0, 30.0])
    assert avg == 20.0
    assert stddev == pytest.approx(8.1649658, rel=1e-7)
    assert stddev != pytest.approx(10.0)  # sample stddev


@pytest.mark.parametrize("x", [0.0, -7.25, 1e300, 3.0])
def test_single_value_has_zero_spread(x):
    assert mean_and_stddev([x]) == StatsResult(mean=x, stddev=0.0)


def test_empty_input_is_nan_for_both():
    assert math.isnan(mean([]))
    result = mean_and_stddev([])
    assert math.isnan(result.mean)
    assert math.isnan(result.stddev)


def test_result_unpacks_as_pair():
    avg, stddev = StatsResult(mean=1.5, stddev=0.5)
    assert (avg, stddev) == (1.5, 0.5)


def test_squared_deviation_overflow_gives_inf():
    result = mean_and_stddev([1e200, -1e200])
    assert result.mean == 0.0
    assert result.stddev == math.inf
