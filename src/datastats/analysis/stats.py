from __future__ import annotations

from dataclasses import astuple, dataclass
import math
from typing import Iterator, Sequence


@dataclass(frozen=True)
class StatsResult:
    mean: float
    stddev: float

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values) / len(values)


def mean_and_stddev(values: Sequence[float]) -> StatsResult:
    """Mean and population standard deviation (divisor N) in two passes.

    Uses plain left-to-right summation. An empty sequence yields
    ``StatsResult(nan, nan)``.
    """
    avg = mean(values)
    deviations = [v - avg for v in values]
    # d * d overflows to inf where ** would raise OverflowError
    sqr_deviations = [d * d for d in deviations]
    return StatsResult(mean=avg, stddev=math.sqrt(mean(sqr_deviations)))
