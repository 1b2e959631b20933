from __future__ import annotations

import logging
from pathlib import Path

from datastats.analysis.stats import StatsResult, mean_and_stddev
from datastats.sources.loader import parse_csv

logger = logging.getLogger(__name__)


def analyze_file(path: str | Path, *, encoding: str = "utf-8") -> StatsResult:
    """Parse ``path`` and reduce the value column to mean and stddev."""
    records = parse_csv(path, encoding=encoding)
    logger.debug("Loaded %d records from %s", len(records), path)

    values = [record.value for record in records]
    if not values:
        logger.warning("No records in %s; statistics are undefined (nan)", path)

    result = mean_and_stddev(values)
    logger.debug("mean=%r stddev=%r", result.mean, result.stddev)
    return result
