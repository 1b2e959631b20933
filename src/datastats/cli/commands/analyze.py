import json
import logging
from pathlib import Path

from datastats.analysis.stats import StatsResult
from datastats.cli.visuals import on_analyze_start
from datastats.config.resolution import AnalyzeSettings
from datastats.domain.errors import DataStatsError, MissingArgument
from datastats.pipeline.analyze import analyze_file

logger = logging.getLogger(__name__)


def _log_settings_debug(path: str, settings: AnalyzeSettings) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    payload = {
        "path": path,
        "encoding": settings.encoding,
        "precision": settings.precision,
        "visuals": settings.visuals,
    }
    logger.debug("Analyze settings:\n%s", json.dumps(payload, indent=2))


def _require_path(path: str | None) -> str:
    if not path:
        raise MissingArgument()
    return path


def print_report(result: StatsResult, precision: int) -> None:
    # NaN renders as "nan" under fixed-point formatting
    print(f"Avg: {result.mean:.{precision}f}")
    print(f"Standard deviation: {result.stddev:.{precision}f}")


def handle(path: str | None, settings: AnalyzeSettings) -> StatsResult:
    """Run one analysis and print the report; exits 1 on any failure."""
    try:
        path = _require_path(path)
    except MissingArgument as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    _log_settings_debug(path, settings)
    on_analyze_start(Path(path), settings.visuals)

    try:
        result = analyze_file(path, encoding=settings.encoding)
    except DataStatsError as exc:
        logger.error("failed to parse CSV: %s", exc)
        raise SystemExit(1) from exc

    print_report(result, settings.precision)
    return result
