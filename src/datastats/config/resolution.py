from __future__ import annotations

import codecs
from dataclasses import dataclass
import logging
from typing import Any, Optional

from datastats.config.workspace import WorkspaceContext

DEFAULT_PRECISION = 6
DEFAULT_ENCODING = "utf-8"


def cascade(*values, fallback=None):
    """Return the first non-None value from a list, or fallback."""
    for value in values:
        if value is not None:
            return value
    return fallback


def _normalize_upper(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, int):
        return logging.getLevelName(value).upper()
    text = str(value).strip()
    return text.upper() if text else None


def _normalize_lower(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text.lower() if text else None


@dataclass(frozen=True)
class LogLevelDecision:
    name: str
    value: int


def resolve_log_level(
    *levels: Any,
    fallback: str = "WARNING",
) -> LogLevelDecision:
    name = None
    for level in levels:
        normalized = _normalize_upper(level)
        if normalized:
            name = normalized
            break
    if not name:
        name = _normalize_upper(fallback) or "WARNING"
    value = logging._nameToLevel.get(name, logging.WARNING)
    return LogLevelDecision(name=name, value=value)


def _ascii_compatible(encoding: str) -> bool:
    # rows are split on the newline byte before decoding
    try:
        return codecs.decode(b"\n,\"", encoding) == "\n,\""
    except (ValueError, TypeError, LookupError):
        return False


@dataclass(frozen=True)
class AnalyzeSettings:
    encoding: str
    precision: int
    visuals: str


def resolve_analyze_settings(
    *,
    cli_encoding: str | None,
    cli_precision: int | None,
    cli_visuals: str | None,
    workspace: WorkspaceContext | None,
) -> AnalyzeSettings:
    cfg = workspace.config if workspace else None
    encoding = cascade(
        cli_encoding,
        cfg.input.encoding if cfg else None,
        fallback=DEFAULT_ENCODING,
    )
    precision = cascade(
        cli_precision,
        cfg.output.precision if cfg else None,
        fallback=DEFAULT_PRECISION,
    )
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"unknown encoding: {encoding}") from exc
    if not _ascii_compatible(encoding):
        raise ValueError(f"encoding must be ASCII-compatible: {encoding}")
    visuals = cascade(
        _normalize_lower(cli_visuals),
        _normalize_lower(cfg.visuals if cfg else None),
        fallback="auto",
    )
    return AnalyzeSettings(encoding=encoding, precision=precision, visuals=visuals)
