from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import math


@dataclass(frozen=True)
class Record:
    """One validated input row: two labels, a timestamp and a numeric value."""

    query: str
    group: str
    time: datetime
    value: float

    def __post_init__(self) -> None:
        if self.time.tzinfo is None:
            raise ValueError("time must be timezone-aware")
        if not math.isfinite(self.value):
            raise ValueError(f"value must be finite, got {self.value!r}")
