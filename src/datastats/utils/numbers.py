from __future__ import annotations

import math
import re


_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_float(text: str) -> float:
    """Parse a base-10 floating-point literal into a finite float.

    Stricter than ``float()``: no whitespace, underscores, ``nan`` or
    ``inf`` spellings. Literals that overflow to infinity are rejected.
    """
    if _DECIMAL_RE.fullmatch(text) is None:
        raise ValueError(f"not a decimal number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"value out of range: {text!r}")
    return value
