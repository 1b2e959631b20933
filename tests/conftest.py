from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

HEADER = "query,group,time,value\n"


@pytest.fixture
def write_csv(tmp_path: Path):
    """Return a helper that writes CSV text (dedented) into a temp file."""

    def _write(body: str, *, name: str = "data.csv", header: str | None = HEADER,
               encoding: str = "utf-8") -> Path:
        dest = tmp_path / name
        text = textwrap.dedent(body).lstrip("\n")
        dest.write_text((header or "") + text, encoding=encoding, newline="")
        return dest

    return _write
