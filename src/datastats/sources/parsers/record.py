from __future__ import annotations

from typing import Sequence

from datastats.domain.errors import InvalidNumber, InvalidTimestamp, WrongFieldCount
from datastats.domain.record import Record
from datastats.sources.models.parser import DataParser
from datastats.utils.numbers import parse_float
from datastats.utils.time import parse_rfc3339

FIELD_COUNT = 4


class RecordRowParser(DataParser[Record]):
    """Parse ``query,group,timestamp,value`` rows into Record instances."""

    def parse(self, index: int, fields: Sequence[str]) -> Record:
        if len(fields) != FIELD_COUNT:
            raise WrongFieldCount(index, len(fields), expected=FIELD_COUNT)
        query, group, time_raw, value_raw = fields

        try:
            ts = parse_rfc3339(time_raw)
        except ValueError as exc:
            raise InvalidTimestamp(index, time_raw) from exc

        try:
            value = parse_float(value_raw)
        except ValueError as exc:
            raise InvalidNumber(index, value_raw) from exc

        return Record(query=query, group=group, time=ts, value=value)
