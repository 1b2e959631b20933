from __future__ import annotations

from contextlib import closing
from pathlib import Path
from typing import Generic, TypeVar

from datastats.domain.record import Record
from datastats.sources.decoders import CsvDecoder, Decoder
from datastats.sources.models.parser import DataParser
from datastats.sources.parsers.record import RecordRowParser
from datastats.sources.transports import FsFileTransport, Transport

T = TypeVar("T")


class DataLoader(Generic[T]):
    """Compose a transport, a decoder and a row parser into one strict load.

    The first row of every stream is a header and is dropped unread. Any
    row error aborts the whole load; nothing parsed so far is returned.
    """

    def __init__(
        self,
        transport: Transport,
        decoder: Decoder,
        parser: DataParser[T],
    ):
        self.transport = transport
        self.decoder = decoder
        self.parser = parser

    def load(self) -> list[T]:
        out: list[T] = []
        for stream in self.transport.streams():
            with closing(stream):
                for index, fields in self.decoder.decode(stream):
                    if index == 0:
                        continue
                    out.append(self.parser.parse(index, fields))
        return out


def build_csv_loader(path: str | Path, *, encoding: str = "utf-8") -> DataLoader[Record]:
    return DataLoader(
        FsFileTransport(str(path)),
        CsvDecoder(delimiter=",", encoding=encoding),
        RecordRowParser(),
    )


def parse_csv(path: str | Path, *, encoding: str = "utf-8") -> list[Record]:
    """Read every record from a ``query,group,timestamp,value`` CSV file.

    Raises ``ResourceOpenError`` when the file cannot be opened and a
    ``RowError`` subclass for the first invalid row. ``encoding`` must be
    ASCII-compatible.
    """
    return build_csv_loader(path, encoding=encoding).load()
