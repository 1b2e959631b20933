from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from datastats.domain.errors import ResourceOpenError


class Transport(ABC):
    """Abstract transport that yields raw-byte streams per resource."""

    @abstractmethod
    def streams(self) -> Iterator[Iterable[bytes]]:
        pass


class FsFileTransport(Transport):
    """Read a single local file as a stream of byte chunks.

    The file is opened lazily on the first pull from the stream and is
    closed when the stream is exhausted or closed, whichever comes first.
    """

    def __init__(self, path: str, *, chunk_size: int = 65536):
        self.path = str(path)
        self.chunk_size = chunk_size

    def streams(self) -> Iterator[Iterable[bytes]]:
        def _iter() -> Iterator[bytes]:
            try:
                f = open(self.path, "rb")
            except OSError as exc:
                raise ResourceOpenError(self.path, exc) from exc
            with f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    yield chunk
        yield _iter()
