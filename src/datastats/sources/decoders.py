from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Any
import codecs
import csv

from datastats.domain.errors import MalformedRow


class Decoder(ABC):
    @abstractmethod
    def decode(self, chunks: Iterable[bytes]) -> Iterator[Any]:
        pass


def _iter_text_lines(chunks: Iterable[bytes], encoding: str) -> Iterator[str]:
    """Yield decoded lines with their terminators kept.

    Bytes are split on ``\\n`` before decoding, so a decode error surfaces
    while the line holding the bad bytes is read. The encoding must be
    ASCII-compatible. ``csv`` needs the newline to rebuild quoted fields
    that span lines.
    """
    decoder = codecs.getincrementaldecoder(encoding)()
    pending = b""
    for chunk in chunks:
        pending += chunk
        start = 0
        while True:
            idx = pending.find(b"\n", start)
            if idx == -1:
                break
            yield decoder.decode(pending[start:idx + 1])
            start = idx + 1
        pending = pending[start:]
    tail = decoder.decode(pending, final=True)
    if tail:
        yield tail


def _has_bare_quote(text: str, delimiter: str, quotechar: str = '"') -> bool:
    """True when ``quotechar`` appears inside a field that was not quoted.

    Runs after strict ``csv`` parsing, so a closing quote is always
    followed by a delimiter, a line end or a doubled quote.
    """
    in_quotes = False
    just_closed = False
    field_start = True
    for ch in text:
        if in_quotes:
            if ch == quotechar:
                in_quotes = False
                just_closed = True
            continue
        if ch == quotechar:
            if just_closed or field_start:
                # "" inside a quoted field, or an opening quote
                in_quotes = True
                just_closed = False
                field_start = False
                continue
            return True
        just_closed = False
        field_start = ch in (delimiter, "\r", "\n")
    return False


class CsvDecoder(Decoder):
    """Tokenize CSV bytes into ``(index, fields)`` pairs.

    Blank lines are not records and do not advance the index. Quoting
    errors, bare quotes in unquoted fields and undecodable bytes raise
    ``MalformedRow`` for the row being read.
    """

    def __init__(self, *, delimiter: str = ",", encoding: str = "utf-8"):
        self.delimiter = delimiter
        self.encoding = encoding

    def decode(self, chunks: Iterable[bytes]) -> Iterator[tuple[int, list[str]]]:
        raw: list[str] = []

        def _tracked(lines: Iterable[str]) -> Iterator[str]:
            for line in lines:
                raw.append(line)
                yield line

        # csv pulls exactly the lines of one record per next()
        reader = csv.reader(
            _tracked(_iter_text_lines(chunks, self.encoding)),
            delimiter=self.delimiter,
            strict=True,
        )
        index = 0
        while True:
            try:
                fields = next(reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as exc:
                raise MalformedRow(index, exc) from exc
            text = "".join(raw)
            raw.clear()
            if not fields:
                continue
            if _has_bare_quote(text, self.delimiter):
                raise MalformedRow(index, 'bare " in non-quoted field')
            yield index, fields
            index += 1
