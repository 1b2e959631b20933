from __future__ import annotations


class DataStatsError(ValueError):
    """Base class for every failure surfaced by an analysis run."""


class ResourceOpenError(DataStatsError):
    """Raised when the input path cannot be opened for reading."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to open file: {cause}")


class RowError(DataStatsError):
    """A row failed validation; ``index`` counts the header as row 0."""

    def __init__(self, index: int, message: str) -> None:
        self.index = index
        super().__init__(message)


class MalformedRow(RowError):
    """Raised when a row cannot be tokenized as CSV."""

    def __init__(self, index: int, cause: object) -> None:
        self.cause = cause
        super().__init__(
            index, f"failed to get the record at position {index}: {cause}")


class WrongFieldCount(RowError):
    """Raised when a row does not hold exactly the expected number of fields."""

    def __init__(self, index: int, count: int, expected: int = 4) -> None:
        self.count = count
        self.expected = expected
        super().__init__(
            index,
            f"unexpected record length at position {index}: "
            f"expected {expected} fields, got {count}",
        )


class InvalidTimestamp(RowError):
    """Raised when the time field is not an RFC 3339 timestamp."""

    def __init__(self, index: int, text: str) -> None:
        self.text = text
        super().__init__(
            index, f"failed to parse time for record at position {index}: {text!r}")


class InvalidNumber(RowError):
    """Raised when the value field is not a finite base-10 number."""

    def __init__(self, index: int, text: str) -> None:
        self.text = text
        super().__init__(
            index, f"failed to parse value for record at position {index}: {text!r}")


class MissingArgument(DataStatsError):
    """Raised when no input path was supplied on the command line."""

    def __init__(self, message: str = "missing file argument") -> None:
        super().__init__(message)
