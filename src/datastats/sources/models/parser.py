from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class DataParser(ABC, Generic[T]):
    """Turn one tokenized row into a typed object or raise a RowError."""

    @abstractmethod
    def parse(self, index: int, fields: Sequence[str]) -> T:
        pass
