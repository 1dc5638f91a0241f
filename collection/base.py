from abc import ABC, abstractmethod
from typing import Any


class IIterator(ABC):
    @abstractmethod
    def has_next(self) -> bool: ...

    @abstractmethod
    def next(self) -> Any:
        """Return the current element and advance to the next one."""

    # Native protocol so a cursor also works in a for-loop.
    def __iter__(self) -> "IIterator":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


class IAggregate(ABC):
    @abstractmethod
    def create_iterator(self) -> IIterator: ...
    @abstractmethod
    def size(self) -> int: ...
    @abstractmethod
    def get(self, index: int) -> Any: ...
