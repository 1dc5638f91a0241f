# zoo/visitor.py
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zoo.animals import Lion, Tiger


class AnimalVisitor(ABC):
    """
    One handler per animal kind. A new kind means a new abstract handler here
    and an implementation in every visitor.
    """
    @abstractmethod
    def visit_lion(self, lion: "Lion") -> None: ...
    @abstractmethod
    def visit_tiger(self, tiger: "Tiger") -> None: ...


class FeedingVisitor(AnimalVisitor):
    def __init__(self) -> None:
        self._closed = False
        print("FeedingVisitor created")

    def visit_lion(self, lion: "Lion") -> None:
        print(f"Feeding to Lion: {lion.name}")

    def visit_tiger(self, tiger: "Tiger") -> None:
        print(f"Feeding to Tiger: {tiger.name}")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        print("FeedingVisitor destroyed")

    def __enter__(self) -> "FeedingVisitor":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
