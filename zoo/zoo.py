# zoo/zoo.py
from typing import List
from absl import logging as absl_logging

from zoo.animals import Animal
from zoo.visitor import AnimalVisitor


class Zoo:
    """Object structure: owns its animals and walks them with a visitor."""
    def __init__(self) -> None:
        self._animals: List[Animal] = []
        self._closed = False
        print("Zoo created")

    def add_animal(self, animal: Animal) -> None:
        if not isinstance(animal, Animal):
            raise TypeError(f"expected an Animal, got {type(animal).__name__}")
        animal.owner = self
        self._animals.append(animal)
        absl_logging.debug("[Zoo] took ownership of %r", animal)

    @property
    def animals(self) -> List[Animal]:
        return list(self._animals)

    def __len__(self) -> int:
        return len(self._animals)

    def accept(self, visitor: AnimalVisitor) -> None:
        print("---START---")
        for animal in self._animals:
            animal.accept(visitor)
        print("----END----")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        print("Zoo destroyed")
        # owned animals go with the zoo, in insertion order
        for animal in self._animals:
            animal.release()
        self._animals.clear()

    def __enter__(self) -> "Zoo":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
