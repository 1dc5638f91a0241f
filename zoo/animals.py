from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from zoo.visitor import AnimalVisitor
    from zoo.zoo import Zoo


class Animal(ABC):
    kind = "Animal"

    def __init__(self, name: str) -> None:
        self._name = name
        self._released = False
        self._owner = None
        print(f"{self.kind} {name} created")

    @property
    def name(self) -> str:
        return self._name

    @property
    def owner(self) -> Optional["Zoo"]:
        return self._owner

    @owner.setter
    def owner(self, zoo: "Zoo") -> None:
        if self._owner is not None:
            raise ValueError(f"{self!r} already belongs to a zoo")
        self._owner = zoo

    @abstractmethod
    def accept(self, visitor: "AnimalVisitor") -> None:
        """Call the one handler on `visitor` that matches this concrete kind."""

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        print(f"{self.kind} {self._name} destroyed")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class Lion(Animal):
    kind = "Lion"

    def accept(self, visitor: "AnimalVisitor") -> None:
        visitor.visit_lion(self)


class Tiger(Animal):
    kind = "Tiger"

    def accept(self, visitor: "AnimalVisitor") -> None:
        visitor.visit_tiger(self)
