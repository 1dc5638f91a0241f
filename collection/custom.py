# collection/custom.py
from typing import Any
import numpy as np
from absl import logging as absl_logging

from collection.base import IAggregate, IIterator


class CustomCollection(IAggregate):
    """
    Growable sequence of a single element type.
      - elements live in a numpy buffer of a fixed dtype (numeric dtypes copy by value)
      - capacity doubles when full, so append is amortized O(1)
      - get() is bounds-checked; negative indices do not wrap around
    """
    def __init__(self, dtype=object, capacity: int = 4) -> None:
        self._items = np.empty(max(1, capacity), dtype=dtype)
        self._size = 0
        self._modcount = 0
        self._closed = False
        print("CustomCollection created")

    @property
    def dtype(self) -> np.dtype:
        return self._items.dtype

    def _grow(self) -> None:
        bigger = np.empty(self._items.shape[0] * 2, dtype=self._items.dtype)
        bigger[: self._size] = self._items[: self._size]
        absl_logging.debug("[Collection] grew %d -> %d", self._items.shape[0], bigger.shape[0])
        self._items = bigger

    def append(self, item: Any) -> None:
        if self._items.dtype != object:
            stored = np.asarray(item).astype(self._items.dtype)
            if stored.ndim != 0 or not np.array_equal(stored, item, equal_nan=stored.dtype.kind in "fc"):
                raise TypeError(f"{item!r} does not fit dtype {self._items.dtype} without loss")
        if self._size == self._items.shape[0]:
            self._grow()
        self._items[self._size] = item
        self._size += 1
        self._modcount += 1

    add = append

    @property
    def modcount(self) -> int:
        """Number of structural modifications so far."""
        return self._modcount

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def get(self, index: int) -> Any:
        if 0 <= index < self._size:
            value = self._items[index]
            # object storage hands back exactly what was appended
            return value if self._items.dtype == object else value.item()
        raise IndexError("Index out of range")

    def create_iterator(self) -> "ForwardIterator":
        return ForwardIterator(self)

    def __iter__(self) -> "ForwardIterator":
        return self.create_iterator()

    # ---- lifecycle ----
    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        print("CustomCollection destroyed")

    def __enter__(self) -> "CustomCollection":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ForwardIterator(IIterator):
    """Forward-only cursor; holds a reference to the collection, never owns it."""
    def __init__(self, collection: CustomCollection) -> None:
        self._collection = collection
        self._index = 0
        self._expected_modcount = collection.modcount

    def has_next(self) -> bool:
        return self._index < self._collection.size()

    def next(self) -> Any:
        if self._collection.modcount != self._expected_modcount:
            raise RuntimeError("collection changed during iteration")
        if not self.has_next():
            raise IndexError("No more elements")
        value = self._collection.get(self._index)
        self._index += 1
        return value
