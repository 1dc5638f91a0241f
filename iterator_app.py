# iterator_app.py
import numpy as np
from absl import logging as absl_logging

from collection.custom import CustomCollection, ForwardIterator

ITEMS = (1, 2, 3, 4, 5)
DTYPE = np.int64


def main():
    absl_logging.set_verbosity(absl_logging.ERROR)

    with CustomCollection(dtype=DTYPE) as collection:
        for item in ITEMS:
            collection.add(item)

        print("Factory Pattern Example:")
        iterator = collection.create_iterator()
        values = []
        while iterator.has_next():
            values.append(str(iterator.next()))
        print(" ".join(values))

        print("Outer class use inner class:")
        forward_iterator = ForwardIterator(collection)
        values = []
        while forward_iterator.has_next():
            values.append(str(forward_iterator.next()))
        print(" ".join(values))

if __name__ == "__main__":
    main()
