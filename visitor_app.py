# visitor_app.py
from absl import logging as absl_logging

from zoo.animals import Lion, Tiger
from zoo.visitor import FeedingVisitor
from zoo.zoo import Zoo

# (kind, name) in the order they join the zoo
ANIMALS = [
    (Lion, "Simba"),
    (Lion, "Mufasa"),
    (Tiger, "Shere Khan"),
    (Tiger, "Sher Khan"),
]


def main():
    absl_logging.set_verbosity(absl_logging.ERROR)

    with Zoo() as zoo:
        for kind, name in ANIMALS:
            zoo.add_animal(kind(name))

        with FeedingVisitor() as feeding_visitor:
            zoo.accept(feeding_visitor)

if __name__ == "__main__":
    main()
