# observer_app.py
from absl import logging as absl_logging

from notifier.subject import ConcreteSubject
from notifier.view import ConcreteObserver

STATES = (1, 2)


def main():
    absl_logging.set_verbosity(absl_logging.ERROR)

    with ConcreteSubject() as subject, ConcreteObserver() as observer:
        subject.attach(observer)
        for state in STATES:
            subject.set_state(state)
            subject.notify()
        subject.detach(observer)

if __name__ == "__main__":
    main()
