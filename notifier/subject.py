import numbers
from typing import List
from absl import logging as absl_logging

from notifier.observer import ISubject, IObserver


class ConcreteSubject(ISubject):
    """Observable holding one integer. set_state() stores, notify() broadcasts."""
    def __init__(self) -> None:
        self._state = 0
        self._observers: List[IObserver] = []
        self._closed = False
        print("ConcreteSubject created")

    def attach(self, observer: IObserver) -> None:
        if not isinstance(observer, IObserver):
            raise TypeError(f"expected an IObserver, got {type(observer).__name__}")
        # duplicates allowed: each reference gets its own update
        self._observers.append(observer)
        absl_logging.debug("[Subject] attached %r (%d total)", observer, len(self._observers))

    def detach(self, observer: IObserver) -> None:
        before = len(self._observers)
        self._observers = [obs for obs in self._observers if obs is not observer]
        absl_logging.debug("[Subject] detached %d reference(s) to %r", before - len(self._observers), observer)

    def notify(self) -> None:
        for obs in list(self._observers):
            obs.update(self)

    def set_state(self, state: int) -> None:
        if not isinstance(state, numbers.Integral):
            raise TypeError(f"state must be an integer, got {type(state).__name__}")
        self._state = int(state)

    def get_state(self) -> int:
        return self._state

    @property
    def observers(self) -> List[IObserver]:
        return list(self._observers)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        print("ConcreteSubject destroyed")

    def __enter__(self) -> "ConcreteSubject":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
