# notifier/view.py
from typing import Optional
from notifier.observer import IObserver, ISubject


class ConcreteObserver(IObserver):
    """Observer that mirrors the subject's state and prints each update."""
    def __init__(self, name: str = "ConcreteObserver") -> None:
        self.name = name
        self.state: Optional[int] = None
        self.update_count = 0
        self._closed = False
        print(f"{self.name} created")

    def update(self, subject: ISubject) -> None:
        self.state = subject.get_state()
        self.update_count += 1
        print(f"{self.name} updated: {self.state}")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        print(f"{self.name} destroyed")

    def __enter__(self) -> "ConcreteObserver":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
