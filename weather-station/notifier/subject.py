# notifier/subject.py
from typing import List, Tuple

from absl import logging as absl_logging

from notifier.observer import ISubject, IObserver


class Subject(ISubject):
    """Broadcast registry: keeps observers in attach order and fans out to them."""
    def __init__(self) -> None:
        self._observers: List[IObserver] = []

    @property
    def observers(self) -> Tuple[IObserver, ...]:
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def attach(self, observer: IObserver) -> None:
        # duplicates allowed; each copy is notified
        self._observers.append(observer)
        absl_logging.info("Observer %s attached.", observer.name)

    def detach(self, observer: IObserver) -> None:
        for i, obs in enumerate(self._observers):
            if obs is observer:
                del self._observers[i]
                absl_logging.info("Observer %s detached.", observer.name)
                return

    def notify(self) -> None:
        absl_logging.info("Notifying %d observer(s)...", len(self._observers))
        for obs in list(self._observers):
            obs.update(self)
