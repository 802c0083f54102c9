# notifier/observer.py
from abc import ABC, abstractmethod


class IObserver(ABC):
    @abstractmethod
    def update(self, subject: "ISubject") -> None:
        """Called when the subject has new state; re-read it from `subject`."""
        ...

    @property
    @abstractmethod
    def name(self) -> str: ...


class ISubject(ABC):
    @abstractmethod
    def attach(self, observer: IObserver) -> None: ...
    @abstractmethod
    def detach(self, observer: IObserver) -> None: ...
    @abstractmethod
    def notify(self) -> None: ...
    @abstractmethod
    def get_state(self) -> str: ...
