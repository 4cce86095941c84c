# notifier/observer.py
from abc import ABC, abstractmethod
from typing import Optional

class IObserver(ABC):
    @abstractmethod
    def update(self) -> None:
        """Called after the subject's state changed; read it from the subject."""
        ...

class ISubject(ABC):
    # No detach: an attached observer stays for the subject's lifetime.
    @abstractmethod
    def attach(self, observer: IObserver) -> None: ...
    @abstractmethod
    def notify(self) -> None: ...
    @property
    @abstractmethod
    def state(self) -> Optional[str]: ...
