# notifier/console.py
import weakref
from typing import Optional
from notifier.observer import IObserver, ISubject

class ConsoleObserver(IObserver):
    """Prints the subject's state on every change. Attaches itself on construction."""
    def __init__(self, subject: ISubject, name: Optional[str] = None) -> None:
        # proxy: the observer never keeps its subject alive
        self.subject = weakref.proxy(subject)
        self.name = name
        subject.attach(self)

    def update(self) -> None:
        prefix = f"[{self.name}] " if self.name else ""
        print(f"{prefix}Observer notified with state: {self.subject.state}")
