# notifier/subject.py
import threading
from typing import List, Optional
from absl import logging as absl_logging
from notifier.observer import ISubject, IObserver


class ReentrantNotificationError(RuntimeError):
    """An observer tried to change or re-notify its subject from update()."""


class Subject(ISubject):
    """Holds one string state; pushes every change to observers in attach order."""
    def __init__(self, state: Optional[str] = None) -> None:
        self._state = state
        self._observers: List[IObserver] = []
        self._lock = threading.RLock()
        self._notifying = False

    @property
    def state(self) -> Optional[str]:
        return self._state

    def get_state(self) -> Optional[str]:
        return self._state

    def attach(self, observer: IObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def set_state(self, state: str) -> None:
        with self._lock:
            self._guard("set_state")
            self._state = state
            self.notify()

    def notify(self) -> None:
        with self._lock:
            self._guard("notify")
            self._notifying = True
            try:
                for obs in list(self._observers):
                    try:
                        obs.update()
                    except Exception as e:
                        absl_logging.error("[Subject] Observer %s failed: %s", type(obs).__name__, e)
                        raise
            finally:
                self._notifying = False

    def _guard(self, op: str) -> None:
        # RLock lets the notifying thread back in; the flag catches it.
        if self._notifying:
            raise ReentrantNotificationError(f"{op}() called from inside an observer update")
