# drawing/adapter.py
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional
from absl import logging as absl_logging
from drawing.advanced import IAdvancedShapeDrawer, AdvancedShapeDrawer

KNOWN_KINDS = ("circle", "square")


class UnsupportedShapeError(ValueError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"unsupported shape kind: {kind!r}")
        self.kind = kind


class IShapeDrawer(ABC):
    """Narrow drawing interface callers depend on."""
    @abstractmethod
    def draw(self, kind: str) -> None:
        ...


class ShapeDrawerAdapter(IShapeDrawer):
    """
    Adapts IShapeDrawer.draw(kind) onto an IAdvancedShapeDrawer.
    Kind names are matched case-insensitively; anything outside
    KNOWN_KINDS raises UnsupportedShapeError.
    """
    def __init__(self, kind_hint: str, drawer: Optional[IAdvancedShapeDrawer] = None) -> None:
        _normalize(kind_hint)
        self.drawer = drawer or AdvancedShapeDrawer()
        self._dispatch: Dict[str, Callable[[], None]] = {
            "circle": self.drawer.draw_circle,
            "square": self.drawer.draw_square,
        }

    def draw(self, kind: str) -> None:
        key = _normalize(kind)
        absl_logging.debug("Adapter dispatching %r to %s", kind, type(self.drawer).__name__)
        self._dispatch[key]()


def _normalize(kind: str) -> str:
    key = kind.lower() if isinstance(kind, str) else None
    if key not in KNOWN_KINDS:
        absl_logging.warning("Adapter rejected shape kind %r", kind)
        raise UnsupportedShapeError(kind)
    return key
