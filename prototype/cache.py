# prototype/cache.py
import threading
from typing import Callable, Dict, List, Tuple
from absl import logging as absl_logging
from prototype.shape import Shape

# (id, factory) pairs loaded by ShapeCache.load()
DEFAULT_PROTOTYPES: Tuple[Tuple[str, Callable[[str], Shape]], ...] = (
    ("1", Shape.circle),
    ("2", Shape.square),
)


class ShapeNotFoundError(KeyError):
    def __init__(self, shape_id: str) -> None:
        super().__init__(shape_id)
        self.shape_id = shape_id

    def __str__(self) -> str:
        return f"no prototype registered under id {self.shape_id!r}"


class ShapeCache:
    """
    Owns one prototype per id and hands out independent copies:
      - load() seeds the fixed prototypes, at most once per id
      - get_shape() never returns the stored instance
    """
    def __init__(self) -> None:
        self._prototypes: Dict[str, Shape] = {}
        self._lock = threading.Lock()

    def load(self) -> None:
        with self._lock:
            for shape_id, factory in DEFAULT_PROTOTYPES:
                if shape_id in self._prototypes:
                    continue
                self._prototypes[shape_id] = factory(shape_id)
                absl_logging.debug("Loaded prototype %s (%s)", shape_id, self._prototypes[shape_id].kind.value)

    def register(self, shape: Shape) -> None:
        # Stored as a copy so the caller holds no handle on the prototype.
        proto = shape.duplicate()
        with self._lock:
            if proto.id in self._prototypes:
                raise ValueError(f"prototype id {proto.id!r} is already registered")
            self._prototypes[proto.id] = proto
        absl_logging.debug("Registered prototype %s (%s)", proto.id, proto.kind.value)

    def get_shape(self, shape_id: str) -> Shape:
        with self._lock:
            proto = self._prototypes.get(shape_id)
            if proto is None:
                absl_logging.warning("Shape cache miss for id %s", shape_id)
                raise ShapeNotFoundError(shape_id)
            return proto.duplicate()

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._prototypes)

    def __contains__(self, shape_id: object) -> bool:
        with self._lock:
            return shape_id in self._prototypes

    def __len__(self) -> int:
        with self._lock:
            return len(self._prototypes)
