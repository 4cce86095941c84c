# prototype/shape.py
from enum import Enum
from typing import Dict
import numpy as np
from absl import logging as absl_logging


class CloneFailureError(RuntimeError):
    """Raised when a shape cannot be copied into independent storage."""


class ShapeKind(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"

    @property
    def label(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, text: str) -> "ShapeKind":
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown shape kind: {text!r}") from None


class Shape:
    """
    A cloneable shape: id, kind tag and an (n, 2) float32 outline.
    The outline is owned by the shape; duplicate() gives the copy its own.
    """
    def __init__(self, shape_id: str, kind: ShapeKind, vertices: np.ndarray) -> None:
        self.id = shape_id
        self._kind = kind if isinstance(kind, ShapeKind) else ShapeKind.parse(kind)
        self.vertices = np.asarray(vertices, dtype=np.float32).reshape(-1, 2)

    @classmethod
    def circle(cls, shape_id: str, radius: float = 1.0, segments: int = 32) -> "Shape":
        t = np.linspace(0.0, 2.0 * np.pi, segments, endpoint=False)
        pts = np.stack([radius * np.cos(t), radius * np.sin(t)], axis=1)
        return cls(shape_id, ShapeKind.CIRCLE, pts)

    @classmethod
    def square(cls, shape_id: str, side: float = 1.0) -> "Shape":
        h = side / 2.0
        pts = np.array([[-h, -h], [h, -h], [h, h], [-h, h]])
        return cls(shape_id, ShapeKind.SQUARE, pts)

    @property
    def kind(self) -> ShapeKind:
        return self._kind

    def duplicate(self) -> "Shape":
        try:
            vertices = np.copy(self.vertices)
        except MemoryError as e:
            absl_logging.error("Could not copy outline of shape %s: %s", self.id, e)
            raise CloneFailureError(f"could not duplicate shape {self.id!r}") from e

        if np.shares_memory(vertices, self.vertices):
            raise CloneFailureError(f"copy of shape {self.id!r} shares storage with its source")
        return Shape(self.id, self._kind, vertices)

    def describe(self) -> str:
        return _DRAW_LINES[self._kind]

    def draw(self) -> None:
        print(self.describe())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return (self.id == other.id
                and self._kind is other._kind
                and np.array_equal(self.vertices, other.vertices))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Shape(id={self.id!r}, kind={self._kind.value!r}, vertices={len(self.vertices)})"


_DRAW_LINES: Dict[ShapeKind, str] = {
    ShapeKind.CIRCLE: "Drawing a Circle",
    ShapeKind.SQUARE: "Drawing a Square",
}
