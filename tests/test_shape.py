import numpy as np
import pytest

from prototype.shape import Shape, ShapeKind, CloneFailureError


def test_shape_kind_parse_is_case_insensitive():
    assert ShapeKind.parse("Circle") is ShapeKind.CIRCLE
    assert ShapeKind.parse("SQUARE") is ShapeKind.SQUARE
    assert ShapeKind.CIRCLE.label == "Circle"

    with pytest.raises(ValueError):
        ShapeKind.parse("triangle")


def test_factories_build_outlines():
    circle = Shape.circle("c", radius=2.0, segments=8)
    square = Shape.square("s", side=2.0)

    assert circle.kind is ShapeKind.CIRCLE
    assert circle.vertices.shape == (8, 2)
    assert np.allclose(np.hypot(circle.vertices[:, 0], circle.vertices[:, 1]), 2.0)

    assert square.kind is ShapeKind.SQUARE
    assert square.vertices.dtype == np.float32
    assert np.array_equal(np.abs(square.vertices), np.ones((4, 2), dtype=np.float32))


def test_duplicate_copies_values_into_new_storage():
    # Arrange
    original = Shape.square("2")

    # Act
    copy = original.duplicate()

    # Assert
    assert copy == original
    assert copy is not original
    assert not np.shares_memory(copy.vertices, original.vertices)

    copy.vertices[0] = [9.0, 9.0]
    copy.id = "changed"
    assert original.id == "2"
    assert original.vertices[0].tolist() == [-0.5, -0.5]
    assert copy != original


def test_duplicate_rejects_shared_storage(monkeypatch):
    shape = Shape.circle("1")
    monkeypatch.setattr(np, "copy", lambda a, *args, **kwargs: a)

    with pytest.raises(CloneFailureError):
        shape.duplicate()


def test_duplicate_wraps_copy_failure(monkeypatch):
    shape = Shape.circle("1")

    def fail(*args, **kwargs):
        raise MemoryError("out of memory")

    monkeypatch.setattr(np, "copy", fail)

    with pytest.raises(CloneFailureError) as excinfo:
        shape.duplicate()
    assert isinstance(excinfo.value.__cause__, MemoryError)


def test_draw_prints_kind_line(capsys):
    Shape.circle("1").draw()
    Shape.square("2").draw()

    out = capsys.readouterr().out.splitlines()
    assert out == ["Drawing a Circle", "Drawing a Square"]


def test_constructor_accepts_kind_text():
    shape = Shape("7", "Circle", np.zeros((3, 2)))

    assert shape.kind is ShapeKind.CIRCLE

    with pytest.raises(ValueError):
        Shape("8", "triangle", np.zeros((3, 2)))
