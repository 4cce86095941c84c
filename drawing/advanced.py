# drawing/advanced.py
from abc import ABC, abstractmethod

class IAdvancedShapeDrawer(ABC):
    """Rich drawing interface: one method per shape kind."""
    @abstractmethod
    def draw_circle(self) -> None: ...
    @abstractmethod
    def draw_square(self) -> None: ...

class AdvancedShapeDrawer(IAdvancedShapeDrawer):
    def draw_circle(self) -> None:
        print("Drawing an advanced Circle")

    def draw_square(self) -> None:
        print("Drawing an advanced Square")
