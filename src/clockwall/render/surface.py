"""Drawing surface abstraction."""

from abc import ABC, abstractmethod

from clockwall.geometry import Vector2


class Surface(ABC):
    """Abstract base class for 2D drawing backends.

    Stroke and fill are state, as on a canvas: they apply to every shape drawn
    after they are set.
    """

    @abstractmethod
    def clear(self, color: str) -> None:
        """Fill the whole surface with ``color``."""
        pass

    @abstractmethod
    def stroke(self, color: str, weight: float) -> None:
        """Set outline colour and width."""
        pass

    @abstractmethod
    def no_stroke(self) -> None:
        pass

    @abstractmethod
    def fill(self, color: str) -> None:
        pass

    @abstractmethod
    def no_fill(self) -> None:
        pass

    @abstractmethod
    def circle(self, center: Vector2, diameter: float) -> None:
        pass

    @abstractmethod
    def line(self, start: Vector2, end: Vector2) -> None:
        pass

    @abstractmethod
    def rect(self, x: float, y: float, width: float, height: float) -> None:
        pass
