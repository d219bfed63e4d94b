"""
Canvas protocol - defines the drawing primitives entities paint with
"""

from typing import Protocol

RGB = tuple[int, int, int]


class CanvasProtocol(Protocol):
    """
    Immediate-mode 2D drawing surface of a fixed size.

    Entities receive the canvas as an argument when drawing instead of reaching
    for a global surface, so any backend (pygame window, off-screen surface,
    test double) can be painted on.
    """

    width: int
    height: int

    def clear(self) -> None:
        """Erase the whole surface"""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGB) -> None:
        """
        Paint a filled axis-aligned rectangle.

        Args:
            x: Left edge in pixels
            y: Top edge in pixels
            width: Rectangle width in pixels
            height: Rectangle height in pixels
            color: RGB fill color
        """
        ...

    def fill_circle(self, x: float, y: float, radius: float, color: RGB) -> None:
        """
        Paint a filled circle.

        Args:
            x: Center X in pixels
            y: Center Y in pixels
            radius: Radius in pixels
            color: RGB fill color
        """
        ...

    def stroke_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: RGB,
        width: int = 1,
    ) -> None:
        """
        Paint a straight line segment.

        Args:
            start: (x, y) of the first end point
            end: (x, y) of the second end point
            color: RGB stroke color
            width: Line width in pixels
        """
        ...
