"""
Mapping from point coordinates to canvas pixels.

This module provides:
    • CanvasTransform(points, size, margin)
    • new_canvas(size, color)
"""

from typing import Sequence, Tuple

import numpy as np

from models.point import Point


class CanvasTransform:
    """
    Fits the bounding box of the points into a square canvas, keeping the
    aspect ratio. The y axis points up, as in the instance coordinates.
    """

    def __init__(self, points: Sequence[Point], size: int, margin: int):
        self.size = size
        self.margin = margin

        if points:
            xs = [p.x for p in points]
            ys = [p.y for p in points]
            self.min_x, self.min_y = min(xs), min(ys)
            span = max(max(xs) - self.min_x, max(ys) - self.min_y)
        else:
            self.min_x = self.min_y = 0
            span = 0

        # a single point (or a set on one coordinate) still needs a scale
        span = max(span, 1)
        self.scale = (size - 1 - 2 * margin) / span

    def x_to_pixel(self, x: float) -> int:
        return int(round(self.margin + (x - self.min_x) * self.scale))

    def y_to_pixel(self, y: float) -> int:
        return int(round(self.size - 1 - self.margin - (y - self.min_y) * self.scale))

    def to_pixel(self, x: float, y: float) -> Tuple[int, int]:
        return self.x_to_pixel(x), self.y_to_pixel(y)


def new_canvas(size: int, color=(255, 255, 255)) -> np.ndarray:
    """Blank BGR canvas filled with `color`."""
    canvas = np.zeros((size, size, 3), dtype=np.uint8)
    canvas[:] = color
    return canvas
