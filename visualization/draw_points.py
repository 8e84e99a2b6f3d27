"""
Visualization utilities for rendering the input points.

This module provides:
    • draw_points(img, points, transform, color, radius)
"""

from typing import Sequence, Tuple

import cv2

from models.point import Point
from visualization.canvas import CanvasTransform


def draw_points(
    image,
    points: Sequence[Point],
    transform: CanvasTransform,
    color: Tuple[int, int, int] = (0, 0, 0),
    radius: int = 4,
    label: bool = True
):
    """
    Draws every point as a filled circle, optionally tagged with its id.

    Args:
        image: BGR numpy array (modified in-place)
        points: Point objects in instance coordinates
        transform: instance -> pixel mapping
        color: (B, G, R)
        radius: circle radius in pixels
        label: write the point id next to the circle
    """
    for p in points:
        center = transform.to_pixel(p.x, p.y)
        cv2.circle(image, center, radius, color, thickness=-1)

        if label:
            cv2.putText(
                image,
                str(p.id),
                (center[0] + radius + 1, center[1] - radius - 1),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.35,
                color,
                1
            )

    return image
