"""
Visualization utilities for rendering separating lines.

This module provides:
    • draw_separation_lines(img, lines, transform, thickness)

It is used by:
    - visualization.save_outputs
"""

from typing import Sequence

import cv2

from config import COLOR_VERTICAL, COLOR_HORIZONTAL
from models.axis_line import AxisLine
from visualization.canvas import CanvasTransform


def draw_separation_lines(
    image,
    lines: Sequence[AxisLine],
    transform: CanvasTransform,
    thickness: int = 1
):
    """
    Draws axis-parallel lines across the whole canvas:

        v → blue, from top to bottom edge
        h → red,  from left to right edge

    Args:
        image: BGR numpy array (modified in-place)
        lines: committed AxisLine objects
        transform: instance -> pixel mapping
        thickness: pixel width
    """
    last = transform.size - 1

    for ln in lines:
        if ln.is_vertical:
            px = transform.x_to_pixel(ln.coord)
            start, end, color = (px, 0), (px, last), COLOR_VERTICAL
        else:
            py = transform.y_to_pixel(ln.coord)
            start, end, color = (0, py), (last, py), COLOR_HORIZONTAL

        cv2.line(image, start, end, color, thickness)

    return image
