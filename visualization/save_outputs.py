"""
Centralized output-saving utilities for the separation batch.

This module provides:
    • render_solution(...)
    • save_solution_image(...)
    • save_all_outputs(...)

Uses the draw modules for the rendering and utils.instance_io /
utils.image_io for filesystem handling.
"""

from typing import Dict, List, Sequence

import numpy as np

from config import COLOR_BACKGROUND, COLOR_POINT, RENDER, get_active_params
from models.axis_line import AxisLine
from models.point_set import PointSet
from utils.image_io import save_image, ensure_output_dir
from utils.instance_io import solution_path, write_solution
from visualization.canvas import CanvasTransform, new_canvas
from visualization.draw_lines import draw_separation_lines
from visualization.draw_points import draw_points


# -------------------------------------------------------------------------
#   Rendering
# -------------------------------------------------------------------------

def render_solution(point_set: PointSet, lines: Sequence[AxisLine], params=None) -> np.ndarray:
    """
    Draws the points and the committed lines of one instance onto a fresh
    canvas. Lines go first so points stay visible on top of them.
    """
    params = params or get_active_params()
    size = params.get("RENDER_SIZE", RENDER["RENDER_SIZE"])
    margin = params.get("RENDER_MARGIN", RENDER["RENDER_MARGIN"])

    image = new_canvas(size, COLOR_BACKGROUND)
    transform = CanvasTransform(point_set.points, size, margin)

    draw_separation_lines(
        image, lines, transform,
        thickness=params.get("LINE_THICKNESS", RENDER["LINE_THICKNESS"])
    )
    draw_points(
        image, point_set.points, transform,
        color=COLOR_POINT,
        radius=params.get("POINT_RADIUS", RENDER["POINT_RADIUS"])
    )
    return image


def save_solution_image(path: str, point_set: PointSet, lines: Sequence[AxisLine], params=None):
    """
    Renders one instance and saves it to disk.
    """
    save_image(path, render_solution(point_set, lines, params))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    index: int,
    point_set: PointSet,
    lines: List[AxisLine],
    params=None
) -> Dict[str, str]:
    """
    Saves every output artifact for one processed instance.

    Example output:
        greedy_solution07.txt
        greedy_solution07.png   (only when SAVE_IMAGES is on)

    Returns the written paths keyed by kind ("solution", "image").
    """
    params = dict(params or get_active_params())
    params["OUTPUT_FOLDER"] = output_dir

    ensure_output_dir(output_dir)

    written = {"solution": write_solution(index, lines, params)}

    if params.get("SAVE_IMAGES"):
        image_path = solution_path(index, params, ext=".png")
        save_solution_image(image_path, point_set, lines, params)
        written["image"] = image_path

    return written
