"""
Visualization Tools

Provides drawing utilities for:
- Input points
- Committed separating lines
- Saving the per-instance solution artifacts
"""

from .canvas import CanvasTransform, new_canvas
from .draw_points import draw_points
from .draw_lines import draw_separation_lines
from .save_outputs import (
    render_solution,
    save_solution_image,
    save_all_outputs,
)

__all__ = [
    "CanvasTransform",
    "new_canvas",
    "draw_points",
    "draw_separation_lines",
    "render_solution",
    "save_solution_image",
    "save_all_outputs",
]
