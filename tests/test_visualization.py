import cv2
import numpy as np

from config import COLOR_HORIZONTAL, COLOR_POINT, COLOR_VERTICAL
from models.axis_line import Axis, AxisLine
from models.point_set import PointSet
from visualization.canvas import CanvasTransform, new_canvas
from visualization.save_outputs import render_solution, save_all_outputs


RENDER_PARAMS = {
    "RENDER_SIZE": 101,
    "RENDER_MARGIN": 0,
    "POINT_RADIUS": 3,
    "LINE_THICKNESS": 1,
    "SAVE_IMAGES": True,
}


def test_transform_flips_y_and_keeps_aspect():
    ps = PointSet.from_coordinates([(0, 0), (10, 10)])
    t = CanvasTransform(ps.points, size=101, margin=0)

    assert t.to_pixel(0, 0) == (0, 100)
    assert t.to_pixel(10, 10) == (100, 0)
    assert t.x_to_pixel(5.0) == 50
    assert t.y_to_pixel(2.5) == 75


def test_transform_of_degenerate_sets():
    t = CanvasTransform([], size=50, margin=5)
    assert t.scale == 39

    single = PointSet.from_coordinates([(7, 7)])
    assert CanvasTransform(single.points, size=50, margin=5).to_pixel(7, 7) == (5, 44)


def test_new_canvas_is_filled():
    canvas = new_canvas(8, (255, 255, 255))
    assert canvas.shape == (8, 8, 3)
    assert canvas.dtype == np.uint8
    assert (canvas == 255).all()


def test_render_solution_draws_points_and_lines():
    ps = PointSet.from_coordinates([(0, 0), (10, 10)])
    lines = [AxisLine(Axis.V, 5.0), AxisLine(Axis.H, 2.5)]

    image = render_solution(ps, lines, RENDER_PARAMS)

    assert image.shape == (101, 101, 3)
    assert tuple(image[10, 50]) == COLOR_VERTICAL
    assert tuple(image[75, 30]) == COLOR_HORIZONTAL
    assert tuple(image[100, 0]) == COLOR_POINT


def test_save_all_outputs_writes_text_and_image(tmp_path):
    ps = PointSet.from_coordinates([(0, 0), (10, 10)])
    out_dir = str(tmp_path / "out")
    params = dict(RENDER_PARAMS, SOLUTION_FILE_PATTERN="greedy_solution{index:02d}")

    written = save_all_outputs(out_dir, 3, ps, [AxisLine(Axis.V, 5.0)], params)

    assert (tmp_path / "out" / "greedy_solution03.txt").read_text() == "1\nv 5.0\n"
    image = cv2.imread(written["image"])
    assert image is not None
    assert image.shape == (101, 101, 3)


def test_save_all_outputs_without_images(tmp_path):
    ps = PointSet.from_coordinates([(0, 0), (10, 10)])
    params = dict(RENDER_PARAMS, SAVE_IMAGES=False, SOLUTION_FILE_PATTERN="sol{index:02d}")

    written = save_all_outputs(str(tmp_path), 1, ps, [], params)

    assert set(written) == {"solution"}
    assert not list(tmp_path.glob("*.png"))
