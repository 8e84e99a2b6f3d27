import pytest

from models.axis_line import Axis
from models.point_set import PointSet
from separators.candidate_generator import generate_candidates


@pytest.mark.parametrize("coords", [[], [(4, 4)]])
def test_no_candidates_below_two_points(coords):
    assert generate_candidates(PointSet.from_coordinates(coords)) == []


def test_two_points_give_one_line_per_axis():
    lines = generate_candidates(PointSet.from_coordinates([(0, 0), (10, 10)]))

    assert [(ln.marker, ln.coord) for ln in lines] == [("v", 5.0), ("h", 5.0)]
    assert [ln.index for ln in lines] == [0, 1]
    assert all(ln.live for ln in lines)


def test_vertical_candidates_come_first_in_adjacency_order():
    ps = PointSet.from_coordinates([(0, 3), (2, 1), (6, 7), (9, 5)])
    lines = generate_candidates(ps)

    assert len(lines) == 2 * (len(ps) - 1)
    assert [ln.axis for ln in lines] == [Axis.V] * 3 + [Axis.H] * 3
    assert [ln.coord for ln in lines] == [1.0, 4.0, 7.5, 2.0, 4.0, 6.0]
    assert [ln.index for ln in lines] == list(range(6))


def test_shared_coordinate_gives_coincident_line():
    lines = generate_candidates(PointSet.from_coordinates([(1, 0), (1, 4)]))
    assert [(ln.marker, ln.coord) for ln in lines] == [("v", 1.0), ("h", 2.0)]


def test_generation_is_repeatable():
    ps = PointSet.from_coordinates([(-3, 8), (0, -2), (4, 11), (7, 0), (12, 5)])
    first = [(ln.axis, ln.coord) for ln in generate_candidates(ps)]
    second = [(ln.axis, ln.coord) for ln in generate_candidates(ps)]
    assert first == second
