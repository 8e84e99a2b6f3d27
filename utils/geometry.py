"""
This module provides:
    - side_of
    - separates
    - is_separated
    - unseparated_pairs
    - all_pairs_separated
"""

from typing import Iterable, List, Sequence, Tuple

from models.axis_line import AxisLine
from models.point import Point


# ----------------------------------------------------------------------
#  SIDE TEST
# ----------------------------------------------------------------------

def side_of(line: AxisLine, point: Point) -> int:
    """
    0 if the point is left of / below the line, 1 if right of / above.

    A point lying exactly on the line counts as left/below, matching the
    boundary rule of the scorer.
    """
    return 0 if point.coord(line.axis) <= line.coord else 1


def separates(line: AxisLine, p: Point, q: Point) -> bool:
    return side_of(line, p) != side_of(line, q)


def is_separated(lines: Iterable[AxisLine], p: Point, q: Point) -> bool:
    """True if at least one line puts p and q on opposite sides."""
    return any(separates(ln, p, q) for ln in lines)


# ----------------------------------------------------------------------
#  FULL SEPARATION CHECK
# ----------------------------------------------------------------------

def unseparated_pairs(lines: Sequence[AxisLine], points: Sequence[Point]) -> List[Tuple[Point, Point]]:
    """
    Every pair of points (by id order) that no line separates.
    """
    points = list(points)
    pairs = []

    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            if not is_separated(lines, points[i], points[j]):
                pairs.append((points[i], points[j]))

    return pairs


def all_pairs_separated(lines: Sequence[AxisLine], points: Sequence[Point]) -> bool:
    return not unseparated_pairs(lines, points)
