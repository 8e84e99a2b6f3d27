from typing import List

from models.axis_line import Axis, AxisLine
from models.point_set import PointSet


def generate_candidates(point_set: PointSet) -> List[AxisLine]:
    """
    Places one live candidate midway between every two adjacent points of
    each ordering.

    Order (also the tie-break order of the greedy selector):
        all vertical candidates, ascending x adjacency, then
        all horizontal candidates, ascending y adjacency.

    Parameters
    ----------
    point_set : PointSet
        Points of the current instance.

    Returns
    -------
    list[AxisLine]
        2 * (N - 1) candidates, none for N <= 1. Adjacent points sharing a
        coordinate produce a line through both of them; it is kept as is.
    """
    candidates: List[AxisLine] = []

    for axis in (Axis.V, Axis.H):
        ordered = point_set.ordered(axis)
        for a, b in zip(ordered, ordered[1:]):
            coord = (float(a.coord(axis)) + float(b.coord(axis))) / 2
            candidates.append(AxisLine(axis, coord, index=len(candidates)))

    return candidates
