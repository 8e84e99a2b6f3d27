"""
Scoring of candidate lines against the pairwise relation.

This module provides:
    • closest_point(line, point_set)
    • split_ids(line, point_set)
    • links_to_break(line, point_set, relation)
"""

from typing import Optional, Tuple

import numpy as np

from models.axis_line import AxisLine
from models.point_set import PointSet
from models.relation import PairwiseRelation


NO_SPLIT = -1


# ----------------------------------------------------------------------
#  BOUNDARY SEARCH
# ----------------------------------------------------------------------

def closest_point(line: AxisLine, point_set: PointSet) -> int:
    """
    Index (in the ordering matching the line's axis) of the last point at or
    to the left of / below the line.

    A point whose coordinate equals the line's coordinate counts as
    left/below. Returns NO_SPLIT when no point lies strictly to the right of /
    above the line, or when none lies at or before it.
    """
    _, coords = point_set.ordering(line.axis)

    # first index whose coordinate exceeds the line
    first_above = int(np.searchsorted(coords, line.coord, side="right"))
    if first_above >= len(coords):
        return NO_SPLIT
    return first_above - 1


def split_ids(line: AxisLine, point_set: PointSet) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """
    Point ids on each side of the line as (left/below, right/above), or None
    if the line leaves every point on one side.
    """
    closest = closest_point(line, point_set)
    if closest == NO_SPLIT:
        return None

    ids, _ = point_set.ordering(line.axis)
    return ids[:closest + 1], ids[closest + 1:]


# ----------------------------------------------------------------------
#  LINKS TO BREAK
# ----------------------------------------------------------------------

def links_to_break(line: Optional[AxisLine], point_set: PointSet, relation: PairwiseRelation) -> int:
    """
    Number of currently connected pairs the line would disconnect if it were
    committed. Committed lines and lines splitting nothing score 0.
    """
    if line is None or not line.live:
        return 0

    sides = split_ids(line, point_set)
    if sides is None:
        return 0

    left, right = sides
    return relation.count_connected(left, right)
