from typing import Iterable, List, Sequence, Tuple

import numpy as np

from models.point import Point
from models.axis_line import Axis


class PointSet:
    """
    The points of one instance together with their two access orderings.

    Supports:
      - stable ids equal to the input order
      - x ordering (the input order for pre-sorted instances)
      - y ordering (stable sort, equal y keep their x ordering)
      - numpy views of each ordering for the scorer: ids and coordinates

    Notes:
      • Instances are expected pre-sorted by x. The x ordering is still built
        with a stable sort so it equals the input order in that case and stays
        correct otherwise.
      • No de-duplication happens here.
    """

    def __init__(self, points: Sequence[Point]):
        self.points: List[Point] = list(points)

        # stable: equals the input order when the instance is pre-sorted by x
        self.x_order: List[Point] = sorted(self.points, key=lambda p: p.x)
        self.y_order: List[Point] = sorted(self.points, key=lambda p: p.y)

        self._orderings = {
            Axis.V: self._as_arrays(self.x_order, Axis.V),
            Axis.H: self._as_arrays(self.y_order, Axis.H),
        }

    @classmethod
    def from_coordinates(cls, coords: Iterable[Tuple[int, int]]) -> "PointSet":
        """
        Assigns each (x, y) pair the id of its position in `coords`.
        """
        return cls([Point(i, int(x), int(y)) for i, (x, y) in enumerate(coords)])

    @staticmethod
    def _as_arrays(ordered: List[Point], axis: Axis):
        ids = np.fromiter((p.id for p in ordered), dtype=np.intp, count=len(ordered))
        coords = np.fromiter((p.coord(axis) for p in ordered), dtype=float, count=len(ordered))
        return ids, coords

    # ------------------------------------------------------------------
    # Orderings
    # ------------------------------------------------------------------

    def ordered(self, axis: Axis) -> List[Point]:
        """Points sorted by the coordinate a line of `axis` is compared with."""
        return self.x_order if axis.is_vertical else self.y_order

    def ordering(self, axis: Axis) -> Tuple[np.ndarray, np.ndarray]:
        """
        Returns (ids, coords) for the ordering matching `axis`, both as numpy
        arrays in ascending coordinate order.
        """
        return self._orderings[axis]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, point_id: int) -> Point:
        return self.points[point_id]

    def __repr__(self):
        return f"PointSet(n={len(self.points)})"
