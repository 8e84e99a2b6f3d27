from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    One input point.

    `id` is the point's position in the instance file and is the only index
    used into the pairwise relation matrix.
    """

    id: int
    x: int
    y: int

    @property
    def coords(self):
        return (self.x, self.y)

    def coord(self, axis) -> int:
        """Coordinate compared against a line of the given axis."""
        return self.x if axis.is_vertical else self.y

    def __repr__(self):
        return f"Point(id={self.id}, x={self.x}, y={self.y})"
