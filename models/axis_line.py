from dataclasses import dataclass
from enum import Enum


class Axis(Enum):
    """
    Orientation of a separating line. The value is the marker written to the
    solution files.
    """

    V = "v"
    H = "h"

    @property
    def is_vertical(self) -> bool:
        return self is Axis.V


@dataclass
class AxisLine:
    """
    An axis-parallel line `axis = coord`.

    Candidates are created live by the candidate generator, in a fixed order
    recorded in `index`; committing one takes it out of the scoring pool for
    the rest of the instance.
    """

    axis: Axis
    coord: float
    index: int = 0
    live: bool = True

    @property
    def marker(self) -> str:
        return self.axis.value

    @property
    def is_vertical(self) -> bool:
        return self.axis.is_vertical

    def commit(self):
        if not self.live:
            raise ValueError(f"{self!r} is already committed")
        self.live = False

    def as_pair(self):
        return (self.marker, self.coord)

    def __str__(self):
        return f"{self.marker} {self.coord:.1f}"

    def __repr__(self):
        state = "live" if self.live else "committed"
        return f"AxisLine({self.marker}={self.coord}, index={self.index}, {state})"
