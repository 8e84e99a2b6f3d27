"""
Data Models

Defines the core data structures:
- Point
- PointSet
- Axis / AxisLine
- PairwiseRelation
"""

from .point import Point
from .axis_line import Axis, AxisLine
from .point_set import PointSet
from .relation import PairwiseRelation, RelationConsistencyError

__all__ = [
    "Point",
    "Axis",
    "AxisLine",
    "PointSet",
    "PairwiseRelation",
    "RelationConsistencyError",
]
