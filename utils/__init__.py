"""
Utility Functions

Provides the separation checks, instance and solution file I/O, and image
output helpers used across the batch.
"""

from .geometry import (
    side_of,
    separates,
    is_separated,
    unseparated_pairs,
    all_pairs_separated,
)
from .image_io import ensure_output_dir, save_image
from .instance_io import (
    InstanceError,
    InstanceNotFoundError,
    NoPointsError,
    PointCountError,
    instance_name,
    instance_path,
    solution_path,
    parse_points,
    read_instance,
    format_solution,
    write_solution,
)

__all__ = [
    "side_of",
    "separates",
    "is_separated",
    "unseparated_pairs",
    "all_pairs_separated",
    "ensure_output_dir",
    "save_image",
    "InstanceError",
    "InstanceNotFoundError",
    "NoPointsError",
    "PointCountError",
    "instance_name",
    "instance_path",
    "solution_path",
    "parse_points",
    "read_instance",
    "format_solution",
    "write_solution",
]
