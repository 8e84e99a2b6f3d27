"""
Instance file I/O for the separation batch.

This module provides:
    • instance_path(index, params) / solution_path(index, params, ext)
    • parse_points(text, max_points)
    • read_instance(index, params)
    • format_solution(lines)
    • write_solution(index, lines, params)

Instance format: the point count N, then N whitespace-separated integer
(x, y) pairs, pre-sorted by x.

Solution format: the number of lines, then one "<v|h> <coord>" row per
committed line with one decimal place.
"""

import os
from typing import List, Sequence, Tuple

from config import get_active_params
from models.axis_line import AxisLine
from utils.image_io import ensure_output_dir


# -------------------------------------------------------------------------
#  ERRORS
# -------------------------------------------------------------------------

class InstanceError(Exception):
    """An instance that cannot be processed; the batch skips it."""

    def __init__(self, index, message):
        super().__init__(message)
        self.index = index


class InstanceNotFoundError(InstanceError):
    pass


class NoPointsError(InstanceError):
    pass


class PointCountError(InstanceError):
    pass


# -------------------------------------------------------------------------
#  PATHS
# -------------------------------------------------------------------------

def instance_name(index: int, params=None) -> str:
    params = params or get_active_params()
    return params["INSTANCE_FILE_PATTERN"].format(index=index)


def instance_path(index: int, params=None) -> str:
    params = params or get_active_params()
    return os.path.join(params["INPUT_FOLDER"], instance_name(index, params))


def solution_path(index: int, params=None, ext: str = ".txt") -> str:
    params = params or get_active_params()
    name = params["SOLUTION_FILE_PATTERN"].format(index=index)
    return os.path.join(params["OUTPUT_FOLDER"], name + ext)


# -------------------------------------------------------------------------
#  READING
# -------------------------------------------------------------------------

def parse_points(text: str, max_points: int, index: int = 0) -> List[Tuple[int, int]]:
    """
    Parses the content of one instance file into a list of (x, y) pairs.

    Raises:
        NoPointsError:   no readable point count
        PointCountError: malformed coordinates, or a pair count that differs
                         from the declared one or exceeds `max_points`
    """
    tokens = text.split()
    if not tokens:
        raise NoPointsError(index, "file is empty")

    try:
        num_points = int(tokens[0])
    except ValueError:
        raise NoPointsError(index, f"point count {tokens[0]!r} is not an integer")
    if num_points < 0:
        raise NoPointsError(index, f"negative point count {num_points}")

    try:
        values = [int(tok) for tok in tokens[1:]]
    except ValueError as exc:
        raise PointCountError(index, f"malformed coordinate: {exc}")

    if len(values) % 2:
        raise PointCountError(index, "dangling coordinate without a partner")

    coords = list(zip(values[0::2], values[1::2]))

    if len(coords) != num_points:
        raise PointCountError(index, f"declared {num_points} points, found {len(coords)}")
    if num_points > max_points:
        raise PointCountError(index, f"{num_points} points exceed the maximum of {max_points}")

    return coords


def read_instance(index: int, params=None) -> List[Tuple[int, int]]:
    """
    Reads instance `index` from the input folder.

    Raises InstanceNotFoundError if the file does not exist, NoPointsError if
    it cannot be read as text, otherwise the errors of parse_points().
    """
    params = params or get_active_params()
    path = instance_path(index, params)

    if not os.path.isfile(path):
        raise InstanceNotFoundError(index, f"{path} not found")

    try:
        with open(path) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise NoPointsError(index, f"{path} is unreadable: {exc}")

    return parse_points(text, params["MAX_POINTS"], index=index)


# -------------------------------------------------------------------------
#  WRITING
# -------------------------------------------------------------------------

def format_solution(lines: Sequence[AxisLine]) -> str:
    rows = [str(len(lines))]
    rows.extend(str(ln) for ln in lines)
    return "\n".join(rows) + "\n"


def write_solution(index: int, lines: Sequence[AxisLine], params=None) -> str:
    """
    Writes the committed lines of instance `index`. Returns the file path.
    """
    params = params or get_active_params()
    path = solution_path(index, params)

    ensure_output_dir(os.path.dirname(path))
    with open(path, "w") as f:
        f.write(format_solution(lines))

    return path
