"""
Separators Package

Contains the modules of the greedy separation:
- Candidate line generation
- Candidate scoring (links to break)
- Greedy selection and the result set
"""

from .candidate_generator import generate_candidates
from .line_scorer import closest_point, split_ids, links_to_break, NO_SPLIT
from .greedy_selector import (
    GreedySelector,
    SeparationResult,
    SeparationError,
    separate_points,
)

__all__ = [
    "generate_candidates",
    "closest_point",
    "split_ids",
    "links_to_break",
    "NO_SPLIT",
    "GreedySelector",
    "SeparationResult",
    "SeparationError",
    "separate_points",
]
