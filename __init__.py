"""
Axis-Parallel Separation Package

This package computes a small set of axis-parallel lines that separates
every pair of points of an instance, using a greedy algorithm:

- Point sets and the pairwise "still connected" relation
- Candidate line generation between adjacent points
- Greedy selection of the line breaking the most links
- Instance / solution file I/O
- Solution visualization
"""
__all__ = [
    "config",
    "main",
    "models",
    "separators",
    "utils",
    "visualization",
]
