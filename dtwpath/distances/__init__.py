"""
Distance functions for time series alignment.

Pointwise distances fill the local cost matrix. DTW distances between whole
collections of series live in :mod:`dtwpath.distances.pairwise`.
"""

from .pointwise import (
    absolute_distance,
    squared_distance,
    available_distances,
    resolve_distance,
)

__all__ = [
    "absolute_distance",
    "squared_distance",
    "available_distances",
    "resolve_distance",
]
