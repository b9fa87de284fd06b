"""
Core Dynamic Time Warping algorithms: cost matrices and path backtracking.
"""

from .cost import CostMatrices, build_cost_matrices, validate_sequence
from .path import (
    DEFAULT_TIE_BREAK,
    TIE_BREAK_POLICIES,
    MeasuredStep,
    OriginAnchor,
    WarpPath,
    backtrack_path,
)

__all__ = [
    "CostMatrices",
    "build_cost_matrices",
    "validate_sequence",
    "DEFAULT_TIE_BREAK",
    "TIE_BREAK_POLICIES",
    "MeasuredStep",
    "OriginAnchor",
    "WarpPath",
    "backtrack_path",
]
