"""
High-level alignment API.

Wraps the cost matrix builder and the path backtracker behind a one-shot
function and a small configurable estimator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .core.cost import build_cost_matrices
from .core.path import DEFAULT_TIE_BREAK, WarpPath, backtrack_path, resolve_tie_break
from .distances.pointwise import PointwiseDistance, resolve_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DTWResult:
    """
    Complete alignment of two sequences.

    Attributes
    ----------
    local : array (m-1, n-1)
        Local cost matrix
    accumulated : array (m-1, n-1)
        Accumulated cost matrix
    min_distance : float
        Minimal total alignment distance
    path : WarpPath
        Optimal path, from (m-1, n-1) back to the origin anchor
    """
    local: NDArray[np.float64]
    accumulated: NDArray[np.float64]
    min_distance: float
    path: WarpPath


def dtw(
    s: ArrayLike,
    t: ArrayLike,
    distance: Union[str, PointwiseDistance] = "absolute",
    tie_break: Union[str, Sequence[str]] = DEFAULT_TIE_BREAK,
) -> DTWResult:
    """
    Align two sequences with Dynamic Time Warping.

    Examples
    --------
    >>> from dtwpath import dtw
    >>> result = dtw([1, 1, 1], [5, 5, 5])
    >>> result.min_distance
    8.0
    >>> result.path.as_triples()
    [(2, 2, 8.0), (2, 1, 8.0), (1, 1, 1)]
    """
    matrices = build_cost_matrices(s, t, distance=distance)
    path = backtrack_path(matrices.accumulated, tie_break=tie_break)

    logger.info(
        f"Aligned sequences: matrix {matrices.shape[0]}x{matrices.shape[1]}, "
        f"min distance {matrices.min_distance:.6g}, path length {len(path)}"
    )

    return DTWResult(
        local=matrices.local,
        accumulated=matrices.accumulated,
        min_distance=matrices.min_distance,
        path=path,
    )


class DTW:
    """
    Dynamic Time Warping aligner.

    Parameters
    ----------
    distance : str or callable, default "absolute"
        Pointwise distance: 'absolute', 'squared', or d(x, y)
    tie_break : str or sequence of str, default "up-left-diagonal"
        Neighbour priority used while backtracking

    Attributes
    ----------
    metric : str or callable
        Configured pointwise distance
    distance : float
        Minimal alignment distance of the last fit

    Examples
    --------
    >>> from dtwpath import DTW
    >>> aligner = DTW().fit([1, 1, 1], [5, 5, 5])
    >>> aligner.distance
    8.0
    >>> aligner.path.coordinates()
    [(2, 2), (2, 1), (1, 1)]
    """

    def __init__(self, distance: Union[str, PointwiseDistance] = "absolute",
                 tie_break: Union[str, Sequence[str]] = DEFAULT_TIE_BREAK):
        # Fail on bad settings here rather than on first fit
        resolve_distance(distance)
        resolve_tie_break(tie_break)
        self.metric = distance
        self.tie_break = tie_break
        self._result: Optional[DTWResult] = None

    def fit(self, s: ArrayLike, t: ArrayLike) -> "DTW":
        """Align s with t and store the result."""
        self._result = dtw(s, t, distance=self.metric, tie_break=self.tie_break)
        return self

    @property
    def result(self) -> DTWResult:
        if self._result is None:
            raise RuntimeError("DTW has not been fitted yet. Call fit(s, t) first.")
        return self._result

    @property
    def distance(self) -> float:
        return self.result.min_distance

    @property
    def path(self) -> WarpPath:
        return self.result.path

    def __repr__(self) -> str:
        return f"DTW(distance={self.metric!r}, tie_break={self.tie_break!r})"
