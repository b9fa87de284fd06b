"""
Local and accumulated cost matrices for Dynamic Time Warping.

The accumulated matrix is filled on an (m, n) working grid whose first row
and first column act as the boundary: the origin holds 0 and every other
boundary cell holds +inf, so any alignment has to start at the origin. The
boundary is trimmed before the matrices are returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..distances.pointwise import PointwiseDistance, resolve_distance
from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)

MIN_SEQUENCE_LENGTH = 2


@dataclass(frozen=True)
class CostMatrices:
    """
    Result of :func:`build_cost_matrices`.

    Attributes
    ----------
    local : array (m-1, n-1)
        Pointwise distances between s[1:] and t[1:]
    accumulated : array (m-1, n-1)
        Minimal cumulative cost to reach each cell from the origin
    min_distance : float
        Minimal total alignment distance, equal to accumulated[-1, -1]
    """
    local: NDArray[np.float64]
    accumulated: NDArray[np.float64]
    min_distance: float

    @property
    def shape(self) -> Tuple[int, int]:
        return self.accumulated.shape


def validate_sequence(x: ArrayLike, name: str = "sequence") -> NDArray[np.float64]:
    """
    Check that x is a finite 1-D numeric sequence with at least two samples.

    Parameters
    ----------
    x : array-like
        Candidate sequence
    name : str
        Name used in error messages

    Returns
    -------
    x : array (float64)
        Validated copy of the input

    Raises
    ------
    InvalidInputError
        If the sequence is empty, shorter than two samples, not 1-D,
        not numeric, or contains NaN/inf
    """
    arr = np.asarray(x)

    if arr.dtype.kind not in ('i', 'u', 'f'):
        raise InvalidInputError(
            f"{name}: expected numeric values, got dtype {arr.dtype}"
        )

    if arr.ndim != 1:
        raise InvalidInputError(f"{name}: input must be 1D, got shape {arr.shape}")

    if arr.size == 0:
        raise InvalidInputError(f"{name}: sequence is empty")

    if arr.size < MIN_SEQUENCE_LENGTH:
        raise InvalidInputError(
            f"{name}: at least {MIN_SEQUENCE_LENGTH} samples required, got {arr.size}"
        )

    arr = arr.astype(np.float64)
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name}: sequence contains NaN or infinite values")

    return arr


def build_cost_matrices(
    s: ArrayLike,
    t: ArrayLike,
    distance: Union[str, PointwiseDistance] = "absolute",
) -> CostMatrices:
    """
    Build the local and accumulated DTW cost matrices for two sequences.

    Parameters
    ----------
    s : array-like (m,)
        First sequence, m >= 2
    t : array-like (n,)
        Second sequence, n >= 2
    distance : str or callable, default "absolute"
        Pointwise distance: 'absolute' |x-y|, 'squared' (x-y)^2, or d(x, y)

    Returns
    -------
    CostMatrices
        Trimmed (m-1, n-1) local and accumulated matrices (read-only) and
        the minimal total distance

    Raises
    ------
    InvalidInputError
        On invalid sequences, an unknown distance name, or a distance
        function returning a negative or non-finite cost

    Examples
    --------
    >>> result = build_cost_matrices([0, 1, 2, 1, 0], [0, 1, 2, 1, 0])
    >>> result.min_distance
    0.0
    >>> result.local.shape
    (4, 4)
    """
    s = validate_sequence(s, "s")
    t = validate_sequence(t, "t")
    d = resolve_distance(distance)

    m, n = len(s), len(t)

    acc = np.full((m, n), np.inf)
    acc[0, 0] = 0.0
    local = np.zeros((m, n))

    for i in range(1, m):
        for j in range(1, n):
            cost = float(d(s[i], t[j]))
            if not np.isfinite(cost) or cost < 0:
                raise InvalidInputError(
                    f"Distance returned invalid cost {cost} for ({s[i]}, {t[j]})"
                )
            local[i, j] = cost
            acc[i, j] = cost + min(acc[i - 1, j], acc[i, j - 1], acc[i - 1, j - 1])

    min_distance = float(acc[m - 1, n - 1])

    # Trim the boundary row and column
    local = local[1:, 1:].copy()
    acc = acc[1:, 1:].copy()
    local.flags.writeable = False
    acc.flags.writeable = False

    logger.debug(f"Built {acc.shape[0]}x{acc.shape[1]} cost matrices, min distance {min_distance:.6g}")

    return CostMatrices(local=local, accumulated=acc, min_distance=min_distance)
