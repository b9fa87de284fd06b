"""
DTW distances between collections of time series.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from joblib import Parallel, delayed

from ..core.cost import build_cost_matrices
from ..exceptions import InvalidInputError
from .pointwise import PointwiseDistance

logger = logging.getLogger(__name__)


def dtw_distance(
    x: ArrayLike,
    y: ArrayLike,
    distance: Union[str, PointwiseDistance] = "absolute",
) -> float:
    """Minimal DTW distance between two sequences."""
    return build_cost_matrices(x, y, distance=distance).min_distance


def dtw_distance_matrix(
    X: Union[NDArray[np.float64], Sequence[ArrayLike]],
    distance: Union[str, PointwiseDistance] = "absolute",
    n_jobs: int = 1,
) -> NDArray[np.float64]:
    """
    Pairwise DTW distance matrix between multiple series.

    Parameters
    ----------
    X : array (n_series, n_points) or list of 1D arrays
        Series to compare; lengths may differ when passed as a list
    distance : str or callable, default "absolute"
        Pointwise distance used inside DTW
    n_jobs : int
        Number of parallel workers (-1 = all cores)

    Returns
    -------
    D : array (n_series, n_series)
        Symmetric distance matrix with zero diagonal

    Examples
    --------
    >>> X = np.random.randn(4, 30)
    >>> D = dtw_distance_matrix(X, n_jobs=2)
    >>> D.shape
    (4, 4)
    """
    if isinstance(X, np.ndarray) and X.ndim != 2:
        raise InvalidInputError(f"X must be 2D array, got shape {X.shape}")

    series = list(X)
    n_series = len(series)
    if n_series < 2:
        raise InvalidInputError(f"At least 2 series required, got {n_series}")

    logger.info(f"Computing DTW distance matrix for {n_series} series")

    pairs = [(i, j) for i in range(n_series) for j in range(i + 1, n_series)]

    if n_jobs == 1:
        distances = [dtw_distance(series[i], series[j], distance) for i, j in pairs]
    else:
        distances = Parallel(n_jobs=n_jobs, backend='threading')(
            delayed(dtw_distance)(series[i], series[j], distance) for i, j in pairs
        )

    D = np.zeros((n_series, n_series))
    for (i, j), d in zip(pairs, distances):
        D[i, j] = d
        D[j, i] = d

    return D
