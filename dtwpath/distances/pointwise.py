"""
Pointwise (local) distance functions used to fill the local cost matrix.

Distances are looked up by name through a small registry so the choice can
come from configuration files and the command line.
"""

from __future__ import annotations

from typing import Callable, Dict, Union

from ..exceptions import InvalidInputError

PointwiseDistance = Callable[[float, float], float]


def absolute_distance(x: float, y: float) -> float:
    """Absolute difference |x - y|."""
    return abs(x - y)


def squared_distance(x: float, y: float) -> float:
    """Squared Euclidean difference (x - y)^2."""
    return (x - y) ** 2


_DISTANCE_REGISTRY: Dict[str, PointwiseDistance] = {
    'absolute': absolute_distance,
    'squared': squared_distance,
}


def available_distances() -> list:
    """Names accepted by :func:`resolve_distance`."""
    return sorted(_DISTANCE_REGISTRY)


def resolve_distance(distance: Union[str, PointwiseDistance]) -> PointwiseDistance:
    """
    Turn a distance name or callable into a callable.

    Parameters
    ----------
    distance : str or callable
        Registered name ('absolute', 'squared') or a function d(x, y)

    Returns
    -------
    callable
        Pointwise distance function

    Raises
    ------
    InvalidInputError
        If the name is not registered or the object is not callable
    """
    if callable(distance):
        return distance

    if isinstance(distance, str):
        func = _DISTANCE_REGISTRY.get(distance.lower())
        if func is not None:
            return func

    raise InvalidInputError(
        f"Unknown distance: {distance!r}. Available: {available_distances()}"
    )
