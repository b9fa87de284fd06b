"""
Sample sequences for demonstrations and tests.

The sine/cosine pair samples sin(k) and cos(k) at k = 1..n, two series with
the same shape shifted in phase.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray


def _check_length(n: int) -> None:
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")


def sine_sequence(n: int = 12) -> NDArray[np.float64]:
    """sin(1), sin(2), ..., sin(n)."""
    _check_length(n)
    return np.sin(np.arange(1, n + 1, dtype=np.float64))


def cosine_sequence(n: int = 12) -> NDArray[np.float64]:
    """cos(1), cos(2), ..., cos(n)."""
    _check_length(n)
    return np.cos(np.arange(1, n + 1, dtype=np.float64))


def sine_cosine_pair(n: int = 12) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Phase-shifted pair used by the demo."""
    return sine_sequence(n), cosine_sequence(n)


def random_walk(n: int = 100, seed: Optional[int] = None,
                scale: float = 1.0) -> NDArray[np.float64]:
    """
    Gaussian random walk starting at 0.

    Parameters
    ----------
    n : int
        Number of samples
    seed : int, optional
        Seed for numpy's default generator
    scale : float
        Standard deviation of each increment
    """
    _check_length(n)
    rng = np.random.default_rng(seed)
    steps = rng.normal(0.0, scale, size=n)
    steps[0] = 0.0
    return np.cumsum(steps)


_GENERATORS = {
    'sine': sine_sequence,
    'cosine': cosine_sequence,
    'random_walk': random_walk,
}


def generate(name: str, n: int, seed: Optional[int] = None) -> NDArray[np.float64]:
    """Generate a named sample sequence ('sine', 'cosine', 'random_walk')."""
    func = _GENERATORS.get(name)
    if func is None:
        raise ValueError(f"Unknown generator: {name}. Must be one of {list(_GENERATORS.keys())}")
    if name == 'random_walk':
        return func(n, seed=seed)
    return func(n)
