"""
Optimal warp path recovery from an accumulated cost matrix.

The path is traced backwards from the bottom-right cell by greedy descent to
the cheapest of the up, left and diagonal neighbours. Path coordinates are
1-based matrix coordinates: the first element sits at (R, C) and the path
closes with an :class:`OriginAnchor` standing for the trimmed boundary cell.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)

# Move name -> (row delta, column delta)
MOVES: Dict[str, Tuple[int, int]] = {
    'up': (-1, 0),
    'left': (0, -1),
    'diagonal': (-1, -1),
}

TIE_BREAK_POLICIES: Dict[str, Tuple[str, str, str]] = {
    'up-left-diagonal': ('up', 'left', 'diagonal'),
    'left-up-diagonal': ('left', 'up', 'diagonal'),
    'diagonal-up-left': ('diagonal', 'up', 'left'),
    'diagonal-left-up': ('diagonal', 'left', 'up'),
}

DEFAULT_TIE_BREAK = 'up-left-diagonal'


@dataclass(frozen=True)
class MeasuredStep:
    """A cell of the accumulated matrix visited by the path."""
    row: int
    col: int
    cost: float

    is_anchor = False

    @property
    def index(self) -> Tuple[int, int]:
        """0-based (row, col) index into the accumulated matrix."""
        return self.row - 1, self.col - 1

    def as_triple(self) -> Tuple[int, int, float]:
        return self.row, self.col, self.cost


@dataclass(frozen=True)
class OriginAnchor:
    """
    Terminal path element standing for the trimmed origin of the DP grid.

    It carries no measured cost. :meth:`as_triple` returns the conventional
    (1, 1, 1) placeholder for consumers that expect plain triples.
    """
    row: int = 1
    col: int = 1

    is_anchor = True

    def as_triple(self) -> Tuple[int, int, int]:
        return self.row, self.col, 1


PathElement = Union[MeasuredStep, OriginAnchor]


@dataclass(frozen=True)
class WarpPath:
    """
    Immutable warp path, ordered from the end of the alignment to its start.

    Iterating yields :class:`MeasuredStep` elements followed by a single
    :class:`OriginAnchor`. Use :meth:`forward` for chronological order.
    """
    elements: Tuple[PathElement, ...]

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __getitem__(self, idx):
        return self.elements[idx]

    @property
    def measured_steps(self) -> Tuple[MeasuredStep, ...]:
        return tuple(e for e in self.elements if not e.is_anchor)

    @property
    def total_cost(self) -> float:
        """Accumulated cost at the first (bottom-right) element."""
        return self.elements[0].cost

    def as_triples(self) -> List[Tuple[int, int, float]]:
        """Path as (row, col, cost) triples, anchor rendered as (1, 1, 1)."""
        return [e.as_triple() for e in self.elements]

    def coordinates(self) -> List[Tuple[int, int]]:
        return [(e.row, e.col) for e in self.elements]

    def forward(self) -> Tuple[PathElement, ...]:
        """Elements in chronological order, anchor first."""
        return tuple(reversed(self.elements))


def resolve_tie_break(tie_break: Union[str, Sequence[str]]) -> Tuple[str, str, str]:
    """
    Turn a tie-break policy name or move ordering into a move ordering.

    Raises
    ------
    InvalidInputError
        If the policy is unknown or is not a permutation of the three moves
    """
    if isinstance(tie_break, str):
        order = TIE_BREAK_POLICIES.get(tie_break.lower())
        if order is None:
            raise InvalidInputError(
                f"Unknown tie-break policy: {tie_break!r}. "
                f"Available: {sorted(TIE_BREAK_POLICIES)}"
            )
        return order

    order = tuple(tie_break)
    if sorted(order) != sorted(MOVES):
        raise InvalidInputError(
            f"Tie-break order must be a permutation of {sorted(MOVES)}, got {order}"
        )
    return order


def backtrack_path(
    accumulated: ArrayLike,
    tie_break: Union[str, Sequence[str]] = DEFAULT_TIE_BREAK,
) -> WarpPath:
    """
    Recover the optimal warp path from a trimmed accumulated cost matrix.

    Parameters
    ----------
    accumulated : array (R, C)
        Accumulated cost matrix as returned by build_cost_matrices
    tie_break : str or sequence of str, default "up-left-diagonal"
        Priority used when several neighbours share the minimum cost.
        The default breaks ties up, then left, then diagonal.

    Returns
    -------
    WarpPath
        Path from (R, C) back to the origin anchor

    Raises
    ------
    InvalidInputError
        If the matrix is not 2D, has zero rows or columns, or contains NaN

    Notes
    -----
    At row 2 only horizontal moves remain and at column 2 only vertical
    moves remain; these forced steps take precedence over the tie-break.
    """
    acc = np.asarray(accumulated, dtype=np.float64)
    if acc.ndim != 2:
        raise InvalidInputError(f"Accumulated matrix must be 2D, got shape {acc.shape}")
    if acc.shape[0] == 0 or acc.shape[1] == 0:
        raise InvalidInputError("Accumulated matrix is empty; no start cell to backtrack from")
    if np.isnan(acc).any():
        raise InvalidInputError("Accumulated matrix contains NaN")

    order = resolve_tie_break(tie_break)

    i, j = acc.shape
    elements: List[PathElement] = [MeasuredStep(i, j, float(acc[i - 1, j - 1]))]

    while i > 1 and j > 1:
        if i == 2:
            j -= 1
        elif j == 2:
            i -= 1
        else:
            neighbours = {
                move: acc[i - 1 + di, j - 1 + dj] for move, (di, dj) in MOVES.items()
            }
            lowest = min(neighbours.values())
            move = next(m for m in order if neighbours[m] == lowest)
            di, dj = MOVES[move]
            i += di
            j += dj
        elements.append(MeasuredStep(i, j, float(acc[i - 1, j - 1])))

    elements.append(OriginAnchor())

    logger.debug(f"Backtracked path of {len(elements)} elements from {acc.shape}")

    return WarpPath(elements=tuple(elements))
