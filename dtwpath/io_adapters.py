"""
Input/output adapters for dtwpath.

Thin adapters that turn files and pandas DataFrames into NumPy sequences and
write alignment results to disk. The core algorithms stay pure NumPy.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from .api import DTWResult

logger = logging.getLogger(__name__)


def from_pandas(
    df: pd.DataFrame,
    value_col: str,
    time_col: Optional[str] = None,
    sort_by_time: bool = True,
    dropna: bool = False,
) -> NDArray[np.float64]:
    """
    Convert a pandas DataFrame column to a sequence.

    Parameters
    ----------
    df : pd.DataFrame
        Input DataFrame
    value_col : str
        Column name for sequence values
    time_col : str, optional
        Column name for timestamps (used for sorting only)
    sort_by_time : bool, default True
        If True and time_col provided, sort by time
    dropna : bool, default False
        Drop missing values. When False, NaN is kept and rejected later
        by the aligner.

    Returns
    -------
    np.ndarray
        Values as float64

    Examples
    --------
    >>> df = pd.DataFrame({'timestamp': pd.date_range('2024-01-01', periods=5, freq='1h'),
    ...                    'value': [0, 1, 2, 1, 0]})
    >>> from_pandas(df, value_col='value', time_col='timestamp')
    array([0., 1., 2., 1., 0.])
    """
    if value_col not in df.columns:
        raise KeyError(f"Column {value_col!r} not found. Available: {list(df.columns)}")

    if time_col and sort_by_time:
        df = df.sort_values(time_col)

    values = pd.to_numeric(df[value_col], errors='coerce')
    if dropna:
        values = values.dropna()
    return values.to_numpy(dtype=np.float64)


def load_sequence(path: Union[str, Path], column: Optional[str] = None) -> NDArray[np.float64]:
    """
    Load a 1-D sequence from disk.

    Supported formats are .npy, .csv (read with pandas; ``column`` selects the
    value column, otherwise the first numeric column is used) and plain
    whitespace-delimited text for any other extension.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sequence file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == '.npy':
        values = np.load(path)
    elif suffix == '.csv':
        df = pd.read_csv(path)
        if column is None:
            numeric = df.select_dtypes(include='number').columns
            if len(numeric) == 0:
                raise ValueError(f"No numeric column in {path}")
            column = numeric[0]
        values = from_pandas(df, value_col=column)
    else:
        values = np.loadtxt(path, dtype=np.float64, ndmin=1)

    values = np.asarray(values, dtype=np.float64)
    logger.info(f"Loaded {len(values)} samples from {path}")
    return values


def result_to_frame(result: DTWResult, forward: bool = False) -> pd.DataFrame:
    """Path of a result as a DataFrame with row, col, cost and anchor columns."""
    elements = result.path.forward() if forward else tuple(result.path)
    return pd.DataFrame(
        {
            'row': [e.row for e in elements],
            'col': [e.col for e in elements],
            'cost': [e.as_triple()[2] for e in elements],
            'anchor': [e.is_anchor for e in elements],
        }
    )


def save_result(
    result: DTWResult,
    path: Union[str, Path],
    forward: bool = False,
    overwrite: bool = True,
) -> Path:
    """
    Write an alignment result to .json (distance, shape and path) or .csv (path).

    Returns
    -------
    Path
        The written file
    """
    path = Path(path)
    if path.exists() and not overwrite:
        raise FileExistsError(f"Output exists and overwrite is disabled: {path}")

    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()

    if suffix == '.json':
        triples = result.path.as_triples()
        if forward:
            triples = triples[::-1]
        payload = {
            'min_distance': result.min_distance,
            'shape': list(result.accumulated.shape),
            'order': 'forward' if forward else 'backward',
            'path': [list(triple) for triple in triples],
        }
        with open(path, 'w') as f:
            json.dump(payload, f, indent=2)
    elif suffix == '.csv':
        result_to_frame(result, forward=forward).to_csv(path, index=False)
    else:
        raise ValueError(f"Unsupported output format: {suffix!r}. Use .json or .csv")

    logger.info(f"Wrote alignment result to {path}")
    return path
