"""
Interactive Plotly renderings of DTW cost matrices.

Matrices are drawn with row index i on the x axis and column index j on the
y axis, both 1-based, so warp path coordinates can be overlaid directly.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from ..core.path import WarpPath


def _axes(matrix: np.ndarray):
    """1-based x (rows) and y (columns) coordinates plus z laid out as z[j, i]."""
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"matrix must be 2D, got shape {matrix.shape}")
    n_rows, n_cols = matrix.shape
    return np.arange(1, n_rows + 1), np.arange(1, n_cols + 1), matrix.T


def _finish(fig: go.Figure, show: bool, filename: Optional[str]) -> go.Figure:
    if filename:
        fig.write_html(filename)
    if show:
        fig.show()
    return fig


def plot_cost_surface(
    matrix: np.ndarray,
    title: str = "Cost matrix",
    show: bool = False,
    filename: Optional[str] = None,
) -> go.Figure:
    """
    3-D surface of a local or accumulated cost matrix.

    Parameters
    ----------
    matrix : array (R, C)
        Cost matrix
    title : str
        Plot title
    show : bool, default False
        If True, display the plot
    filename : str, optional
        If provided, save the plot to this HTML file

    Returns
    -------
    fig : plotly.graph_objects.Figure
    """
    x, y, z = _axes(matrix)
    fig = go.Figure(data=[go.Surface(x=x, y=y, z=z)])
    fig.update_layout(
        title=title,
        scene=dict(xaxis_title='i', yaxis_title='j', zaxis_title='cost'),
    )
    return _finish(fig, show, filename)


def plot_stacked_surfaces(
    local: np.ndarray,
    accumulated: np.ndarray,
    path: WarpPath,
    title: str = "Accumulated cost matrix",
    show: bool = False,
    filename: Optional[str] = None,
) -> go.Figure:
    """
    Local surface (shifted down by 1) under the accumulated surface, with the
    warp path traced just above the accumulated surface.

    The path line uses the legacy (row, col, cost) triples, so the origin
    anchor is drawn at height 1.5.
    """
    lx, ly, lz = _axes(local)
    ax_, ay, az = _axes(accumulated)

    triples = np.array(path.as_triples(), dtype=np.float64)

    fig = go.Figure()
    fig.add_trace(go.Surface(x=lx, y=ly, z=lz - 1, opacity=1, showscale=False, name='local'))
    fig.add_trace(go.Surface(x=ax_, y=ay, z=az, opacity=1, showscale=False, name='accumulated'))
    fig.add_trace(
        go.Scatter3d(
            x=triples[:, 0],
            y=triples[:, 1],
            z=triples[:, 2] + 0.5,
            mode='lines',
            line=dict(color='black'),
            showlegend=False,
            name='path',
        )
    )
    fig.update_layout(
        title=title,
        scene=dict(xaxis_title='i', yaxis_title='j', zaxis_title='cost'),
    )
    return _finish(fig, show, filename)


def plot_cost_contour(
    accumulated: np.ndarray,
    path: Optional[WarpPath] = None,
    title: str = "Accumulated cost matrix",
    show: bool = False,
    filename: Optional[str] = None,
) -> go.Figure:
    """Labelled contour plot of a cost matrix with the warp path overlaid."""
    x, y, z = _axes(accumulated)

    fig = go.Figure()
    fig.add_trace(
        go.Contour(x=x, y=y, z=z, contours=dict(showlabels=True), showscale=False)
    )
    if path is not None:
        coords = np.array(path.coordinates())
        fig.add_trace(
            go.Scatter(
                x=coords[:, 0],
                y=coords[:, 1],
                mode='lines+markers',
                line=dict(color='black'),
                marker=dict(color='black'),
                showlegend=False,
                name='path',
            )
        )
    fig.update_layout(title=title, xaxis_title='i', yaxis_title='j')
    return _finish(fig, show, filename)
