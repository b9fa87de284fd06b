"""
Matplotlib renderings for DTW alignments.

All functions follow the contract:
- Accept raw sequences, cost matrices and warp paths
- Return (fig, ax) tuple
- Use consistent Matplotlib styling
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from ..core.path import WarpPath

# Consistent styling constants
FONT_FAMILY = 'DejaVu Sans'
FIG_WIDTH = 10
FIG_HEIGHT = 6
DPI = 100
GRID_ALPHA = 0.3
SPINE_COLOR = '#333333'
GRAY_LEVELS = 15


def _setup_style(ax, grid: bool = False):
    """Apply consistent styling to an axis."""
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.spines['left'].set_color(SPINE_COLOR)
    ax.spines['bottom'].set_color(SPINE_COLOR)

    if grid:
        ax.grid(True, alpha=GRID_ALPHA, linestyle='-', linewidth=0.5)
        ax.set_axisbelow(True)

    ax.tick_params(colors=SPINE_COLOR)


def plot_sequence(
    x: np.ndarray,
    title: Optional[str] = None,
    ylim: Optional[Tuple[float, float]] = (-5, 5),
    figsize: Optional[Tuple[float, float]] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Line plot of a raw input sequence, samples marked.

    Parameters
    ----------
    x : array (n,)
        Sequence values, drawn at time 1..n
    title : str, optional
        Plot title
    ylim : tuple, optional
        Value axis limits (default: (-5, 5); None to autoscale)
    figsize : tuple, optional
        Figure size (default: (10, 6))

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    x = np.asarray(x, dtype=np.float64)
    if figsize is None:
        figsize = (FIG_WIDTH, FIG_HEIGHT)

    fig, ax = plt.subplots(figsize=figsize, dpi=DPI)
    fig.patch.set_facecolor('white')

    time_index = np.arange(1, len(x) + 1)
    ax.plot(time_index, x, 'k-o', linewidth=1.5, markersize=4, alpha=0.8)

    ax.set_xlim(0, len(x))
    if ylim is not None:
        ax.set_ylim(*ylim)

    _setup_style(ax, grid=True)
    ax.set_xlabel('Time', fontfamily=FONT_FAMILY, fontsize=11)
    ax.set_ylabel('Value', fontfamily=FONT_FAMILY, fontsize=11)

    if title:
        ax.set_title(title, fontfamily=FONT_FAMILY, fontsize=13, pad=10)

    plt.tight_layout()
    return fig, ax


def _draw_cost_matrix(ax, matrix: np.ndarray, path: Optional[WarpPath], title: Optional[str]):
    """Grayscale image of a matrix with row i on x and column j on y, (1, 1) lower-left."""
    n_rows, n_cols = matrix.shape
    im = ax.imshow(
        matrix.T,
        cmap=plt.colormaps['gray'].resampled(GRAY_LEVELS),
        origin='lower',
        interpolation='nearest',
        aspect='auto',
        extent=(0.5, n_rows + 0.5, 0.5, n_cols + 0.5),
    )

    if path is not None:
        coords = np.array(path.coordinates())
        ax.plot(coords[:, 0], coords[:, 1], 'o-', color='black', markersize=4, linewidth=1.2)

    _setup_style(ax, grid=False)
    ax.set_xlabel('i', fontfamily=FONT_FAMILY, fontsize=11)
    ax.set_ylabel('j', fontfamily=FONT_FAMILY, fontsize=11)
    if title:
        ax.set_title(title, fontfamily=FONT_FAMILY, fontsize=13, pad=10)
    return im


def plot_cost_matrix(
    matrix: np.ndarray,
    path: Optional[WarpPath] = None,
    title: Optional[str] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Grayscale heatmap of a cost matrix with the warp path overlaid.

    Parameters
    ----------
    matrix : array (R, C)
        Local or accumulated cost matrix
    path : WarpPath, optional
        Path to draw on top, in 1-based matrix coordinates
    title : str, optional
        Plot title
    figsize : tuple, optional
        Figure size (default: (8, 8))

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"matrix must be 2D, got shape {matrix.shape}")

    if figsize is None:
        figsize = (8, 8)

    fig, ax = plt.subplots(figsize=figsize, dpi=DPI)
    fig.patch.set_facecolor('white')

    im = _draw_cost_matrix(ax, matrix, path, title)
    cbar = plt.colorbar(im, ax=ax)
    cbar.set_label('Cost', fontfamily=FONT_FAMILY, fontsize=10)

    plt.tight_layout()
    return fig, ax


def plot_cost_matrices(
    local: np.ndarray,
    accumulated: np.ndarray,
    path: Optional[WarpPath] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> Tuple[plt.Figure, np.ndarray]:
    """
    Local and accumulated cost matrices side by side, path drawn on both.

    Returns
    -------
    fig : matplotlib.figure.Figure
    axes : array of two matplotlib.axes.Axes
    """
    if figsize is None:
        figsize = (2 * FIG_WIDTH * 0.7, FIG_HEIGHT)

    fig, axes = plt.subplots(1, 2, figsize=figsize, dpi=DPI)
    fig.patch.set_facecolor('white')

    _draw_cost_matrix(axes[0], np.asarray(local, dtype=np.float64), path, 'Local cost matrix')
    _draw_cost_matrix(axes[1], np.asarray(accumulated, dtype=np.float64), path, 'Accumulated cost matrix')

    plt.tight_layout()
    return fig, axes
