"""
Visualization module for dtwpath.

Matplotlib functions return (fig, ax); Plotly functions return go.Figure.
"""

from .plots import (
    plot_sequence,
    plot_cost_matrix,
    plot_cost_matrices,
)
from .plotly_viz import (
    plot_cost_surface,
    plot_stacked_surfaces,
    plot_cost_contour,
)

__all__ = [
    'plot_sequence',
    'plot_cost_matrix',
    'plot_cost_matrices',
    'plot_cost_surface',
    'plot_stacked_surfaces',
    'plot_cost_contour',
]
