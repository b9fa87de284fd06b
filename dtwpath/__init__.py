"""
dtwpath: Dynamic Time Warping with warp path recovery

Cost matrices, optimal path backtracking, and renderings for aligning two
real-valued time series.
"""

from .exceptions import InvalidInputError
from .core import (
    CostMatrices,
    MeasuredStep,
    OriginAnchor,
    WarpPath,
    backtrack_path,
    build_cost_matrices,
)
from .api import DTW, DTWResult, dtw
from .distances.pairwise import dtw_distance, dtw_distance_matrix

__version__ = "0.1.0"

__all__ = [
    'InvalidInputError',
    'CostMatrices',
    'MeasuredStep',
    'OriginAnchor',
    'WarpPath',
    'backtrack_path',
    'build_cost_matrices',
    'DTW',
    'DTWResult',
    'dtw',
    'dtw_distance',
    'dtw_distance_matrix',
]

# Configuration and pipeline
from .config import PipelineConfig
from .pipeline import run_pipeline
__all__.extend(['PipelineConfig', 'run_pipeline'])
