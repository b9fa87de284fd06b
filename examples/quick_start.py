"""Quick Start Example

Aligns sin(1..12) with cos(1..12), prints the warp path and writes the
renderings next to this script.
"""

import logging
from pathlib import Path

import numpy as np
from dtwpath import DTW, dtw, dtw_distance_matrix
from dtwpath.config import PlotConfig
from dtwpath.pipeline import render_plots
from dtwpath.sequences import sine_cosine_pair, random_walk

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

s, t = sine_cosine_pair(12)

logger.info("dtwpath Quick Start\n")

logger.info("One-shot alignment")
result = dtw(s, t)
logger.info("Min distance: %.4f", result.min_distance)
logger.info("Matrix shape: %s\n", result.accumulated.shape)

logger.info("Warp path (end to start)")
for step in result.path:
    if step.is_anchor:
        logger.info("  origin anchor")
    else:
        logger.info("  (%d, %d) cost=%.4f", step.row, step.col, step.cost)

logger.info("\nSquared distance, diagonal-first tie-break")
aligner = DTW(distance="squared", tie_break="diagonal-up-left").fit(s, t)
logger.info("Min distance: %.4f, path length: %d\n", aligner.distance, len(aligner.path))

logger.info("Distance matrix across random walks")
X = np.vstack([random_walk(40, seed=k) for k in range(4)])
logger.info("%s\n", np.round(dtw_distance_matrix(X, n_jobs=2), 2))

out_dir = Path(__file__).parent / "quick_start_plots"
written = render_plots(result, s, t, PlotConfig(enabled=True, directory=str(out_dir)))
logger.info("Wrote %d plots to %s", len(written), out_dir)
