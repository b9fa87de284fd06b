"""
YAML-driven alignment pipeline.

Keeps "what" in YAML, "how" in Python: load or generate the two sequences,
align them, write the result, and optionally render the plots.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .api import DTWResult, dtw
from .config import PipelineConfig, PlotConfig, SequenceConfig
from .io_adapters import load_sequence, save_result
from .sequences import generate

logger = logging.getLogger(__name__)


def load_sequence_from_config(config: SequenceConfig) -> NDArray[np.float64]:
    """Read or generate one sequence."""
    if config.path is not None:
        return load_sequence(config.path, column=config.column)
    logger.info(f"Generating {config.generator} sequence of length {config.length}")
    return generate(config.generator, config.length, seed=config.seed)


def render_plots(
    result: DTWResult,
    s: NDArray[np.float64],
    t: NDArray[np.float64],
    config: PlotConfig,
) -> List[Path]:
    """
    Write the requested renderings to config.directory.

    Matplotlib figures are saved as PNG, Plotly figures as HTML.
    """
    import matplotlib.pyplot as plt
    from .viz import (
        plot_sequence,
        plot_cost_matrices,
        plot_cost_surface,
        plot_stacked_surfaces,
        plot_cost_contour,
    )

    out_dir = Path(config.directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    def _save_mpl(fig, name):
        target = out_dir / name
        fig.savefig(target)
        plt.close(fig)
        written.append(target)

    def _save_plotly(fig, name):
        target = out_dir / name
        fig.write_html(str(target))
        written.append(target)

    if "sequences" in config.kinds:
        fig, _ = plot_sequence(s, title="s-sequence")
        _save_mpl(fig, "s_sequence.png")
        fig, _ = plot_sequence(t, title="t-sequence")
        _save_mpl(fig, "t_sequence.png")

    if "heatmap" in config.kinds:
        fig, _ = plot_cost_matrices(result.local, result.accumulated, result.path)
        _save_mpl(fig, "cost_matrices.png")

    if "surface" in config.kinds:
        _save_plotly(plot_cost_surface(result.local, title="Local cost matrix"), "local_surface.html")
        _save_plotly(plot_cost_surface(result.accumulated, title="Accumulated cost matrix"),
                     "accumulated_surface.html")

    if "stacked" in config.kinds:
        _save_plotly(plot_stacked_surfaces(result.local, result.accumulated, result.path),
                     "stacked_surfaces.html")

    if "contour" in config.kinds:
        _save_plotly(plot_cost_contour(result.accumulated, result.path), "contour.html")

    logger.info(f"Wrote {len(written)} plots to {out_dir}")
    return written


def run_pipeline(config: Union[PipelineConfig, str, Path]) -> Tuple[DTWResult, Path]:
    """
    Run the full pipeline.

    Parameters
    ----------
    config : PipelineConfig or path to a YAML file

    Returns
    -------
    result : DTWResult
    output_path : Path
        File the result was written to
    """
    if not isinstance(config, PipelineConfig):
        config = PipelineConfig.from_yaml(config)

    s = load_sequence_from_config(config.s)
    t = load_sequence_from_config(config.t)

    result = dtw(s, t, distance=config.alignment.distance, tie_break=config.alignment.tie_break)

    output_path = Path(config.output.path)
    if output_path.suffix.lower() != f".{config.output.format}":
        output_path = output_path.with_suffix(f".{config.output.format}")
    save_result(result, output_path, forward=config.output.forward,
                overwrite=config.output.overwrite)

    if config.plots.enabled:
        render_plots(result, s, t, config.plots)

    return result, output_path
