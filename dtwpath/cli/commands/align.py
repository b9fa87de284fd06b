"""Alignment CLI commands."""

import click
from pathlib import Path
from typing import Optional

from ...core.path import TIE_BREAK_POLICIES, DEFAULT_TIE_BREAK
from ...distances.pointwise import available_distances


def _echo_result(result, forward: bool) -> None:
    click.echo(f"min_distance: {result.min_distance:.6g}")
    click.echo(f"matrix: {result.accumulated.shape[0]}x{result.accumulated.shape[1]}")
    click.echo(f"path ({'forward' if forward else 'backward'}):")
    triples = result.path.as_triples()
    if forward:
        triples = triples[::-1]
    for row, col, cost in triples:
        click.echo(f"  {row} {col} {cost:.6g}")


def register_align_commands(cli: click.Group) -> None:
    """Register alignment commands."""
    @cli.command("align", help="Align two sequences read from files")
    @click.argument("s_file", type=click.Path(exists=True, path_type=Path))
    @click.argument("t_file", type=click.Path(exists=True, path_type=Path))
    @click.option("--distance", type=click.Choice(available_distances()),
                  default="absolute", show_default=True, help="Pointwise distance")
    @click.option("--tie-break", type=click.Choice(sorted(TIE_BREAK_POLICIES)),
                  default=DEFAULT_TIE_BREAK, show_default=True,
                  help="Neighbour priority used while backtracking")
    @click.option("--column", default=None, help="Value column for CSV inputs")
    @click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
                  help="Write the result to a .json or .csv file")
    @click.option("--forward", is_flag=True, help="Report the path in chronological order")
    def align(s_file: Path, t_file: Path, distance: str, tie_break: str,
              column: Optional[str], output: Optional[Path], forward: bool):
        """Align the sequences in S_FILE and T_FILE.

        Examples:

        \b
            dtwpath align s.txt t.txt
            dtwpath align s.csv t.csv --column value --distance squared -o result.json
        """
        from ...api import dtw
        from ...io_adapters import load_sequence, save_result

        try:
            s = load_sequence(s_file, column=column)
            t = load_sequence(t_file, column=column)
            result = dtw(s, t, distance=distance, tie_break=tie_break)
            if output is not None:
                save_result(result, output, forward=forward)
        except (ValueError, FileNotFoundError) as e:
            raise click.ClickException(str(e)) from e
        except KeyError as e:
            raise click.ClickException(e.args[0]) from e

        _echo_result(result, forward)

    @cli.command("demo", help="Align the sine/cosine sample pair")
    @click.option("--length", "-n", type=click.IntRange(min=2), default=12,
                  show_default=True, help="Number of samples per sequence")
    @click.option("--distance", type=click.Choice(available_distances()),
                  default="absolute", show_default=True, help="Pointwise distance")
    @click.option("--plot-dir", type=click.Path(file_okay=False, path_type=Path),
                  default=None, help="Write all renderings to this directory")
    def demo(length: int, distance: str, plot_dir: Optional[Path]):
        """Align sin(1..n) with cos(1..n) and optionally render the plots."""
        from ...api import dtw
        from ...config import PlotConfig
        from ...pipeline import render_plots
        from ...sequences import sine_cosine_pair

        s, t = sine_cosine_pair(length)
        result = dtw(s, t, distance=distance)
        _echo_result(result, forward=False)

        if plot_dir is not None:
            written = render_plots(result, s, t, PlotConfig(enabled=True, directory=str(plot_dir)))
            for path in written:
                click.echo(f"wrote {path}")
