"""YAML-based pipeline CLI commands."""

import click
from pathlib import Path


def register_pipeline_commands(cli: click.Group) -> None:
    """Register pipeline-related commands."""
    @cli.command("run", help="Run alignment pipeline from YAML configuration")
    @click.argument("config", type=click.Path(exists=True, path_type=Path))
    @click.option(
        "--validate-only",
        is_flag=True,
        help="Only validate configuration, don't run pipeline"
    )
    def run(config: Path, validate_only: bool):
        """Run alignment pipeline from YAML configuration file.

        Examples:

        \b
            dtwpath run configs/sine_cosine.yaml
            dtwpath run configs/sine_cosine.yaml --validate-only
        """
        from ...config import PipelineConfig
        from ...pipeline import run_pipeline

        try:
            cfg = PipelineConfig.from_yaml(config)
        except (ValueError, TypeError, FileNotFoundError) as e:
            raise click.ClickException(f"Configuration error: {e}") from e

        if validate_only:
            click.echo(f"Configuration valid: {config}")
            click.echo(f"  s: {cfg.s.path or cfg.s.generator}")
            click.echo(f"  t: {cfg.t.path or cfg.t.generator}")
            click.echo(f"  Distance: {cfg.alignment.distance}, tie-break: {cfg.alignment.tie_break}")
            click.echo(f"  Output: {cfg.output.path}")
            return

        try:
            result, output_path = run_pipeline(cfg)
        except (ValueError, FileNotFoundError, FileExistsError) as e:
            raise click.ClickException(f"Pipeline failed: {e}") from e
        except KeyError as e:
            raise click.ClickException(f"Pipeline failed: {e.args[0]}") from e

        click.echo(f"min_distance: {result.min_distance:.6g}")
        click.echo(f"Result written to {output_path}")
