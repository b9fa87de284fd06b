"""
Configuration schemas for the dtwpath YAML-based pipeline.

Provides type-safe, validated configuration classes using dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from pathlib import Path
import yaml

from .core.path import TIE_BREAK_POLICIES, DEFAULT_TIE_BREAK
from .distances.pointwise import available_distances


@dataclass
class SequenceConfig:
    """One input sequence: read from a file or generated."""
    path: Optional[str] = None
    column: Optional[str] = None
    generator: Optional[str] = None
    length: int = 12
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate sequence configuration."""
        if (self.path is None) == (self.generator is None):
            raise ValueError("Exactly one of path or generator is required")

        valid_generator = {"sine", "cosine", "random_walk"}
        if self.generator is not None and self.generator not in valid_generator:
            raise ValueError(f"generator must be one of {valid_generator}, got {self.generator}")

        if self.length < 2:
            raise ValueError(f"length must be >= 2, got {self.length}")


@dataclass
class AlignmentConfig:
    """DTW settings."""
    distance: str = "absolute"
    tie_break: str = DEFAULT_TIE_BREAK

    def __post_init__(self):
        """Validate alignment configuration."""
        valid_distance = set(available_distances())
        if self.distance not in valid_distance:
            raise ValueError(f"distance must be one of {valid_distance}, got {self.distance}")

        valid_tie_break = set(TIE_BREAK_POLICIES)
        if self.tie_break not in valid_tie_break:
            raise ValueError(f"tie_break must be one of {valid_tie_break}, got {self.tie_break}")


@dataclass
class OutputConfig:
    """Output configuration."""
    format: str = "json"
    path: str = "results/alignment.json"
    overwrite: bool = True
    forward: bool = False

    def __post_init__(self):
        """Validate output configuration."""
        valid_format = {"json", "csv"}
        if self.format not in valid_format:
            raise ValueError(f"format must be one of {valid_format}, got {self.format}")


@dataclass
class PlotConfig:
    """Rendering configuration."""
    enabled: bool = False
    directory: str = "results/plots"
    kinds: List[str] = field(
        default_factory=lambda: ["sequences", "heatmap", "surface", "stacked", "contour"]
    )

    def __post_init__(self):
        """Validate plot configuration."""
        valid_kinds = {"sequences", "heatmap", "surface", "stacked", "contour"}
        unknown = set(self.kinds) - valid_kinds
        if unknown:
            raise ValueError(f"kinds must be a subset of {valid_kinds}, got unknown {sorted(unknown)}")


@dataclass
class PipelineConfig:
    """Complete pipeline configuration."""
    s: SequenceConfig
    t: SequenceConfig
    alignment: AlignmentConfig = field(default_factory=AlignmentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    plots: PlotConfig = field(default_factory=PlotConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PipelineConfig:
        """Create PipelineConfig from dictionary (e.g., from YAML)."""
        return cls(
            s=SequenceConfig(**data['s']),
            t=SequenceConfig(**data['t']),
            alignment=AlignmentConfig(**(data.get('alignment') or {})),
            output=OutputConfig(**(data.get('output') or {})),
            plots=PlotConfig(**(data.get('plots') or {})),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> PipelineConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        # Validate required sections
        required = ['s', 't']
        for section in required:
            if section not in data:
                raise ValueError(f"Missing required section: {section}")

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        from dataclasses import asdict
        return asdict(self)
