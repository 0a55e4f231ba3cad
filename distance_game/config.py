"""
Configuration management for the Distance Game.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

import yaml


@dataclass
class DataConfig:
    """Data source configuration."""
    source: str = "inline"  # inline, csv
    path: Optional[str] = None
    inline_csv: Optional[str] = None  # None uses the built-in sample


@dataclass
class ChartConfig:
    """Scatter chart appearance."""
    figsize: List[float] = field(default_factory=lambda: [8.0, 8.0])
    dpi: int = 150
    tick_step: float = 5.0

    # Regular players
    player_color: str = "#818cf8"
    player_size: float = 100.0

    # Rank 1
    winner_color: str = "#ffd700"
    winner_size: float = 225.0

    label_color: str = "#1f2937"
    grid_alpha: float = 0.2


@dataclass
class ReportConfig:
    """Report generation settings."""
    output_dir: str = "game_reports"
    include_chart: bool = True
    formats: List[str] = field(default_factory=lambda: ["html", "json", "csv"])


@dataclass
class DistanceGameConfig:
    """Master configuration for the Distance Game."""
    data: DataConfig = field(default_factory=DataConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    # General settings
    verbose: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_yaml(cls, path: str) -> "DistanceGameConfig":
        """Load configuration from YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return cls._from_dict(data or {})

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "DistanceGameConfig":
        """Create config from dictionary."""
        config = cls()

        if 'data' in data:
            config.data = DataConfig(**data['data'])
        if 'chart' in data:
            config.chart = ChartConfig(**data['chart'])
        if 'report' in data:
            config.report = ReportConfig(**data['report'])

        for key in ['verbose', 'log_file']:
            if key in data:
                setattr(config, key, data[key])

        return config

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    def to_yaml(self, path: str) -> None:
        """Save configuration to YAML file."""
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
