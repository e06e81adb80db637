"""
Unified configuration for the growth pipeline.

All output paths are derived from run_name.
This is the single source of truth for the simulation and rendering scripts.
"""

from dataclasses import dataclass, asdict, fields
from typing import Optional
from pathlib import Path
import json


@dataclass
class PipelineConfig:
    """
    Unified configuration for the growth pipeline.
    All output paths are derived from run_name.
    """
    
    # ==================== MAIN SETTING ====================
    run_name: str = 'differential_growth'
    
    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'
    
    # ==================== GROWTH SETTINGS ====================
    # Design-space values, see growth.config.GrowthConfig
    repulsion_force: float = 0.5
    attraction_force: float = 0.5
    alignment_force: float = 0.35
    brownian_motion_range: float = 0.005
    least_min_distance: float = 0.03
    repulsion_radius: float = 0.125
    max_distance: float = 0.1
    bounds_side_count: int = 5
    
    # Canvas
    width: int = 1600
    height: int = 1200
    
    max_iterations: int = 600
    max_nodes: Optional[int] = None
    
    # Every Nth iteration is kept for rendering
    frame_skip: int = 2
    
    # ==================== RENDERING SETTINGS ====================
    render_size: int = 800
    render_fps: int = 30
    
    # ==================== MISC ====================
    random_seed: Optional[int] = None
    profile: bool = False
    
    def __post_init__(self):
        if not isinstance(self.frame_skip, int) or self.frame_skip < 1:
            raise ValueError(f"frame_skip must be a positive integer, got {self.frame_skip!r}")
    
    # ==================== DERIVED PATHS ====================
    @property
    def growth_output_dir(self) -> Path:
        return Path(self.output_base) / 'growth'
    
    @property
    def render_output_dir(self) -> Path:
        return Path(self.output_base) / 'rendering'
    
    @property
    def growth_render_data_path(self) -> Path:
        return self.growth_output_dir / f'{self.run_name}_render_data.json'
    
    @property
    def growth_metadata_path(self) -> Path:
        return self.growth_output_dir / f'{self.run_name}_metadata.json'
    
    @property
    def growth_figure_path(self) -> Path:
        return self.growth_output_dir / f'{self.run_name}_path.png'
    
    @property
    def growth_stats_path(self) -> Path:
        return self.growth_output_dir / f'{self.run_name}_stats.png'
    
    @property
    def render_animation_path(self) -> Path:
        return self.render_output_dir / f'{self.run_name}_growth.gif'
    
    @property
    def render_frame_path(self) -> Path:
        return self.render_output_dir / f'{self.run_name}_final.png'
    
    # ==================== DIRECTORY CREATION ====================
    def create_output_dirs(self):
        """Create all output directories."""
        self.growth_output_dir.mkdir(parents=True, exist_ok=True)
        self.render_output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/pipeline.json') -> PipelineConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return PipelineConfig()
    
    with open(config_path, 'r') as f:
        data = json.load(f)
    
    known = {f.name for f in fields(PipelineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        print(f"Warning: ignoring unknown config keys in {config_path}: {', '.join(unknown)}")
    
    return PipelineConfig(**{k: v for k, v in data.items() if k in known})


def save_config(config: PipelineConfig, path: str = 'config/pipeline.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    
    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)
    
    print(f"Saved config to {config_path}")
