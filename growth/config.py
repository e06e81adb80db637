"""
Configuration for the differential growth simulation.

Distance-like values are design-space fractions of the canvas width; they are
converted to canvas units as `width * value / scale`. Forces are scaled by
`force_multiplier`.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class SimulationParameters:
    """World-space values derived from a GrowthConfig."""
    repulsion_force: float
    attraction_force: float
    alignment_force: float
    brownian_motion_range: float
    least_min_distance: float
    repulsion_radius: float
    max_distance: float
    center_x: float
    center_y: float
    bounds_radius: float
    seed_radius: float


@dataclass(frozen=True)
class GrowthConfig:
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
    scale: float = 12.0
    force_multiplier: float = 0.5

    # Seed shape and containment
    seed_side_count: int = 6
    containment_pull: float = 0.01

    # Optional node ceiling (None = unbounded growth)
    max_nodes: Optional[int] = None
    max_iterations: int = 1000

    random_seed: Optional[int] = None
    profile: bool = False

    def validate(self):
        """Raise ConfigurationError if any value is out of range."""
        for name in ('repulsion_force', 'attraction_force', 'alignment_force'):
            _check_range(name, getattr(self, name), 0.0, 1.0)
        _check_range('brownian_motion_range', self.brownian_motion_range, 0.0, 0.1)
        for name in ('least_min_distance', 'repulsion_radius', 'max_distance'):
            _check_range(name, getattr(self, name), 0.0, 1.0)
        if self.max_distance <= 0:
            raise ConfigurationError("max_distance must be greater than 0")

        for name in ('bounds_side_count', 'seed_side_count'):
            _check_side_count(name, getattr(self, name))

        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"canvas size must be positive, got {self.width}x{self.height}")
        _check_positive('scale', self.scale)
        _check_positive('force_multiplier', self.force_multiplier)
        _check_range('containment_pull', self.containment_pull, 0.0, 1.0)

        if self.max_nodes is not None and self.max_nodes < self.seed_side_count:
            raise ConfigurationError(
                f"max_nodes ({self.max_nodes}) is smaller than the seed polygon ({self.seed_side_count})"
            )
        if self.max_iterations < 0:
            raise ConfigurationError("max_iterations must be non-negative")

    def scaled(self) -> SimulationParameters:
        w = self.width
        return SimulationParameters(
            repulsion_force=self.repulsion_force * self.force_multiplier,
            attraction_force=self.attraction_force * self.force_multiplier,
            alignment_force=self.alignment_force * self.force_multiplier,
            brownian_motion_range=w * self.brownian_motion_range / self.scale,
            least_min_distance=w * self.least_min_distance / self.scale,
            repulsion_radius=w * self.repulsion_radius / self.scale,
            max_distance=w * self.max_distance / self.scale,
            center_x=w / 2,
            center_y=self.height / 2,
            bounds_radius=w / 4,
            seed_radius=w / 12,
        )

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'GrowthConfig':
        """Create GrowthConfig from PipelineConfig."""
        return cls(
            repulsion_force=pipeline_config.repulsion_force,
            attraction_force=pipeline_config.attraction_force,
            alignment_force=pipeline_config.alignment_force,
            brownian_motion_range=pipeline_config.brownian_motion_range,
            least_min_distance=pipeline_config.least_min_distance,
            repulsion_radius=pipeline_config.repulsion_radius,
            max_distance=pipeline_config.max_distance,
            bounds_side_count=pipeline_config.bounds_side_count,
            width=pipeline_config.width,
            height=pipeline_config.height,
            max_nodes=pipeline_config.max_nodes,
            max_iterations=pipeline_config.max_iterations,
            random_seed=pipeline_config.random_seed,
            profile=pipeline_config.profile,
        )


def _check_range(name: str, value: float, low: float, high: float):
    if not math.isfinite(value) or value < low or value > high:
        raise ConfigurationError(f"{name} must be in [{low}, {high}], got {value}")


def _check_positive(name: str, value: float):
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")


def _check_side_count(name: str, value: int):
    # bool is a subclass of int
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 3:
        raise ConfigurationError(f"{name} must be at least 3, got {value}")
