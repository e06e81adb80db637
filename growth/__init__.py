"""
Differential growth of a closed 2D path.

Nodes repel nearby nodes, attract their neighbours along the path and align
to the midpoint of those neighbours; stretched edges split and compressed
edges collapse, all inside a soft polygonal boundary.
"""

from .vector import Vector2D
from .geometry import distance, lerp, midpoint, regular_polygon, is_inside
from .spatial import NodeSpatialIndex
from .topology import connected_nodes, split_edges, prune_nodes
from .config import GrowthConfig, SimulationParameters
from .errors import GrowthError, ConfigurationError, DegenerateTopologyError
from .engine import GrowthEngine, StepResult
from .visualization import visualize_growth, animate_growth, plot_growth_statistics

__all__ = [
    'Vector2D',
    'distance',
    'lerp',
    'midpoint',
    'regular_polygon',
    'is_inside',
    'NodeSpatialIndex',
    'connected_nodes',
    'split_edges',
    'prune_nodes',
    'GrowthConfig',
    'SimulationParameters',
    'GrowthError',
    'ConfigurationError',
    'DegenerateTopologyError',
    'GrowthEngine',
    'StepResult',
    'visualize_growth',
    'animate_growth',
    'plot_growth_statistics'
]
