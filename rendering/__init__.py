"""
Rendering module for high-resolution output of growth simulations.
Uses Cairo for resolution-independent vector graphics; import the renderer
from rendering.growth_renderer.
"""

from config.render_config import GrowthRenderConfig
from .exporters import (
    collect_frame,
    export_growth_data,
    load_growth_data
)

__all__ = [
    'GrowthRenderConfig',
    'collect_frame',
    'export_growth_data',
    'load_growth_data'
]
