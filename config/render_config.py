"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class GrowthRenderConfig:
    output_width: int = 800
    output_height: int = 600
    background_color: Tuple[float, float, float, float] = (0.937, 0.929, 0.965, 1.0)  # #efedf6
    
    foreground_color: Tuple[float, float, float, float] = (0.945, 0.314, 0.376, 1.0)  # #F15060
    line_width: float = 12.0  # in source canvas units, scaled with the output
    
    fill_path: bool = True
    show_boundary: bool = True
    
    antialiasing: bool = True
