"""
Growth renderer using Cairo.
Draws the path as a filled closed shape and the boundary as a stroked
outline, at any output resolution.
"""

import cairo
import numpy as np
import imageio
import multiprocessing
from tqdm import tqdm
from typing import Any, Dict, Optional, Sequence
from pathlib import Path

from config.render_config import GrowthRenderConfig
from .base import Renderer


def render_growth_frame_wrapper(args):
    config, data, frame_index = args
    renderer = GrowthRenderer(config)
    return renderer.render_frame(data, frame_index=frame_index)


class GrowthRenderer(Renderer):
    def __init__(self, config: GrowthRenderConfig = None):
        super().__init__(config or GrowthRenderConfig())
    
    def _trace_closed(self, ctx: cairo.Context, points: Sequence, scale_x: float, scale_y: float):
        for idx, (x, y) in enumerate(points):
            if idx == 0:
                ctx.move_to(x * scale_x, y * scale_y)
            else:
                ctx.line_to(x * scale_x, y * scale_y)
        ctx.close_path()
    
    def render_frame(self, data: Dict[str, Any], frame_index: Optional[int] = None) -> np.ndarray:
        """
        Render one frame of exported growth data (last frame by default).
        """
        surface, ctx = self._create_surface()
        
        scale_x, scale_y = self._compute_scale(data['source_width'], data['source_height'])
        frames = data['frames']
        frame = frames[-1 if frame_index is None else frame_index]
        
        r, g, b, a = self.config.foreground_color
        ctx.set_source_rgba(r, g, b, a)
        ctx.set_line_width(self.config.line_width * min(scale_x, scale_y))
        ctx.set_line_join(cairo.LINE_JOIN_ROUND)
        
        path = frame['path']
        if len(path) >= 3:
            self._trace_closed(ctx, path, scale_x, scale_y)
            if self.config.fill_path:
                ctx.fill()
            else:
                ctx.stroke()
        
        boundary = data.get('boundary', [])
        if self.config.show_boundary and len(boundary) >= 3:
            self._trace_closed(ctx, boundary, scale_x, scale_y)
            ctx.stroke()
        
        return self._surface_to_numpy(surface)
    
    def save_frame(self, data: Dict[str, Any], output_path: str, frame_index: Optional[int] = None):
        frame = self.render_frame(data, frame_index=frame_index)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)
    
    def render_animation(self, data: Dict[str, Any], output_path: str,
                         fps: int = 30, frame_skip: int = 1, processes: Optional[int] = None):
        """
        Render every recorded frame (or every Nth) into an animation file.
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        
        indices = list(range(0, len(data['frames']), frame_skip))
        if indices and indices[-1] != len(data['frames']) - 1:
            indices.append(len(data['frames']) - 1)
        
        tasks = [(self.config, data, idx) for idx in indices]
        
        num_cores = processes or max(1, multiprocessing.cpu_count() - 1)
        print(f"Rendering with {num_cores} cores...")
        
        with multiprocessing.Pool(processes=num_cores) as pool:
            frames = list(tqdm(pool.imap(render_growth_frame_wrapper, tasks),
                               total=len(tasks), desc="Rendering growth frames"))
        
        imageio.mimsave(output_path, frames, fps=fps)
        print(f"  Saved animation: {output_path}")
