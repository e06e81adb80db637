"""
Data exporters to convert simulation state into renderer-friendly format.
Keeps rendering module decoupled from simulation code.
"""

import json
from pathlib import Path
from typing import Any, Dict, List


def collect_frame(engine) -> Dict[str, Any]:
    """Snapshot the engine's current path as one frame record."""
    return {
        "iteration": engine.iteration,
        "path": engine.current_path().tolist()
    }


def export_growth_data(engine, frames: List[Dict[str, Any]], output_path: str) -> Dict[str, Any]:
    """
    Export recorded growth frames to JSON format for rendering.
    
    Format:
    {
        "source_width": int,
        "source_height": int,
        "boundary": [[x, y], ...],
        "frames": [
            {
                "iteration": int,
                "path": [[x, y], ...]
            }
        ]
    }
    """
    data = {
        "source_width": engine.config.width,
        "source_height": engine.config.height,
        "boundary": engine.current_boundary().tolist(),
        "frames": frames
    }
    
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f)
    
    return data


def load_growth_data(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        data = json.load(f)
    
    for key in ("source_width", "source_height", "frames"):
        if key not in data:
            raise ValueError(f"growth data at {path} is missing '{key}'")
    
    return data
