"""
Rendering Script

Generates high-quality growth animations from exported simulation data
using the Cairo-based renderer. Run main.py first.

Configuration is loaded from config/pipeline.json.
All paths are derived from the run name.
"""

import argparse
import os
from pathlib import Path

from config import load_config, GrowthRenderConfig
from rendering.exporters import load_growth_data
from rendering.growth_renderer import GrowthRenderer


def remove_if_exists(path: str):
    """Remove file if it exists to ensure fresh write."""
    p = Path(path)
    if p.exists():
        try:
            os.remove(p)
            print(f"Removed existing file: {path}")
        except OSError as e:
            print(f"Error removing {path}: {e}")


def render_growth(pipeline, output_format: str = 'gif', frame_skip: int = 1):
    """Render the growth animation and the final frame."""
    if not pipeline.growth_render_data_path.exists():
        raise FileNotFoundError(
            f"Growth render data not found at {pipeline.growth_render_data_path}. "
            f"Please run main.py first to generate the growth data."
        )

    print(f"Loading growth data from {pipeline.growth_render_data_path}...")
    data = load_growth_data(str(pipeline.growth_render_data_path))
    print(f"  Source resolution: {data['source_width']}x{data['source_height']}")
    print(f"  Frames: {len(data['frames'])}")

    aspect = data['source_height'] / data['source_width']
    render_config = GrowthRenderConfig(
        output_width=pipeline.render_size,
        output_height=int(round(pipeline.render_size * aspect))
    )
    print(f"Rendering at {render_config.output_width}x{render_config.output_height} with Cairo...")
    renderer = GrowthRenderer(render_config)

    output_path = str(pipeline.render_animation_path.with_suffix(f'.{output_format}'))
    remove_if_exists(output_path)
    renderer.render_animation(data, output_path, fps=pipeline.render_fps, frame_skip=frame_skip)

    renderer.save_frame(data, str(pipeline.render_frame_path))
    print(f"Saved final frame to {pipeline.render_frame_path}")
    return data


def main():
    parser = argparse.ArgumentParser(description="Render differential growth animations.")
    parser.add_argument(
        '--format',
        type=str,
        choices=['gif', 'mp4'],
        default='gif',
        help='Animation container (default: gif)'
    )
    parser.add_argument(
        '--frame-skip',
        type=int,
        default=1,
        help='Render every Nth recorded frame (default: 1)'
    )
    args = parser.parse_args()

    pipeline = load_config()
    pipeline.create_output_dirs()

    print(f"Rendering for: {pipeline.run_name}")
    print(f"Output: {pipeline.render_output_dir}")
    print()

    render_growth(pipeline, output_format=args.format, frame_skip=args.frame_skip)


if __name__ == '__main__':
    main()
