"""
Growth Simulation Script

Runs the differential growth simulation and records frames for rendering.

Configuration is loaded from config/pipeline.json.
All output paths are derived from the run name.

Outputs:
- Render data (.json) for high-resolution rendering
- Final path visualization (.png)
- Growth statistics (.png)
- Metadata (.json)
"""

import json

from config import load_config
from growth import GrowthConfig, GrowthEngine, visualize_growth, plot_growth_statistics
from rendering.exporters import collect_frame, export_growth_data


def main():
    pipeline = load_config()
    pipeline.create_output_dirs()

    growth_config = GrowthConfig.from_pipeline(pipeline)

    print(f"Running differential growth: {pipeline.run_name}")
    print(f"  Max iterations: {growth_config.max_iterations}")
    print(f"  Boundary sides: {growth_config.bounds_side_count}")
    print()

    engine = GrowthEngine(growth_config)
    engine.begin_growth()

    frames = [collect_frame(engine)]
    node_history = [engine.node_count]

    def record(engine, iteration):
        node_history.append(engine.node_count)
        if iteration % pipeline.frame_skip == 0:
            frames.append(collect_frame(engine))

    engine.grow(callback=record)
    if frames[-1]['iteration'] != engine.iteration:
        frames.append(collect_frame(engine))

    visualize_growth(engine, save_path=str(pipeline.growth_figure_path), show=False)
    plot_growth_statistics(engine, node_history,
                           save_path=str(pipeline.growth_stats_path), show=False)

    export_growth_data(engine, frames, str(pipeline.growth_render_data_path))
    print(f"Exported render data to: {pipeline.growth_render_data_path}")

    metadata = {
        'run_name': pipeline.run_name,
        'repulsion_force': growth_config.repulsion_force,
        'attraction_force': growth_config.attraction_force,
        'alignment_force': growth_config.alignment_force,
        'brownian_motion_range': growth_config.brownian_motion_range,
        'least_min_distance': growth_config.least_min_distance,
        'repulsion_radius': growth_config.repulsion_radius,
        'max_distance': growth_config.max_distance,
        'bounds_side_count': growth_config.bounds_side_count,
        'max_nodes': growth_config.max_nodes,
        'random_seed': growth_config.random_seed,
        'iterations': engine.iteration,
        'num_nodes': engine.node_count,
        'node_limit_reached': engine.node_limit_reached,
        'num_frames': len(frames),
        'render_data_path': str(pipeline.growth_render_data_path)
    }
    with open(pipeline.growth_metadata_path, 'w') as f:
        json.dump(metadata, f, indent=2)
    print(f"Saved metadata to {pipeline.growth_metadata_path}")

    print("\nGrowth complete!")
    print(f"  Figure: {pipeline.growth_figure_path}")
    print(f"  Render data: {pipeline.growth_render_data_path}")
    print(f"\nTo render a high-resolution animation run:")
    print(f"  python render.py")


if __name__ == '__main__':
    main()
