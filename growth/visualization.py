"""
Visualization utilities for differential growth.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon
from matplotlib.animation import FuncAnimation
from typing import List, Optional, Tuple
from pathlib import Path

from .engine import GrowthEngine
from .config import GrowthConfig

FOREGROUND = '#F15060'
BACKGROUND = '#efedf6'


def _setup_axes(ax, config: GrowthConfig):
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(0, config.width)
    ax.set_ylim(config.height, 0)
    ax.set_aspect('equal')
    ax.axis('off')


def visualize_growth(
    engine: GrowthEngine,
    show_boundary: bool = True,
    show_nodes: bool = False,
    path_color: str = FOREGROUND,
    figsize: Tuple[int, int] = (16, 12),
    save_path: Optional[str] = None,
    show: bool = True
):
    """Draw the current path as a filled shape inside its boundary."""
    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(BACKGROUND)
    _setup_axes(ax, engine.config)

    path = engine.current_path()
    if len(path) >= 3:
        ax.add_patch(Polygon(path, closed=True, facecolor=path_color,
                             edgecolor=path_color, linewidth=2, joinstyle='round'))

    if show_boundary:
        boundary = engine.current_boundary()
        if len(boundary) >= 3:
            ax.add_patch(Polygon(boundary, closed=True, fill=False,
                                 edgecolor=path_color, linewidth=2))

    if show_nodes and len(path) > 0:
        ax.scatter(path[:, 0], path[:, 1], c='black', s=2)

    ax.set_title(f'Iteration: {engine.iteration}  Nodes: {engine.node_count}')
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=BACKGROUND, edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def animate_growth(
    config: GrowthConfig,
    interval: int = 50,
    path_color: str = FOREGROUND,
    figsize: Tuple[int, int] = (16, 12),
    save_path: Optional[str] = None,
    frame_skip: int = 1,
    show: bool = True
) -> FuncAnimation:
    """
    Run a fresh simulation and animate it.

    frame_skip: Only record every Nth iteration. Higher = faster, fewer frames.
    """
    engine = GrowthEngine(config)
    engine.begin_growth()

    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(BACKGROUND)
    _setup_axes(ax, config)

    ax.add_patch(Polygon(engine.current_boundary(), closed=True, fill=False,
                         edgecolor=path_color, linewidth=2))
    path_patch = Polygon(engine.current_path(), closed=True,
                         facecolor=path_color, edgecolor=path_color, joinstyle='round')
    ax.add_patch(path_patch)

    title = ax.set_title('Iteration: 0')

    frames_data = []

    def collect_frame():
        frames_data.append({
            'path': engine.current_path(),
            'iteration': engine.iteration
        })

    collect_frame()

    while engine.iteration < config.max_iterations:
        engine.step_growth()
        if engine.iteration % frame_skip == 0:
            collect_frame()

    collect_frame()

    print(f"Collected {len(frames_data)} frames for animation")

    def update(frame_idx):
        data = frames_data[frame_idx]
        path_patch.set_xy(data['path'])
        title.set_text(f"Iteration: {data['iteration']}  Nodes: {len(data['path'])}")
        return [path_patch]

    anim = FuncAnimation(
        fig, update,
        frames=len(frames_data),
        interval=interval,
        blit=False,
        repeat=True
    )

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        print(f"Saving animation ({len(frames_data)} frames)...")
        anim.save(save_path, writer='pillow', fps=20)
        print(f"Saved animation to {save_path}")

    if show:
        plt.show()
    return anim


def plot_growth_statistics(
    engine: GrowthEngine,
    node_history: Optional[List[int]] = None,
    save_path: Optional[str] = None,
    show: bool = True
):
    """Plot node count over time and the current edge-length distribution."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    if node_history:
        axes[0].plot(np.arange(len(node_history)), node_history, color=FOREGROUND)
    axes[0].set_xlabel('Iteration')
    axes[0].set_ylabel('Nodes')
    axes[0].set_title('Path Size Over Time')

    edge_lengths = engine.edge_lengths()
    axes[1].hist(edge_lengths, bins=30, color=FOREGROUND, edgecolor='black')
    axes[1].axvline(engine.params.max_distance, color='black', linestyle='--', label='split')
    axes[1].axvline(engine.params.least_min_distance, color='gray', linestyle=':', label='prune')
    axes[1].set_xlabel('Edge Length')
    axes[1].set_ylabel('Count')
    axes[1].set_title('Edge Length Distribution')
    axes[1].legend()

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
