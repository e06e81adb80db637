"""
GrowthEngine - owns the growing path and the fixed boundary, and advances
the differential growth simulation one step at a time.

Each step rebuilds the spatial index, applies forces node by node in
sequence order (each node sees the already-moved positions of the nodes
before it), then splits stretched edges and prunes compressed ones.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .config import GrowthConfig, SimulationParameters
from .errors import ConfigurationError, DegenerateTopologyError
from .geometry import distance, is_inside, lerp, midpoint, regular_polygon
from .profiling import profile, profile_block, profiling_session
from .spatial import NodeSpatialIndex
from .topology import MIN_CYCLE_NODES, connected_nodes, prune_nodes, split_edges
from .vector import Vector2D, as_array


@dataclass(frozen=True)
class StepResult:
    iteration: int
    node_count: int
    splits: int
    prunes: int
    node_limit_reached: bool


class GrowthEngine:
    def __init__(self, config: Optional[GrowthConfig] = None):
        self.config = config or GrowthConfig()
        self.config.validate()
        self.params: SimulationParameters = self.config.scaled()

        self.spatial_index = NodeSpatialIndex()
        self.path: Optional[List[Vector2D]] = None
        self.boundary: List[Vector2D] = []
        self.center = Vector2D(self.params.center_x, self.params.center_y)
        self.iteration = 0
        self.rng = np.random.default_rng(self.config.random_seed)
        self._limit_warned = False

    def reconfigure(self, config: GrowthConfig):
        """Swap in a new configuration. The current run is discarded."""
        config.validate()
        self.config = config
        self.params = config.scaled()
        self.center = Vector2D(self.params.center_x, self.params.center_y)
        self.reset()

    def reset(self):
        """Discard the run. The random source restarts from random_seed."""
        self.path = None
        self.boundary = []
        self.spatial_index.clear()
        self.iteration = 0
        self.rng = np.random.default_rng(self.config.random_seed)
        self._limit_warned = False

    def _build_boundary(self):
        p = self.params
        try:
            self.boundary = regular_polygon(
                self.config.bounds_side_count, p.center_x, p.center_y, p.bounds_radius
            )
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

    def begin_growth(self):
        """Start a fresh run: build the boundary and the seed polygon."""
        self.reset()
        self._build_boundary()
        p = self.params
        try:
            self.path = regular_polygon(
                self.config.seed_side_count, p.center_x, p.center_y, p.seed_radius
            )
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

        print(f"Initialized growth:")
        print(f"  Canvas: {self.config.width}x{self.config.height}")
        print(f"  Boundary sides: {len(self.boundary)}")
        print(f"  Seed nodes: {len(self.path)}")

    def load_path(self, points: Sequence):
        """
        Start a fresh run from caller-supplied points instead of the seed polygon.

        Accepts Vector2D or (x, y) pairs.
        """
        nodes = [p.copy() if isinstance(p, Vector2D) else Vector2D.from_tuple(p) for p in points]
        if len(nodes) < MIN_CYCLE_NODES:
            raise DegenerateTopologyError(
                f"a growing path needs at least {MIN_CYCLE_NODES} nodes, got {len(nodes)}"
            )
        if not all(node.is_finite for node in nodes):
            raise ValueError("path points must be finite")

        self.reset()
        self._build_boundary()
        self.path = nodes
        print(f"Loaded path with {len(nodes)} nodes")

    def step_growth(self) -> StepResult:
        """Advance the simulation by one iteration."""
        if self.path is None:
            raise RuntimeError("begin_growth() must be called before step_growth()")

        with profiling_session(self.config.profile):
            return self._step(self.path)

    def _step(self, nodes: List[Vector2D]) -> StepResult:
        with profile_block('GrowthEngine.rebuild_index'):
            self.spatial_index.rebuild(nodes)

        self._apply_forces(nodes)

        splits = split_edges(nodes, self.params.max_distance, self.config.max_nodes)
        prunes = prune_nodes(nodes, self.params.least_min_distance)

        self.iteration += 1
        limit_reached = self.node_limit_reached
        if limit_reached and not self._limit_warned:
            print(f"Warning: node limit of {self.config.max_nodes} reached at iteration "
                  f"{self.iteration}; edges are no longer split")
            self._limit_warned = True

        return StepResult(
            iteration=self.iteration,
            node_count=len(nodes),
            splits=splits,
            prunes=prunes,
            node_limit_reached=limit_reached,
        )

    @profile
    def _apply_forces(self, nodes: List[Vector2D]):
        for idx in range(len(nodes)):
            self._apply_brownian_motion(nodes, idx)
            self._apply_repulsion(nodes, idx)
            self._apply_attraction(nodes, idx)
            self._apply_alignment(nodes, idx)
            self._keep_in_bounds(nodes, idx)

    def _apply_brownian_motion(self, nodes: List[Vector2D], idx: int):
        half = self.params.brownian_motion_range / 2
        node = nodes[idx]
        dx = self.rng.uniform(-half, half)
        dy = self.rng.uniform(-half, half)
        nodes[idx] = node + Vector2D(dx, dy)

    def _apply_repulsion(self, nodes: List[Vector2D], idx: int):
        """Push the node away from every neighbour inside the repulsion radius, one push each."""
        node = nodes[idx]
        neighbours = self.spatial_index.query_radius(node, self.params.repulsion_radius, exclude=idx)
        for j in neighbours:
            node = lerp(node, nodes[j], -self.params.repulsion_force)
        nodes[idx] = node

    def _apply_attraction(self, nodes: List[Vector2D], idx: int):
        node = nodes[idx]
        for neighbour in connected_nodes(nodes, idx):
            if distance(node, neighbour) > self.params.least_min_distance:
                node = lerp(node, neighbour, self.params.attraction_force)
        nodes[idx] = node

    def _apply_alignment(self, nodes: List[Vector2D], idx: int):
        previous_node, next_node = connected_nodes(nodes, idx)
        mid = midpoint(previous_node, next_node)
        nodes[idx] = lerp(nodes[idx], mid, self.params.alignment_force)

    def _keep_in_bounds(self, nodes: List[Vector2D], idx: int):
        if not is_inside(nodes[idx], self.boundary):
            nodes[idx] = lerp(nodes[idx], self.center, self.config.containment_pull)

    def grow(self, callback: Optional[Callable[['GrowthEngine', int], None]] = None) -> int:
        """
        Run step_growth until max_iterations.
        Optional callback is called after each iteration with (engine, iteration).
        Returns the total number of iterations.
        """
        if self.path is None:
            self.begin_growth()

        print(f"Starting growth with {len(self.path)} nodes...")

        while self.iteration < self.config.max_iterations:
            self.step_growth()

            if callback:
                callback(self, self.iteration)

            if self.iteration % 50 == 0:
                print(f"  Iteration {self.iteration}: {len(self.path)} nodes")

        print(f"Growth complete after {self.iteration} iterations")
        print(f"  Final nodes: {len(self.path)}")

        return self.iteration

    def current_path(self) -> np.ndarray:
        """Read-only (N, 2) snapshot of the growing path."""
        if self.path is None:
            return as_array([])
        return as_array(self.path)

    def current_boundary(self) -> np.ndarray:
        """Read-only (M, 2) snapshot of the boundary polygon."""
        return as_array(self.boundary)

    @property
    def node_count(self) -> int:
        return 0 if self.path is None else len(self.path)

    @property
    def node_limit_reached(self) -> bool:
        return self.config.max_nodes is not None and self.node_count >= self.config.max_nodes

    def edge_lengths(self) -> List[float]:
        """Length of every edge of the closed path, edge i ending at node i."""
        if self.path is None:
            return []
        return [distance(self.path[i - 1], self.path[i]) for i in range(len(self.path))]
