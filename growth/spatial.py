"""
Spatial partitioning for radius-bounded neighbour queries.
Uses scipy's KDTree, rebuilt once per simulation step.
"""

import numpy as np
from scipy.spatial import cKDTree
from typing import List, Optional, Sequence

from .vector import Vector2D
from .profiling import profile


class NodeSpatialIndex:
    """KD-Tree based spatial index over path nodes, addressed by sequence index."""

    def __init__(self):
        self._tree: Optional[cKDTree] = None
        self._positions: Optional[np.ndarray] = None

    @profile
    def rebuild(self, points: Sequence[Vector2D]):
        if len(points) == 0:
            self.clear()
            return

        self._positions = np.array([[p.x, p.y] for p in points], dtype=np.float64)
        self._tree = cKDTree(self._positions)

    def clear(self):
        self._tree = None
        self._positions = None

    def query_radius(self, point: Vector2D, radius: float, exclude: Optional[int] = None) -> List[int]:
        """
        Indices of every indexed point within `radius` (inclusive) of `point`.

        `exclude` drops one index from the result; the engine passes the
        queried node's own index so a node never repels itself.
        """
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")
        if self._tree is None:
            return []

        hits = self._tree.query_ball_point([point.x, point.y], radius)
        return sorted(i for i in hits if i != exclude)

    def __len__(self) -> int:
        return 0 if self._positions is None else len(self._positions)
