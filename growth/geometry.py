"""
Geometry helpers for the growth simulation.

All functions are pure and operate on Vector2D points.
"""

import math
from typing import List, Sequence

from .vector import Vector2D


def distance(a: Vector2D, b: Vector2D) -> float:
    return (b - a).magnitude


def lerp(a: Vector2D, b: Vector2D, t: float) -> Vector2D:
    """
    Linear interpolation from a towards b.

    t is not clamped: t < 0 moves away from b (used for repulsion),
    t > 1 overshoots past b.
    """
    return a + (b - a) * t


def midpoint(a: Vector2D, b: Vector2D) -> Vector2D:
    return (a + b) / 2


def regular_polygon(side_count: int, center_x: float, center_y: float, radius: float) -> List[Vector2D]:
    """
    Vertices of a regular polygon, first vertex at the top.

    Angles start at -pi/2 and increase by 2*pi/side_count, which runs
    clockwise on a y-down canvas.
    """
    if side_count < 3:
        raise ValueError(f"regular_polygon needs at least 3 sides, got {side_count}")

    offset = -math.pi / 2
    return [
        Vector2D(
            center_x + radius * math.cos(offset + math.pi * 2 * i / side_count),
            center_y + radius * math.sin(offset + math.pi * 2 * i / side_count),
        )
        for i in range(side_count)
    ]


def is_inside(point: Vector2D, polygon: Sequence[Vector2D]) -> bool:
    """
    Crossing-number containment test for a simple polygon.

    Points exactly on an edge get a fixed answer from the half-open
    comparison on y, so repeated calls always agree.
    """
    x, y = point.x, point.y
    inside = False
    n = len(polygon)
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y
        if (yi > y) != (yj > y):
            x_int = xi + (y - yi) * (xj - xi) / (yj - yi)
            if x < x_int:
                inside = not inside
        j = i
    return inside
