"""
2D point type used for path nodes, boundary vertices and index payloads.
"""

import math
import numpy as np


class Vector2D:
    __slots__ = ('x', 'y')
    
    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)
    
    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)
    
    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x - other.x, self.y - other.y)
    
    def __mul__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x * scalar, self.y * scalar)
    
    def __truediv__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x / scalar, self.y / scalar)
    
    def __repr__(self) -> str:
        return f"Vector2D({self.x:.2f}, {self.y:.2f})"
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y
    
    def isclose(self, other: 'Vector2D', tol: float = 1e-9) -> bool:
        return bool(np.isclose(self.x, other.x, atol=tol) and np.isclose(self.y, other.y, atol=tol))
    
    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)
    
    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)
    
    def to_tuple(self) -> tuple:
        return (self.x, self.y)
    
    @classmethod
    def from_tuple(cls, t) -> 'Vector2D':
        return cls(t[0], t[1])
    
    def copy(self) -> 'Vector2D':
        return Vector2D(self.x, self.y)


def as_array(points) -> np.ndarray:
    """Pack a sequence of points into a read-only (N, 2) float64 array."""
    arr = np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)
    arr.setflags(write=False)
    return arr
