"""Geometry helpers: distance, lerp, midpoint, regular_polygon, is_inside."""

from __future__ import annotations

import math

import numpy as np
import pytest

from growth.geometry import distance, is_inside, lerp, midpoint, regular_polygon
from growth.vector import Vector2D


PAIRS = [
    (Vector2D(0.0, 0.0), Vector2D(3.0, 4.0)),
    (Vector2D(-2.5, 7.0), Vector2D(10.25, -3.5)),
    (Vector2D(1e6, 1e-6), Vector2D(-1e6, 2.0)),
    (Vector2D(0.1, 0.2), Vector2D(0.1, 0.2)),
]


@pytest.mark.parametrize("a, b", PAIRS)
def test_distance_is_symmetric(a: Vector2D, b: Vector2D) -> None:
    assert distance(a, b) == distance(b, a)


@pytest.mark.parametrize("a, _b", PAIRS)
def test_distance_to_self_is_zero(a: Vector2D, _b: Vector2D) -> None:
    assert distance(a, a) == 0.0


def test_distance_matches_pythagoras() -> None:
    assert distance(Vector2D(0.0, 0.0), Vector2D(3.0, 4.0)) == 5.0


@pytest.mark.parametrize("a, b", PAIRS)
def test_lerp_endpoints(a: Vector2D, b: Vector2D) -> None:
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0).isclose(b, tol=1e-6)


def test_lerp_negative_t_extrapolates_away() -> None:
    """t < 0 moves away from the target without clamping."""
    a = Vector2D(10.0, 0.0)
    b = Vector2D(20.0, 0.0)

    out = lerp(a, b, -0.5)
    assert out == Vector2D(5.0, 0.0)

    assert lerp(a, b, 2.0) == Vector2D(30.0, 0.0)


def test_midpoint() -> None:
    assert midpoint(Vector2D(0.0, 0.0), Vector2D(4.0, -2.0)) == Vector2D(2.0, -1.0)


@pytest.mark.parametrize("n", [3, 4, 5, 6, 12])
def test_regular_polygon_vertices_on_circle(n: int) -> None:
    cx, cy, r = 400.0, 300.0, 150.0
    pts = regular_polygon(n, cx, cy, r)

    assert len(pts) == n
    for p in pts:
        assert math.isclose(distance(p, Vector2D(cx, cy)), r, rel_tol=1e-12)


@pytest.mark.parametrize("n", [3, 5, 8])
def test_regular_polygon_evenly_spaced(n: int) -> None:
    cx, cy = 10.0, -4.0
    pts = regular_polygon(n, cx, cy, 2.0)

    angles = np.array([math.atan2(p.y - cy, p.x - cx) for p in pts])
    steps = np.mod(np.diff(np.concatenate([angles, angles[:1]])), 2 * math.pi)
    np.testing.assert_allclose(steps, 2 * math.pi / n, rtol=0.0, atol=1e-9)


def test_regular_polygon_starts_at_top() -> None:
    """The first vertex sits straight above the centre (y decreases upwards)."""
    first = regular_polygon(5, 0.0, 0.0, 1.0)[0]
    assert math.isclose(first.x, 0.0, abs_tol=1e-12)
    assert math.isclose(first.y, -1.0, abs_tol=1e-12)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_regular_polygon_rejects_degenerate_side_count(n: int) -> None:
    with pytest.raises(ValueError):
        regular_polygon(n, 0.0, 0.0, 1.0)


def test_is_inside_regular_polygon() -> None:
    pentagon = regular_polygon(5, 0.0, 0.0, 10.0)

    assert is_inside(Vector2D(0.0, 0.0), pentagon)
    assert is_inside(Vector2D(3.0, -2.0), pentagon)
    assert not is_inside(Vector2D(11.0, 0.0), pentagon)
    assert not is_inside(Vector2D(0.0, -10.5), pentagon)


def test_is_inside_non_convex_polygon() -> None:
    """An L shape: the notch is outside even though it is inside the bounding box."""
    l_shape = [
        Vector2D(0.0, 0.0),
        Vector2D(4.0, 0.0),
        Vector2D(4.0, 1.0),
        Vector2D(1.0, 1.0),
        Vector2D(1.0, 4.0),
        Vector2D(0.0, 4.0),
    ]

    assert is_inside(Vector2D(0.5, 3.0), l_shape)
    assert is_inside(Vector2D(3.0, 0.5), l_shape)
    assert not is_inside(Vector2D(3.0, 3.0), l_shape)


def test_is_inside_is_deterministic_on_edges() -> None:
    square = [Vector2D(0.0, 0.0), Vector2D(2.0, 0.0), Vector2D(2.0, 2.0), Vector2D(0.0, 2.0)]
    on_edge = Vector2D(1.0, 0.0)

    results = {is_inside(on_edge, square) for _ in range(5)}
    assert len(results) == 1
