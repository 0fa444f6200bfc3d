"""Screen-space vector helpers for directional resolution."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from focusnav.api.navigation import NavigationDirection, Vec2

Vector = NDArray[np.float64]

# Cone threshold never reaches cos(180°), so candidates directly behind are excluded.
MAX_REQUIRED_COS = 0.9999999
NORMALIZE_EPSILON = 1e-5

_SCREEN_AXES: dict[NavigationDirection, Vec2] = {
    NavigationDirection.UP: (0.0, 1.0),
    NavigationDirection.DOWN: (0.0, -1.0),
    NavigationDirection.LEFT: (-1.0, 0.0),
    NavigationDirection.RIGHT: (1.0, 0.0),
}


def as_vector(point: Vec2 | Vector) -> Vector:
    """Convert a host point into a float64 vector."""
    return np.asarray(point, dtype=np.float64).reshape(2)


def as_points(points: list[Vec2] | tuple[Vec2, ...]) -> NDArray[np.float64]:
    """Stack host points into an ``(n, 2)`` array."""
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def normalized(vector: Vector) -> Vector:
    """Return the unit vector, or zero for near-zero input."""
    length = float(np.hypot(vector[0], vector[1]))
    if length <= NORMALIZE_EPSILON:
        return np.zeros(2, dtype=np.float64)
    return vector / length


def screen_axis(direction: NavigationDirection, *, y_down: bool = False) -> Vector:
    """Unit vector for a direction in the fixed screen frame."""
    x, y = _SCREEN_AXES[direction]
    if y_down:
        y = -y
    return np.array((x, y), dtype=np.float64)


def local_axis(direction: NavigationDirection, up: Vec2, right: Vec2) -> Vector:
    """Direction vector taken from host-reported local axes (not normalized)."""
    if direction is NavigationDirection.UP:
        return as_vector(up)
    if direction is NavigationDirection.DOWN:
        return -as_vector(up)
    if direction is NavigationDirection.LEFT:
        return -as_vector(right)
    return as_vector(right)


def required_cos(search_width: float) -> float:
    """Map a 0..1 search width onto the minimum accepted cosine."""
    return min(MAX_REQUIRED_COS, max(0.0, 1.0 - float(search_width)))


def cone_dots(direction: Vector, origin: Vector, points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cosine between ``direction`` and each origin->point vector.

    Points coinciding with the origin get a zero dot product.
    """
    offsets = points - origin
    lengths = np.hypot(offsets[:, 0], offsets[:, 1])
    dots = offsets @ direction
    safe = lengths > NORMALIZE_EPSILON
    result = np.zeros(len(points), dtype=np.float64)
    result[safe] = dots[safe] / lengths[safe]
    return result


def squared_distances(origin: Vector, points: NDArray[np.float64]) -> NDArray[np.float64]:
    offsets = points - origin
    return np.einsum("ij,ij->i", offsets, offsets)


def squared_distance(origin: Vector, point: Vector) -> float:
    offset = point - origin
    return float(offset @ offset)
