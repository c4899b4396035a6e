"""3D vector helpers used by the simulation and the renderer.

All functions are pure: they take array-likes and return new float64 arrays,
never mutating their inputs.
"""

import math
import numpy as np


DEGENERATE_EPSILON = 1e-12  # Length below which a vector has no usable direction


class DegenerateVectorError(ValueError):
    """Raised when a vector is too short to be given a direction."""


def magnitude(vector) -> float:
    """Euclidean length of a 3D vector."""
    x, y, z = vector[0], vector[1], vector[2]
    return math.sqrt(x * x + y * y + z * z)


def normalize(vector) -> np.ndarray:
    """
    Scale a vector to unit length.

    Raises:
        DegenerateVectorError: if the vector has (near) zero or non-finite length
    """
    length = magnitude(vector)
    if not math.isfinite(length) or length < DEGENERATE_EPSILON:
        raise DegenerateVectorError(f"cannot normalize vector of length {length!r}")
    return np.asarray(vector, dtype=np.float64) / length


def unit_or_zero(vector) -> np.ndarray:
    """
    Unit vector along `vector`, or the zero vector if it is too short to have one.

    Raises:
        DegenerateVectorError: if the vector has a NaN or infinite component
    """
    length = magnitude(vector)
    if not math.isfinite(length):
        raise DegenerateVectorError(f"vector has non-finite length {length!r}")
    if length < DEGENERATE_EPSILON:
        return np.zeros(3)
    return np.asarray(vector, dtype=np.float64) / length


def is_zero(vector) -> bool:
    """True if every component is exactly zero."""
    return all(component == 0.0 for component in vector)


def cross(a, b) -> np.ndarray:
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ], dtype=np.float64)


def degree_to_radian(degree: float) -> float:
    return degree * math.pi / 180.0


def radian_to_degree(radian: float) -> float:
    return radian * 180.0 / math.pi


def pitch_degree(vector) -> float:
    """Elevation of a unit vector above the XZ plane, in degrees."""
    # Clip against drift just past +/-1 on renormalized vectors
    return radian_to_degree(math.asin(max(-1.0, min(1.0, vector[1]))))


def yaw_degree(vector) -> float:
    """Heading around the Y axis in degrees, 0 along +Z and 90 along +X."""
    return radian_to_degree(math.atan2(vector[0], vector[2]))


def direction_from_angles(pitch: float, yaw: float) -> np.ndarray:
    """
    Unit vector for a pitch/yaw pair given in radians.

    Inverse of `pitch_degree`/`yaw_degree` (up to the degree conversion).
    """
    cos_pitch = math.cos(pitch)
    return np.array([
        cos_pitch * math.sin(yaw),
        math.sin(pitch),
        cos_pitch * math.cos(yaw),
    ], dtype=np.float64)


def triangle_normal(p1, p2, p3) -> np.ndarray:
    """Unit normal of triangle (p1, p2, p3), right-hand winding."""
    p1 = np.asarray(p1, dtype=np.float64)
    edge_a = np.asarray(p2, dtype=np.float64) - p1
    edge_b = np.asarray(p3, dtype=np.float64) - p1
    return normalize(cross(edge_a, edge_b))
