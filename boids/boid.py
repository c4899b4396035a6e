"""Boid entity and the per-frame flock buffer."""

import numpy as np
from dataclasses import dataclass, field

from . import geometry


@dataclass
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Attributes:
        position: 3D position vector
        direction: unit heading vector; the boid always moves along it
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))

    @property
    def pitch(self) -> float:
        """Heading elevation in degrees."""
        return geometry.pitch_degree(self.direction)

    @property
    def yaw(self) -> float:
        """Heading around the vertical axis in degrees."""
        return geometry.yaw_degree(self.direction)


@dataclass
class FlockState:
    """
    Struct-of-arrays snapshot of every boid at one instant.

    Attributes:
        positions: (N, 3) float64 positions
        directions: (N, 3) float64 unit headings
    """
    positions: np.ndarray
    directions: np.ndarray

    def __post_init__(self):
        self.positions = np.asarray(self.positions, dtype=np.float64)
        self.directions = np.asarray(self.directions, dtype=np.float64)
        if self.positions.ndim != 2 or self.positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (N, 3), got {self.positions.shape}")
        if self.directions.shape != self.positions.shape:
            raise ValueError(
                f"directions shape {self.directions.shape} does not match "
                f"positions shape {self.positions.shape}"
            )

    def __len__(self) -> int:
        return self.positions.shape[0]

    @classmethod
    def empty(cls, count: int) -> "FlockState":
        return cls(np.zeros((count, 3)), np.zeros((count, 3)))

    def copy(self) -> "FlockState":
        """Deep value copy; shares no memory with this buffer."""
        return FlockState(self.positions.copy(), self.directions.copy())

    def boid(self, index: int) -> Boid:
        """Copy of the boid stored in slot `index`."""
        return Boid(self.positions[index].copy(), self.directions[index].copy())

    def store(self, index: int, boid: Boid):
        """Overwrite slot `index` with the given boid's values."""
        self.positions[index] = boid.position
        self.directions[index] = boid.direction


def random_direction(rng: np.random.Generator) -> np.ndarray:
    """Random unit heading with non-negative components."""
    while True:
        candidate = rng.random(3)
        if geometry.magnitude(candidate) > geometry.DEGENERATE_EPSILON:
            return geometry.normalize(candidate)


def spawn(count: int, rng: np.random.Generator,
          xz_range=(-4.0, 4.0), y_levels=(1, 8)) -> FlockState:
    """
    Create `count` boids scattered above the floor.

    Args:
        count: Number of boids
        rng: Source of randomness
        xz_range: (low, high) uniform range for X and Z
        y_levels: (low, high) inclusive integer range for Y

    Returns:
        A freshly allocated FlockState
    """
    low, high = xz_range
    y_low, y_high = y_levels

    state = FlockState.empty(count)
    for i in range(count):
        state.positions[i, 0] = rng.uniform(low, high)
        state.positions[i, 1] = float(rng.integers(y_low, y_high + 1))
        state.positions[i, 2] = rng.uniform(low, high)
        state.directions[i] = random_direction(rng)
    return state
