"""Flock management: double-buffered boid state and the per-frame update."""

import numpy as np
from typing import Iterator, Optional, Tuple, Union

from config import boids as config
from .boid import Boid, FlockState, spawn
from .behavior import Mode, Steering, SteeringWeights
from .environment import Enclosure
from .neighbors import find_neighbors, nearest_k
from . import physics


# ============================================================================
# FLOCK CLASS
# ============================================================================

class Flock:
    """
    Fixed-size flock with a mutable current buffer and a frozen previous one.

    Every boid's behaviors read other boids only from `previous`, so within a
    frame no boid sees another's partially updated state. `update()` runs the
    frame and then publishes `current` into `previous`.
    """

    def __init__(
        self,
        num_boids: int = config.BOIDS["count"],
        neighborhood_size: int = config.BOIDS["neighborhood_size"],
        speed: float = config.BOIDS["speed"],
        enclosure: Optional[Enclosure] = None,
        weights: Optional[SteeringWeights] = None,
        warmup: bool = True
    ):
        if num_boids < 2:
            raise ValueError(f"a flock needs at least 2 boids, got {num_boids}")
        if not 1 <= neighborhood_size <= num_boids - 1:
            raise ValueError(
                f"neighborhood_size must be in [1, {num_boids - 1}], got {neighborhood_size}"
            )
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")

        self.num_boids = num_boids
        self.neighborhood_size = neighborhood_size
        self.speed = float(speed)
        self.enclosure = enclosure or Enclosure()
        self.steering = Steering(weights)

        self.spawn_xz = config.BOIDS["spawn_xz"]
        self.spawn_y_levels = config.BOIDS["spawn_y_levels"]

        self.current = FlockState.empty(num_boids)
        self.previous = FlockState.empty(num_boids)

        # Stats for the last completed frame
        self.frame = 0
        self.environment_count = 0

        if warmup:
            self._warmup_numba()

    @property
    def degenerate_count(self) -> int:
        """Steering steps skipped because the blended heading vanished."""
        return self.steering.degenerate_count

    def _warmup_numba(self):
        """Pre-compile Numba functions."""
        pos = np.random.rand(8, 3).astype(np.float64)
        nearest_k(pos[0], pos, 0, 3)

    def initialize(self, rng: Union[np.random.Generator, int, None] = None):
        """
        Scatter boids with random positions and headings, then publish.

        Args:
            rng: numpy Generator, integer seed, or None for fresh entropy
        """
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)

        self.current = spawn(
            self.num_boids, rng,
            xz_range=self.spawn_xz,
            y_levels=self.spawn_y_levels
        )
        self.frame = 0
        self.environment_count = 0
        self.publish()
        print(f"[Boids] Initialized {self.num_boids} boids (K={self.neighborhood_size})")

    def publish(self):
        """Freeze the current buffer as the snapshot read by the next frame."""
        self.previous = self.current.copy()

    def neighbors_of(self, index: int):
        """K nearest neighbors of slot `index` in the previous frame."""
        return find_neighbors(
            self.current.positions[index],
            self.previous.positions,
            self.neighborhood_size,
            subject_index=index
        )

    def steer_boid(self, index: int) -> Tuple[Boid, Mode]:
        """
        Compute the new heading for slot `index` without touching any buffer.

        Returns:
            (boid with updated direction, behavior branch taken)
        """
        boid = self.current.boid(index)
        mode = self.steering.choose_mode(boid, self.enclosure)

        if mode is Mode.ENVIRONMENT:
            boid = self.steering.handle_environment(boid, self.enclosure)
        else:
            boid = self.steering.handle_neighbors(boid, self.neighbors_of(index), self.previous)

        return boid, mode

    def update_boid(self, index: int) -> Mode:
        """Steer and move one boid, writing only its slot of `current`."""
        boid, mode = self.steer_boid(index)
        boid.position = physics.integrate(boid.position, boid.direction, self.speed)
        self.current.store(index, boid)
        return mode

    def update(self):
        """Advance the whole flock by one frame and publish the result."""
        environment_count = 0
        for i in range(self.num_boids):
            if self.update_boid(i) is Mode.ENVIRONMENT:
                environment_count += 1

        self.publish()
        self.frame += 1
        self.environment_count = environment_count

    def view(self) -> Tuple[np.ndarray, np.ndarray]:
        """Read-only (positions, directions) of the last published frame."""
        positions = self.previous.positions.view()
        directions = self.previous.directions.view()
        positions.flags.writeable = False
        directions.flags.writeable = False
        return positions, directions

    def boids(self) -> Iterator[Boid]:
        """Copies of every boid of the last published frame, in slot order."""
        for i in range(self.num_boids):
            yield self.previous.boid(i)
