"""
Steering behaviors: environment avoidance and neighbor flocking.

Each behavior produces a target vector which is scaled by a strength and added
to the boid's heading, after which the heading is renormalized. Behaviors read
other boids only from the previous-frame snapshot.
"""

import math
import numpy as np
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from config import boids as config
from . import geometry
from .boid import Boid, FlockState
from .environment import Enclosure
from .neighbors import NeighborRecord


class Mode(Enum):
    """Which behavior branch a boid runs in a given frame."""
    ENVIRONMENT = "environment"
    FLOCK = "flock"


@dataclass(frozen=True)
class SteeringWeights:
    """Thresholds and strengths for the steering behaviors."""
    separation_trigger: float = config.BOIDS["separation_trigger"]
    environment_strength: float = config.BOIDS["environment_strength"]
    separation_strength: float = config.BOIDS["separation_strength"]
    alignment_strength: float = config.BOIDS["alignment_strength"]
    cohesion_strength: float = config.BOIDS["cohesion_strength"]
    epsilon: float = config.BOIDS["epsilon"]

    def __post_init__(self):
        for name in ("separation_trigger", "environment_strength", "separation_strength",
                     "alignment_strength", "cohesion_strength"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and non-negative, got {value}")
        if not math.isfinite(self.epsilon) or self.epsilon <= 0:
            raise ValueError(f"epsilon must be finite and positive, got {self.epsilon}")

    def inverse_square(self, strength: float, distance: float) -> float:
        """Softened `strength / d^2` weight."""
        return strength / (distance * distance + self.epsilon)


class Steering:
    """
    Applies steering behaviors to boids.

    Holds no per-boid state; the only mutable attribute is the running count
    of blends that collapsed to a zero vector and were skipped.
    """

    def __init__(self, weights: SteeringWeights = None):
        self.weights = weights or SteeringWeights()
        self.degenerate_count = 0

    # ------------------------------------------------------------------
    # Target vectors
    # ------------------------------------------------------------------

    def environment_target(self, boid: Boid, enclosure: Enclosure) -> np.ndarray:
        """Unit vector steering the boid away from every boundary it is near."""
        w = self.weights
        x, _, z = boid.position
        wall, floor, ceiling = enclosure.distances(boid.position)
        target = np.zeros(3)

        if wall < enclosure.trigger_distance:
            push = w.inverse_square(w.environment_strength, wall)
            target[0] -= x * push
            target[2] -= z * push

        if floor < enclosure.trigger_distance:
            target[1] += w.inverse_square(w.environment_strength, floor)

        if ceiling < enclosure.trigger_distance:
            target[1] -= w.inverse_square(w.environment_strength, ceiling)

        return geometry.unit_or_zero(target - boid.direction)

    def alignment_target(
        self,
        boid: Boid,
        neighbors: Sequence[NeighborRecord],
        previous: FlockState
    ) -> np.ndarray:
        """Unit vector from the boid's heading toward the neighbors' mean heading."""
        indices = [n.index for n in neighbors]
        mean_direction = previous.directions[indices].mean(axis=0)
        return geometry.unit_or_zero(mean_direction - boid.direction)

    def separation_push(
        self,
        boid: Boid,
        nearest: NeighborRecord,
        previous: FlockState
    ) -> Optional[np.ndarray]:
        """Weighted push away from the nearest neighbor, None if it is far enough."""
        w = self.weights
        if nearest.distance >= w.separation_trigger:
            return None

        away = geometry.unit_or_zero(boid.position - previous.positions[nearest.index])
        return away * w.inverse_square(w.separation_strength, nearest.distance)

    def cohesion_target(
        self,
        boid: Boid,
        neighbors: Sequence[NeighborRecord],
        previous: FlockState
    ) -> np.ndarray:
        """
        Unit vector toward the inverse-square weighted center of the neighbors.

        The cohesion strength is applied when blending; inside the weighted
        mean it would cancel out.
        """
        w = self.weights
        weighted_sum = np.zeros(3)
        total_weight = 0.0

        for neighbor in neighbors:
            weight = w.inverse_square(1.0, neighbor.distance)
            weighted_sum += previous.positions[neighbor.index] * weight
            total_weight += weight

        center = weighted_sum / total_weight
        return geometry.unit_or_zero(center - boid.position)

    # ------------------------------------------------------------------
    # Blending
    # ------------------------------------------------------------------

    def steer(self, direction: np.ndarray, target: np.ndarray, strength: float) -> np.ndarray:
        """
        Blend `target * strength` into a unit heading and renormalize.

        If the blend cancels out to (near) zero the heading is returned
        unchanged and the event is reported.
        """
        try:
            return geometry.normalize(direction + target * strength)
        except geometry.DegenerateVectorError as e:
            self.degenerate_count += 1
            print(f"[Boids] Skipped degenerate steering step: {e}")
            return np.array(direction, dtype=np.float64)

    # ------------------------------------------------------------------
    # Behavior branches
    # ------------------------------------------------------------------

    def choose_mode(self, boid: Boid, enclosure: Enclosure) -> Mode:
        if enclosure.trigger(boid.position):
            return Mode.ENVIRONMENT
        return Mode.FLOCK

    def handle_environment(self, boid: Boid, enclosure: Enclosure) -> Boid:
        """Turn the boid away from nearby walls, floor and ceiling."""
        target = self.environment_target(boid, enclosure)
        direction = self.steer(boid.direction, target, self.weights.environment_strength)
        return replace(boid, direction=direction)

    def handle_neighbors(
        self,
        boid: Boid,
        neighbors: Sequence[NeighborRecord],
        previous: FlockState
    ) -> Boid:
        """
        Apply alignment, separation and cohesion, in that order.

        Each step renormalizes, so later steps see the adjusted heading.
        """
        w = self.weights
        direction = boid.direction

        target = self.alignment_target(boid, neighbors, previous)
        direction = self.steer(direction, target, w.alignment_strength)

        push = self.separation_push(boid, neighbors[0], previous)
        if push is not None:
            direction = self.steer(direction, push, 1.0)

        target = self.cohesion_target(boid, neighbors, previous)
        direction = self.steer(direction, target, w.cohesion_strength)

        return replace(boid, direction=direction)
