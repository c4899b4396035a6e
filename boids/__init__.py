"""Boids flocking simulation core."""

from .boid import Boid, FlockState
from .behavior import Mode, Steering, SteeringWeights
from .environment import Enclosure
from .flock import Flock
from .neighbors import NeighborRecord, find_neighbors

__all__ = [
    "Boid", "FlockState", "Mode", "Steering", "SteeringWeights",
    "Enclosure", "Flock", "NeighborRecord", "find_neighbors",
]
