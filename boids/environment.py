"""Proximity of boids to the walls of the cylindrical tank."""

import math
from dataclasses import dataclass

from config import boids as config


@dataclass(frozen=True)
class Enclosure:
    """
    Cylinder around the Y axis, closed by a floor and a ceiling.

    Attributes:
        radius: Wall radius in the XZ plane
        height: Y coordinate of the ceiling
        floor_y: Y coordinate of the floor
        trigger_distance: Distance below which a boundary repels boids
    """
    radius: float = config.ENVIRONMENT["radius"]
    height: float = config.ENVIRONMENT["height"]
    floor_y: float = config.ENVIRONMENT["floor_y"]
    trigger_distance: float = config.BOIDS["environment_trigger"]

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if self.height <= self.floor_y:
            raise ValueError(
                f"ceiling ({self.height}) must be above the floor ({self.floor_y})"
            )

    def distance_to_wall(self, position) -> float:
        return self.radius - math.sqrt(position[0] * position[0] + position[2] * position[2])

    def distance_to_floor(self, position) -> float:
        return position[1] - self.floor_y

    def distance_to_ceiling(self, position) -> float:
        return self.height - position[1]

    def distances(self, position) -> tuple:
        """(wall, floor, ceiling) distances for a position."""
        return (
            self.distance_to_wall(position),
            self.distance_to_floor(position),
            self.distance_to_ceiling(position),
        )

    def min_distance_to_boundary(self, position) -> float:
        """Distance to whichever boundary is closest. Negative once outside."""
        return min(self.distances(position))

    def trigger(self, position) -> bool:
        """True if the position is close enough to a boundary to switch to avoidance."""
        return self.min_distance_to_boundary(position) < self.trigger_distance
