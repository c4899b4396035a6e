"""Kinematic integration: boids move at constant speed along their heading."""

import numpy as np


def integrate(position: np.ndarray, direction: np.ndarray, speed: float) -> np.ndarray:
    """Position after one frame of travel along `direction`."""
    return position + direction * speed
